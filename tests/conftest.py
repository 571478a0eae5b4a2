"""Pytest fixtures and fakes for the category client tests."""

import json

import pytest
import requests

from bigcommerce_catalog.integrations.clients.real_http.bigcommerce_categories import BigCommerceCategoriesClient
from bigcommerce_catalog.utils.config_loader import CatalogClientConfig, RateLimitConfig


def make_category(cid, parent_id=0, name=None, url=None, customized=False, visible=True):
    return {
        "id": cid,
        "parent_id": parent_id,
        "name": name or f"Category {cid}",
        "is_visible": visible,
        "custom_url": {"url": url or f"/category-{cid}/", "is_customized": customized},
    }


def make_page(items, current_page=1, total_pages=1):
    return {
        "data": items,
        "meta": {
            "pagination": {
                "total": len(items),
                "count": len(items),
                "per_page": 50,
                "current_page": current_page,
                "total_pages": total_pages,
                "links": {"current": f"?page={current_page}"},
                "too_many": False,
            }
        },
    }


class FakeResponse:
    def __init__(self, status_code=200, payload=None, text=None, headers=None):
        self.status_code = status_code
        self._payload = payload
        self._text = text
        self.headers = headers or {}
        self.closed = False

    def json(self):
        if self._text is not None:
            return json.loads(self._text)
        return self._payload

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)

    def close(self):
        self.closed = True

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()
        return False


class FakeSession:
    """Replays queued responses; an Exception in the queue is raised instead."""

    def __init__(self, responses):
        self.responses = list(responses)
        self.calls = []

    def get(self, url, params=None, headers=None, timeout=None):
        self.calls.append({"url": url, "params": params, "headers": headers, "timeout": timeout})
        if not self.responses:
            raise AssertionError(f"Unexpected request #{len(self.calls)} to {url}")
        item = self.responses.pop(0)
        if isinstance(item, Exception):
            raise item
        return item

    @property
    def pages_requested(self):
        return [call["params"]["page"] for call in self.calls]


@pytest.fixture
def client_config():
    return CatalogClientConfig(
        max_retries=2,
        retry_backoff_seconds=0.0,
        rate_limit=RateLimitConfig(enabled=False),
    )


@pytest.fixture
def make_client(client_config):
    def _make(responses, config=None, **kwargs):
        session = FakeSession(responses)
        client = BigCommerceCategoriesClient(config=config or client_config, session=session, **kwargs)
        return client, session

    return _make
