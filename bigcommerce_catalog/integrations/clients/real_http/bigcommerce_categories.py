"""
BigCommerce Categories HTTP Client.

Purpose:
- Fetches a store's category listing from the v3 catalog API, one page per request
- Decodes the paginated envelope into Category contracts

Implementation notes:
- Only the whitelisted fields are requested (include_fields)
- The requests.Session is injectable; the default one retries 429/5xx at the transport level
- Each response is closed on every exit path
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Tuple

import requests
from pydantic import ValidationError
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from bigcommerce_catalog.errors import CategoryDecodeError, CategoryRequestError, NoContentError
from bigcommerce_catalog.integrations.clients.base import CategoryClient
from bigcommerce_catalog.integrations.contracts.categories import Category, CategoryPage
from bigcommerce_catalog.utils.config_loader import CatalogClientConfig
from bigcommerce_catalog.utils.rate_limiter import RateLimiter

logger = logging.getLogger(__name__)

CATEGORIES_PATH = "/v3/catalog/categories"
INCLUDE_FIELDS = "name,parent_id,is_visible,custom_url"
RETRY_STATUSES = [429, 500, 502, 503, 504]


def _is_retryable_status(status_code: Optional[int]) -> bool:
    return status_code is None or status_code == 429 or status_code >= 500


class BigCommerceCategoriesClient(CategoryClient):
    def __init__(
        self,
        config: Optional[CatalogClientConfig] = None,
        session: Optional[requests.Session] = None,
        rate_limiter: Optional[RateLimiter] = None,
    ) -> None:
        self.config = config or CatalogClientConfig()
        super().__init__(
            max_retries=self.config.max_retries,
            retry_backoff_seconds=self.config.retry_backoff_seconds,
        )
        self.session = session or self._create_session()
        if rate_limiter is None and self.config.rate_limit.enabled:
            rate_limiter = RateLimiter(self.config.rate_limit.requests_per_minute)
        self.rate_limiter = rate_limiter

    def _create_session(self) -> requests.Session:
        session = requests.Session()
        retry_strategy = Retry(
            total=self.config.transport_retries,
            backoff_factor=1,
            status_forcelist=RETRY_STATUSES,
            allowed_methods=["GET"],
            raise_on_status=False,
        )
        adapter = HTTPAdapter(max_retries=retry_strategy)
        session.mount("http://", adapter)
        session.mount("https://", adapter)
        return session

    def _headers(self, auth_token: str) -> Dict[str, str]:
        return {
            "X-Auth-Token": auth_token,
            "Accept": "application/json",
            "Content-Type": "application/json",
        }

    def categories_url(self, context: str) -> str:
        if context.startswith(("http://", "https://")):
            base = context.rstrip("/")
        else:
            base = f"{self.config.api_base_url.rstrip('/')}/{context.strip('/')}"
        return f"{base}{CATEGORIES_PATH}"

    def get_categories(self, context: str, auth_token: str, page: int) -> Tuple[List[Category], bool]:
        url = self.categories_url(context)
        params: Dict[str, object] = {"include_fields": INCLUDE_FIELDS, "page": page}
        if self.config.page_limit:
            params["limit"] = self.config.page_limit

        if self.rate_limiter:
            self.rate_limiter.wait_if_needed()

        try:
            with self.session.get(
                url,
                params=params,
                headers=self._headers(auth_token),
                timeout=self.config.timeout_seconds,
            ) as response:
                if self.rate_limiter:
                    self.rate_limiter.update_from_headers(response.headers)
                if response.status_code == 204:
                    raise NoContentError(page)
                response.raise_for_status()
                try:
                    payload = response.json()
                except ValueError as exc:
                    raise CategoryDecodeError(
                        f"Categories page {page} is not valid JSON: {exc}", page=page
                    ) from exc
        except requests.exceptions.HTTPError as exc:
            status_code = exc.response.status_code if exc.response is not None else None
            raise CategoryRequestError(
                f"HTTP {status_code} fetching categories page {page}",
                page=page,
                status_code=status_code,
                retryable=_is_retryable_status(status_code),
            ) from exc
        except requests.exceptions.Timeout as exc:
            raise CategoryRequestError(f"Timeout fetching categories page {page}: {exc}", page=page) from exc
        except requests.exceptions.RequestException as exc:
            raise CategoryRequestError(
                f"Error fetching categories page {page}: {type(exc).__name__} - {exc}", page=page
            ) from exc

        try:
            envelope = CategoryPage.model_validate(payload)
        except ValidationError as exc:
            raise CategoryDecodeError(
                f"Categories page {page} failed validation: {exc}",
                page=page,
                payload=payload if isinstance(payload, dict) else {"body": payload},
            ) from exc

        pagination = envelope.meta.pagination
        logger.debug(
            f"Fetched categories page {pagination.current_page}/{pagination.total_pages} "
            f"({len(envelope.data)} items)"
        )
        return envelope.data, envelope.has_more
