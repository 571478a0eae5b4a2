"""
Local Categories Client (Mock/Local).

Purpose:
- Serves category pages from a local JSON file instead of the BigCommerce API
- Lets the pagination and naming logic run without store credentials

The file holds a list of page envelopes, exactly as the API returns them:
[{"data": [...], "meta": {"pagination": {...}}}, ...]
Page N is the Nth envelope; pages past the end answer with NoContentError.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from pydantic import ValidationError

from bigcommerce_catalog.errors import CategoryDecodeError, NoContentError
from bigcommerce_catalog.integrations.clients.base import CategoryClient
from bigcommerce_catalog.integrations.contracts.categories import Category, CategoryPage

logger = logging.getLogger(__name__)


class LocalCategoriesClient(CategoryClient):
    def __init__(
        self,
        fixture_path: Optional[Path] = None,
        pages: Optional[List[Dict[str, Any]]] = None,
        max_retries: int = 0,
    ) -> None:
        super().__init__(max_retries=max_retries, retry_backoff_seconds=0.0)
        if pages is None:
            if fixture_path is None:
                raise ValueError("LocalCategoriesClient needs either fixture_path or pages")
            with open(fixture_path, "r", encoding="utf-8") as f:
                pages = json.load(f)
        if not isinstance(pages, list):
            raise ValueError("Category fixture must be a list of page envelopes")
        self.pages = pages
        self.requested_pages: List[int] = []

    def get_categories(self, context: str, auth_token: str, page: int) -> Tuple[List[Category], bool]:
        logger.debug(f"[MOCK] Serving categories page {page} for {context}")
        self.requested_pages.append(page)
        if page < 1 or page > len(self.pages):
            raise NoContentError(page)

        raw = self.pages[page - 1]
        try:
            envelope = CategoryPage.model_validate(raw)
        except ValidationError as exc:
            raise CategoryDecodeError(
                f"Categories page {page} failed validation: {exc}",
                page=page,
                payload=raw if isinstance(raw, dict) else {"body": raw},
            ) from exc
        return envelope.data, envelope.has_more
