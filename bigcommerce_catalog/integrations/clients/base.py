"""
Shared category client interface.

Real and mock clients only differ in how a single page is obtained
(``get_categories``). Walking the pages, retrying failed pages and
decorating the result lives here so both behave identically.
"""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from bigcommerce_catalog.catalog.hierarchy import decorate_categories
from bigcommerce_catalog.errors import (
    CategoryDecodeError,
    CategoryRequestError,
    MaxRetriesReachedError,
    NoContentError,
)
from bigcommerce_catalog.integrations.contracts.categories import Category, CategoryFetchResult

logger = logging.getLogger(__name__)


class CategoryClient(ABC):
    def __init__(self, max_retries: int = 3, retry_backoff_seconds: float = 1.0) -> None:
        self.max_retries = max_retries
        self.retry_backoff_seconds = retry_backoff_seconds

    @abstractmethod
    def get_categories(self, context: str, auth_token: str, page: int) -> Tuple[List[Category], bool]:
        """Fetch one page. Returns the page's categories and whether more pages follow.

        Raises NoContentError, CategoryRequestError or CategoryDecodeError.
        """

    def get_all_categories(
        self,
        context: str,
        auth_token: str,
        max_retries: Optional[int] = None,
    ) -> CategoryFetchResult:
        """
        Fetch every page of the store's categories and resolve their full names.

        Args:
            context: Store API namespace, e.g. "stores/abc123"
            auth_token: The store's X-Auth-Token
            max_retries: Failed attempts tolerated per page; defaults to the client's setting

        Returns:
            CategoryFetchResult holding all categories fetched so far. ``error`` is set
            when pagination stopped early; earlier pages are kept either way.
        """
        if max_retries is None:
            max_retries = self.max_retries

        result = CategoryFetchResult()
        page = 1
        more = True
        retries = 0

        while more:
            try:
                categories, more = self.get_categories(context, auth_token, page)
            except NoContentError:
                logger.info(f"Categories page {page} has no content; stopping pagination")
                break
            except CategoryDecodeError as exc:
                logger.error(f"Could not decode categories page {page}: {exc}")
                result.error = exc
                break
            except CategoryRequestError as exc:
                logger.error(f"Failed to fetch categories page {page}: {exc}")
                if not exc.retryable:
                    result.error = exc
                    break
                retries += 1
                if retries > max_retries:
                    error = MaxRetriesReachedError(page, retries)
                    error.__cause__ = exc
                    result.error = error
                    break
                self._wait_before_retry(page, retries)
                continue

            result.categories.extend(categories)
            result.pages_fetched += 1
            retries = 0
            page += 1

        result.unresolved_ids = decorate_categories(result.categories)
        logger.info(
            f"Fetched {len(result.categories)} categories from {result.pages_fetched} pages"
            + ("" if result.ok else f" (stopped early: {result.error})")
        )
        return result

    def _wait_before_retry(self, page: int, attempt: int) -> None:
        delay = self.retry_backoff_seconds * (2 ** (attempt - 1))
        logger.warning(f"Retrying categories page {page} (attempt {attempt + 1}) in {delay:.2f}s")
        if delay > 0:
            time.sleep(delay)
