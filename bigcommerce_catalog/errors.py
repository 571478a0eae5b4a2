"""
Error taxonomy for the BigCommerce category client.

Page-level errors are raised by ``get_categories``. ``get_all_categories``
never raises them; it folds the last one into ``CategoryFetchResult.error``
so callers keep whatever pages were already fetched.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional


class CategoryClientError(Exception):
    def __init__(self, message: str, *, payload: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.payload = payload or {}


class NoContentError(CategoryClientError):
    """The API answered 204: the requested page has no categories."""

    def __init__(self, page: int) -> None:
        super().__init__(f"No content returned for categories page {page}.")
        self.page = page


class CategoryRequestError(CategoryClientError):
    """Transport failure or non-2xx status for a single page."""

    def __init__(
        self,
        message: str,
        *,
        page: int,
        status_code: Optional[int] = None,
        retryable: bool = True,
        payload: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, payload=payload)
        self.page = page
        self.status_code = status_code
        self.retryable = retryable


class CategoryDecodeError(CategoryClientError, ValueError):
    """The response body is not a valid categories envelope."""

    def __init__(self, message: str, *, page: int, payload: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message, payload=payload)
        self.page = page


class MaxRetriesReachedError(CategoryClientError):
    def __init__(self, page: int, attempts: int) -> None:
        super().__init__(f"max retries reached on categories page {page} after {attempts} attempts")
        self.page = page
        self.attempts = attempts


class HierarchyError(CategoryClientError):
    """A category's parent chain cannot be turned into a full name."""


class BrokenHierarchyError(HierarchyError):
    def __init__(self, category_id: int, missing_parent_id: int) -> None:
        super().__init__(
            f"Category {category_id} references parent {missing_parent_id}, "
            "which is not in the fetched categories."
        )
        self.category_id = category_id
        self.missing_parent_id = missing_parent_id


class CategoryCycleError(HierarchyError):
    def __init__(self, category_id: int, cycle: List[int]) -> None:
        path = " -> ".join(str(i) for i in cycle)
        super().__init__(f"Category {category_id} has a cyclic parent chain: {path}")
        self.category_id = category_id
        self.cycle = cycle
