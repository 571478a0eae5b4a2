"""
BigCommerce category catalogue client.

Fetches a store's categories page by page and derives a hierarchical
"Parent > Child" name for each of them.
"""

from .errors import (
    BrokenHierarchyError,
    CategoryClientError,
    CategoryCycleError,
    CategoryDecodeError,
    CategoryRequestError,
    HierarchyError,
    MaxRetriesReachedError,
    NoContentError,
)
from .integrations import (
    BigCommerceCategoriesClient,
    Category,
    CategoryFetchResult,
    LocalCategoriesClient,
)

__all__ = [
    "BigCommerceCategoriesClient", "LocalCategoriesClient",
    "Category", "CategoryFetchResult",
    "CategoryClientError", "NoContentError", "CategoryRequestError", "CategoryDecodeError",
    "MaxRetriesReachedError", "HierarchyError", "BrokenHierarchyError", "CategoryCycleError",
]
