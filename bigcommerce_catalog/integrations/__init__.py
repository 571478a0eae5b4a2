"""
Integrations layer.
This package contains all code used to communicate with BigCommerce.

Key rule:
- Callers MUST NOT call the BigCommerce API directly.
- They use a category client (under bigcommerce_catalog/integrations/clients),
  either the real HTTP one or the local mock, and receive contract models.
"""

from .clients import BigCommerceCategoriesClient, CategoryClient, LocalCategoriesClient
from .contracts import Category, CategoryFetchResult, CategoryPage, CustomURL, Pagination

__all__ = [
    # clients
    "BigCommerceCategoriesClient", "CategoryClient", "LocalCategoriesClient",
    # contracts
    "Category", "CategoryFetchResult", "CategoryPage", "CustomURL", "Pagination",
]
