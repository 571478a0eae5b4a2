"""
Category clients: the live BigCommerce client and a local mock.
"""

from .base import CategoryClient
from .mocks import LocalCategoriesClient
from .real_http import BigCommerceCategoriesClient

__all__ = ["BigCommerceCategoriesClient", "CategoryClient", "LocalCategoriesClient"]
