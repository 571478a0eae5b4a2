"""
Mock integration clients.

These clients return category pages without calling the BigCommerce API.
They follow the SAME interface as the real HTTP client (CategoryClient), so
callers can switch between them without code changes.
"""

from .local_categories import LocalCategoriesClient

__all__ = ["LocalCategoriesClient"]
