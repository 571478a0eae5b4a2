"""
Contracts (data models).

This folder defines the request/response shapes for the BigCommerce catalogue
integration. Both the real HTTP client and the local mock client return these
models, so callers never depend on raw payload dicts.
"""

from .categories import Category, CategoryFetchResult, CategoryPage, CustomURL, PageMeta, Pagination

__all__ = [
    "Category",
    "CategoryFetchResult",
    "CategoryPage",
    "CustomURL",
    "PageMeta",
    "Pagination",
]
