"""
Real HTTP integration clients.

These clients talk to the live BigCommerce API.

Important:
- Must implement the same interface as the mock clients (CategoryClient)
- Must return data shaped according to bigcommerce_catalog/integrations/contracts/*
"""

from .bigcommerce_categories import BigCommerceCategoriesClient

__all__ = ["BigCommerceCategoriesClient"]
