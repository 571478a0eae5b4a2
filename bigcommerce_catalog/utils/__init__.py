"""
Utility modules for the catalogue client
"""
from .config_loader import CatalogClientConfig, RateLimitConfig, load_catalog_config
from .rate_limiter import RateLimiter

__all__ = [
    'CatalogClientConfig',
    'RateLimitConfig',
    'load_catalog_config',
    'RateLimiter',
]
