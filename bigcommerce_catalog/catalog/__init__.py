"""
Catalogue post-processing applied after categories are fetched.
"""

from .hierarchy import SEPARATOR, build_id_index, decorate_categories, resolve_full_name

__all__ = ["SEPARATOR", "build_id_index", "decorate_categories", "resolve_full_name"]
