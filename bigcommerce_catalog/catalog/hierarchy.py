"""
Hierarchical category names ("Shoes > Running > Trail").

Parent references come straight from the API, so the walk is iterative and
tracks visited IDs: a dangling parent raises BrokenHierarchyError and a loop
raises CategoryCycleError instead of recursing forever.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Sequence

from bigcommerce_catalog.errors import BrokenHierarchyError, CategoryCycleError, HierarchyError
from bigcommerce_catalog.integrations.contracts.categories import Category

logger = logging.getLogger(__name__)

SEPARATOR = " > "


def build_id_index(categories: Sequence[Category]) -> Dict[int, int]:
    """Map each category ID to its position. Later duplicates win."""
    return {category.id: position for position, category in enumerate(categories)}


def resolve_full_name(categories: Sequence[Category], position: int, index: Dict[int, int]) -> str:
    start = categories[position]
    names: List[str] = []
    chain: List[int] = []
    # Positions, not IDs: with duplicated IDs each occurrence is its own node
    seen = set()
    current = start

    while True:
        if position in seen:
            raise CategoryCycleError(start.id, chain + [current.id])
        seen.add(position)
        chain.append(current.id)
        names.append(current.name)

        if current.is_root:
            break
        parent_position = index.get(current.parent_id)
        if parent_position is None:
            raise BrokenHierarchyError(start.id, current.parent_id)
        position = parent_position
        current = categories[position]

    return SEPARATOR.join(reversed(names))


def decorate_categories(categories: Sequence[Category]) -> List[int]:
    """
    Fill the derived ``url`` and ``full_name`` fields in place.

    Returns the IDs of categories whose parent chain could not be resolved;
    those keep their own name as ``full_name``.
    """
    index = build_id_index(categories)
    unresolved: List[int] = []

    for position, category in enumerate(categories):
        category.url = category.custom_url.url
        try:
            category.full_name = resolve_full_name(categories, position, index)
        except HierarchyError as exc:
            logger.warning(f"Falling back to plain name for category {category.id}: {exc}")
            category.full_name = category.name
            unresolved.append(category.id)

    return unresolved
