import pytest

from bigcommerce_catalog.catalog.hierarchy import (
    build_id_index,
    decorate_categories,
    resolve_full_name,
)
from bigcommerce_catalog.errors import BrokenHierarchyError, CategoryCycleError
from bigcommerce_catalog.integrations.contracts.categories import Category
from conftest import make_category


def _categories(*raw):
    return [Category.model_validate(item) for item in raw]


def _resolve(categories, position):
    return resolve_full_name(categories, position, build_id_index(categories))


def test_root_category_resolves_to_own_name():
    categories = _categories(make_category(1, 0, "Shoes"))

    assert _resolve(categories, 0) == "Shoes"


def test_child_category_is_prefixed_with_parent_name():
    categories = _categories(make_category(1, 0, "Shoes"), make_category(2, 1, "Running"))

    assert _resolve(categories, 1) == "Shoes > Running"


def test_deep_chain_lists_every_ancestor():
    categories = _categories(
        make_category(4, 3, "Waterproof"),
        make_category(1, 0, "Shoes"),
        make_category(3, 2, "Trail"),
        make_category(2, 1, "Running"),
    )

    assert _resolve(categories, 0) == "Shoes > Running > Trail > Waterproof"


def test_missing_parent_raises_broken_hierarchy():
    categories = _categories(make_category(1, 0, "Shoes"), make_category(3, 2, "Trail"))

    with pytest.raises(BrokenHierarchyError) as exc_info:
        _resolve(categories, 1)

    assert exc_info.value.category_id == 3
    assert exc_info.value.missing_parent_id == 2


def test_missing_grandparent_reports_the_starting_category():
    categories = _categories(make_category(2, 7, "Running"), make_category(3, 2, "Trail"))

    with pytest.raises(BrokenHierarchyError) as exc_info:
        _resolve(categories, 1)

    assert exc_info.value.category_id == 3
    assert exc_info.value.missing_parent_id == 7


def test_cycle_is_detected():
    categories = _categories(make_category(1, 2, "A"), make_category(2, 3, "B"), make_category(3, 1, "C"))

    with pytest.raises(CategoryCycleError) as exc_info:
        _resolve(categories, 0)

    assert exc_info.value.cycle == [1, 2, 3, 1]


def test_self_parent_is_a_cycle():
    categories = _categories(make_category(5, 5, "Loop"))

    with pytest.raises(CategoryCycleError):
        _resolve(categories, 0)


def test_index_maps_ids_to_positions_with_last_duplicate_winning():
    categories = _categories(make_category(10), make_category(20), make_category(10, name="Again"))

    assert build_id_index(categories) == {10: 2, 20: 1}


def test_duplicated_id_reached_through_its_later_occurrence_is_not_a_cycle():
    categories = _categories(
        make_category(5, 6, "Sale"),
        make_category(6, 5, "Shoes"),
        make_category(5, 0, "Store"),
    )

    assert _resolve(categories, 0) == "Store > Shoes > Sale"


def test_decorate_sets_url_regardless_of_customized_flag():
    categories = _categories(
        make_category(1, 0, "Shoes", url="/shoes/", customized=False),
        make_category(2, 1, "Running", url="/shoes/", customized=True),
    )

    unresolved = decorate_categories(categories)

    assert unresolved == []
    assert [c.url for c in categories] == ["/shoes/", "/shoes/"]
    assert [c.full_name for c in categories] == ["Shoes", "Shoes > Running"]


def test_decorate_falls_back_to_own_name_for_broken_chains():
    categories = _categories(
        make_category(1, 0, "Shoes"),
        make_category(2, 99, "Orphan"),
        make_category(3, 4, "Ping"),
        make_category(4, 3, "Pong"),
    )

    unresolved = decorate_categories(categories)

    assert unresolved == [2, 3, 4]
    assert [c.full_name for c in categories] == ["Shoes", "Orphan", "Ping", "Pong"]


def test_decorate_empty_list():
    assert decorate_categories([]) == []
