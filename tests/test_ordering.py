"""
tests/test_ordering
~~~~~~~~~~~~~~~~~~~
"""

import pytest

from catbar.core.ordering import CategoryCoordinates, index_lookup, sort_by_category


@pytest.mark.unit
def test_index_lookup_keeps_first_index():
    """
    Ensures repeated labels keep their first position.
    """
    assert index_lookup(["b", "a", "b"]) == {"b": 0, "a": 1}
    assert index_lookup(None) is None


@pytest.mark.api
def test_sort_by_category_puts_ordered_labels_first():
    """
    Ensures explicitly ordered labels precede unordered ones, which keep first-seen order.
    """
    items = ["u1", "c", "u2", "a", "b", "u3"]
    order = index_lookup(["a", "b", "c"])

    assert sort_by_category(items, str, order) == ["a", "b", "c", "u1", "u2", "u3"]


@pytest.mark.api
def test_sort_by_category_without_order_is_identity():
    """
    Ensures the natural order is kept when no explicit order is given.
    """
    items = ["z", "a", "m"]

    assert sort_by_category(items, str, None) == items
    assert sort_by_category(items, str, {}) == items


@pytest.mark.api
@pytest.mark.parametrize("bar_width", [1.0, 10.0, 17.5])
def test_coordinates_evenly_spaced(bar_width):
    """
    Ensures category coordinates are evenly spaced by 1.2 bar widths.

    Args:
        bar_width (float): Bar width under test.
    """
    coords = CategoryCoordinates(bar_width)
    gaps = [coords(i + 1) - coords(i) for i in range(10)]

    assert coords(0) == 0.0
    assert all(g == pytest.approx(bar_width * 1.2) for g in gaps)


@pytest.mark.api
def test_grouped_ticks_sit_at_group_centre():
    """
    Ensures grouped ticks are centred on the bars of their group.
    """
    coords = CategoryCoordinates(10.0, group_size=3)

    assert coords.group_base(1) == pytest.approx(36.0)
    assert coords.group_offset(2) == pytest.approx(24.0)
    assert coords.tick(0) == pytest.approx(12.0)
    assert coords.tick(1) == pytest.approx(48.0)
