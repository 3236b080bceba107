"""
tests/test_geometry
~~~~~~~~~~~~~~~~~~~
"""

import pytest

from catbar import AxisSeriesPoint, ColorAllocator, make_plot_data
from catbar.core.geometry import (
    make_bar_specs,
    max_major_count,
    zero_count_offset,
)
from catbar.core.ordering import CategoryCoordinates, index_lookup


def _build(points, *, stacked, percentage=False, minor_order=None, major_order=None):
    data = make_plot_data(points, [])
    group_size = 1 if stacked else len(data)
    offset = zero_count_offset(
        max_major_count(data, stacked=stacked, percentage=percentage), stacked=stacked
    )
    return make_bar_specs(
        data,
        index_lookup(minor_order),
        index_lookup(major_order),
        ColorAllocator(palette=["#aa0000", "#00aa00", "#0000aa"]),
        CategoryCoordinates(10.0, group_size),
        stacked=stacked,
        percentage=percentage,
        zero_offset=offset,
    )


@pytest.mark.api
def test_stacked_bars_share_coordinate_and_stack(scenario_points):
    """
    Ensures stacked segments share their major coordinate and rest on earlier segments.

    Args:
        scenario_points (List[AxisSeriesPoint]): A×X, A×Y, B×X points.
    """
    groups = _build(scenario_points, stacked=True)
    a, b = groups

    assert [bar.position for bar in a.bars] == [0.0, 12.0]
    assert [bar.position for bar in b.bars] == [0.0, 12.0]
    assert [bar.base for bar in a.bars] == [0.0, 0.0]
    assert [bar.base for bar in b.bars] == [1.0, 1.0]
    # No zero-count offset when stacked
    assert [bar.size.length for bar in b.bars] == [1.0, 0.0]


@pytest.mark.api
def test_grouped_bars_offset_side_by_side(scenario_points):
    """
    Ensures grouped bars are offset by minor index and carry the zero-count offset.

    Args:
        scenario_points (List[AxisSeriesPoint]): A×X, A×Y, B×X points.
    """
    groups = _build(scenario_points, stacked=False)
    a, b = groups
    offset = 0.03 * (1 / 8)

    # group_size = 2, so major Y starts at coord(2)
    assert [bar.position for bar in a.bars] == [0.0, 24.0]
    assert [bar.position for bar in b.bars] == [12.0, 36.0]
    assert all(bar.base == 0.0 for bar in a.bars + b.bars)
    assert b.bars[1].value == 0.0
    assert b.bars[1].size.length == pytest.approx(offset)
    assert a.bars[0].size.width == 10.0


@pytest.mark.api
def test_percentage_values():
    """
    Ensures percentage mode plots percentages, not counts.
    """
    points = [AxisSeriesPoint("A", "X")] * 3 + [AxisSeriesPoint("A", "Y")]
    (group,) = _build(points, stacked=True, percentage=True)

    assert [bar.value for bar in group.bars] == [75.0, 25.0]
    assert [bar.count for bar in group.bars] == [3, 1]


@pytest.mark.api
def test_explicit_orders_drive_draw_order(scenario_points):
    """
    Ensures explicit orders sort groups and the bars within each group.

    Args:
        scenario_points (List[AxisSeriesPoint]): A×X, A×Y, B×X points.
    """
    groups = _build(scenario_points, stacked=True, minor_order=["B"], major_order=["Y", "X"])

    assert [g.minor_category for g in groups] == ["B", "A"]
    assert [bar.major_category for bar in groups[0].bars] == ["Y", "X"]
    assert groups[0].bars[0].position == 0.0


@pytest.mark.api
def test_fills_follow_minor_category(scenario_points):
    """
    Ensures every bar of a group shares the minor category's color.

    Args:
        scenario_points (List[AxisSeriesPoint]): A×X, A×Y, B×X points.
    """
    a, b = _build(scenario_points, stacked=True)

    assert {bar.fill for bar in a.bars} == {a.fill} == {"#aa0000"}
    assert b.fill == "#00aa00"


@pytest.mark.api
def test_bar_specs_are_deterministic(scenario_points):
    """
    Ensures rebuilding from identical inputs yields identical bar specs.

    Args:
        scenario_points (List[AxisSeriesPoint]): A×X, A×Y, B×X points.
    """
    assert _build(scenario_points, stacked=False) == _build(scenario_points, stacked=False)


@pytest.mark.unit
def test_max_major_count_modes(scenario_points):
    """
    Ensures the count-axis maximum follows stacking and percentage modes.

    Args:
        scenario_points (List[AxisSeriesPoint]): A×X, A×Y, B×X points.
    """
    data = make_plot_data(scenario_points, [])

    assert max_major_count(data, stacked=True, percentage=False) == 2.0
    assert max_major_count(data, stacked=False, percentage=False) == 1.0
    assert max_major_count(data, stacked=False, percentage=True) == 100.0
    assert zero_count_offset(8.0, stacked=True) == 0.0
