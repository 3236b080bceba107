"""
catbar/core/geometry
~~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Mapping, NamedTuple, Optional, Tuple

from .crosstab import PlotDataset
from .ordering import CategoryCoordinates, sort_by_category

NUM_AXIS_TICKS = 8
# Fraction of one count-axis tick interval given to empty bars in grouped mode
ZERO_COUNT_OFFSET_RATIO = 0.03


class BarSize(NamedTuple):
    """
    Size of a bar: `width` across the category axis, `length` along the count axis.
    """

    width: float
    length: float


@dataclass(frozen=True)
class BarSpec:
    """
    Data class for one render-ready bar (one minor × major cell).

    `position` is the bar's centre on the category axis; `base` is where the bar starts on
    the count axis (non-zero only for upper stack segments). `value` is the plotted count
    or percentage; `size.length` additionally carries the zero-count offset.
    """

    minor_category: str
    major_category: str
    fill: str
    position: float
    base: float
    size: BarSize
    value: float
    count: int
    percentage: float

    @property
    def end(self) -> float:
        return self.base + self.size.length

    @property
    def midpoint(self) -> float:
        return (self.base + self.end) / 2.0


@dataclass(frozen=True)
class BarGroup:
    """
    Data class for the bars of one minor category, one per major category.
    """

    minor_category: str
    fill: str
    bars: Tuple[BarSpec, ...]


def max_major_count(dataset: PlotDataset, *, stacked: bool, percentage: bool) -> float:
    """
    Returns the upper end of the count axis: 100 in percentage mode, otherwise the largest
    stacked per-major sum (stacked) or the largest single cell (grouped).

    Args:
        dataset (PlotDataset): Cross-tabulated dataset.

    Kwargs:
        stacked (bool): Whether bars are stacked.
        percentage (bool): Whether values are percentages.

    Returns:
        float: Count-axis maximum (0 for an empty dataset).
    """
    if percentage:
        return 100.0
    per_major: Dict[str, float] = {}
    for entry in dataset:
        for c in entry.counts:
            cur = per_major.get(c.major_category, 0)
            per_major[c.major_category] = cur + c.count if stacked else max(cur, c.count)
    if not per_major:
        return 0.0
    return float(max(per_major.values()))


def zero_count_offset(max_count: float, *, stacked: bool) -> float:
    """
    Returns the offset added to every grouped bar so empty bars still show a sliver.

    Args:
        max_count (float): Count-axis maximum.

    Kwargs:
        stacked (bool): Whether bars are stacked (no offset when True).

    Returns:
        float: Offset in count-axis units.
    """
    if stacked:
        return 0.0
    return ZERO_COUNT_OFFSET_RATIO * (max_count / NUM_AXIS_TICKS)


def make_bar_specs(
    dataset: PlotDataset,
    minor_category_order: Optional[Mapping[str, int]],
    major_category_order: Optional[Mapping[str, int]],
    get_color: Callable[[str], str],
    coordinates: CategoryCoordinates,
    *,
    stacked: bool,
    percentage: bool,
    zero_offset: float = 0.0,
) -> List[BarGroup]:
    """
    Builds one bar group per minor category in draw order. Stacked bars share their major
    category's coordinate and rest on the segments drawn before them; grouped bars are
    offset side by side inside their major category's group.

    Args:
        dataset (PlotDataset): Cross-tabulated dataset.
        minor_category_order (Optional[Mapping[str, int]]): Minor label → index lookup.
        major_category_order (Optional[Mapping[str, int]]): Major label → index lookup.
        get_color (Callable[[str], str]): Category label → fill color.
        coordinates (CategoryCoordinates): Category coordinate mapper. Its `group_size`
            must equal the number of minor categories in grouped mode and 1 when stacked.

    Kwargs:
        stacked (bool): Whether bars are stacked.
        percentage (bool): Plot percentages instead of counts.
        zero_offset (float): Length added to every bar. Ignored when stacked. Defaults to 0.0.

    Returns:
        List[BarGroup]: Bar groups in minor-category draw order.
    """
    entries = sort_by_category(list(dataset), lambda e: e.minor_category, minor_category_order)
    offset = 0.0 if stacked else float(zero_offset)
    # Running top of each stack, indexed by major position
    stack_tops: Dict[int, float] = {}

    groups: List[BarGroup] = []
    for minor_index, entry in enumerate(entries):
        fill = get_color(entry.minor_category)
        sorted_counts = sort_by_category(
            list(entry.counts), lambda c: c.major_category, major_category_order
        )
        bars = []
        for major_index, c in enumerate(sorted_counts):
            value = c.percentage if percentage else float(c.count)
            if stacked:
                position = coordinates.coord(major_index)
                base = stack_tops.get(major_index, 0.0)
                stack_tops[major_index] = base + value
            else:
                position = coordinates.group_base(major_index) + coordinates.group_offset(
                    minor_index
                )
                base = 0.0
            bars.append(
                BarSpec(
                    minor_category=entry.minor_category,
                    major_category=c.major_category,
                    fill=fill,
                    position=position,
                    base=base,
                    size=BarSize(width=coordinates.bar_width, length=value + offset),
                    value=value,
                    count=c.count,
                    percentage=c.percentage,
                )
            )
        groups.append(BarGroup(minor_category=entry.minor_category, fill=fill, bars=tuple(bars)))
    return groups
