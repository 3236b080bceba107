"""
catbar/core/layout
~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Callable, Dict, Optional, Tuple

from .config import BarPlotConfig, LabelFonts
from .crosstab import PlotDataset
from .geometry import max_major_count, zero_count_offset
from .ordering import CategoryCoordinates, index_lookup, sort_by_category

# (text, font family, font size) -> width in pixels
TextMeasure = Callable[[str, str, float], float]

CATEGORY_LABEL_HORZ_ANGLE = 50.0
DEFAULT_LEFT_PADDING = 25.0
DEFAULT_BOTTOM_PADDING = 10.0
LEGEND_ITEMS_PER_ROW = 4
LEGEND_ROW_HEIGHT = 23.7
BOTTOM_LEGEND_PADDING = 15.0
RIGHT_PADDING_FOR_LONG_LABELS = 50.0
SIDE_LEGEND_MARGIN = 20.0
SIDE_LEGEND_Y = 100.0
MAX_SIDE_LEGEND_ENTRIES = 15
# Chart size does not translate directly into plot-area size; this covers the axes
MISC_PADDING = 100.0
# Inset of the plot area inside the chart box on every side
AXIS_OFFSET = 50.0
COUNT_AXIS_LABEL = "# samples"


@dataclass(frozen=True)
class Padding:
    """
    Data class for per-side canvas padding around the chart box.
    """

    left: float = 0.0
    right: float = 0.0
    top: float = 0.0
    bottom: float = 0.0


@dataclass(frozen=True)
class LayoutResult:
    """
    Data class for the solved chart layout. All lengths are canvas pixels with the origin at
    the top-left corner, except `domain` and `category_ticks`, which are in data units.
    """

    empty: bool
    horizontal: bool
    stacked: bool
    chart_width: float
    chart_height: float
    padding: Padding
    domain: Dict[str, Tuple[float, float]] = field(default_factory=dict)
    domain_padding: Dict[str, float] = field(default_factory=dict)
    count_limit: float = 0.0
    max_count: float = 0.0
    zero_count_offset: float = 0.0
    legend_location: str = "right"
    legend_entries: Tuple[str, ...] = ()
    legend_position: Tuple[float, float] = (0.0, 0.0)
    bottom_legend_height: float = 0.0
    category_labels: Tuple[str, ...] = ()
    category_ticks: Tuple[float, ...] = ()
    category_label_size: float = 0.0
    legend_label_width: float = 0.0
    x_title: str = ""
    y_title: str = ""
    num_bars: int = 0

    @property
    def canvas_width(self) -> float:
        return self.padding.left + self.chart_width + self.padding.right

    @property
    def canvas_height(self) -> float:
        return self.padding.top + self.chart_height + self.padding.bottom

    @property
    def count_axis(self) -> str:
        return "x" if self.horizontal else "y"

    @property
    def category_axis(self) -> str:
        return "y" if self.horizontal else "x"

    @property
    def category_limits(self) -> Tuple[float, float]:
        lo, hi = self.domain.get(self.category_axis, (0.0, 0.0))
        pad = self.domain_padding.get(self.category_axis, 0.0)
        return (lo - pad, hi + pad)

    @property
    def plot_area(self) -> Tuple[float, float, float, float]:
        """
        Returns the plot area inside the chart box as (x0, y0, width, height).
        """
        x0 = self.padding.left + AXIS_OFFSET
        y0 = self.padding.top + AXIS_OFFSET
        width = max(self.chart_width - 2 * AXIS_OFFSET, 1.0)
        height = max(self.chart_height - 2 * AXIS_OFFSET, 1.0)
        return (x0, y0, width, height)

    def corrected_right_padding(self, measured_legend_width: float) -> float:
        """
        Returns the right padding this layout would have for a given measured legend width.

        Args:
            measured_legend_width (float): Rendered legend width in pixels.

        Returns:
            float: Right padding in pixels.
        """
        if self.legend_entries and self.legend_location == "right":
            return self.padding.right
        return max(RIGHT_PADDING_FOR_LONG_LABELS, measured_legend_width - self.chart_width)

    def project(self, category: float, count: float) -> Tuple[float, float]:
        """
        Maps a category coordinate and count value to a canvas point.

        Args:
            category (float): Coordinate along the category axis.
            count (float): Value along the count axis.

        Returns:
            Tuple[float, float]: Canvas (x, y) in pixels.
        """
        x0, y0, width, height = self.plot_area
        c_lo, c_hi = self.category_limits
        c_frac = (category - c_lo) / (c_hi - c_lo) if c_hi > c_lo else 0.0
        n_frac = count / self.count_limit if self.count_limit > 0 else 0.0
        if self.horizontal:
            # Categories run top to bottom
            return (x0 + n_frac * width, y0 + c_frac * height)
        return (x0 + c_frac * width, y0 + (1.0 - n_frac) * height)


def _count_axis_title(percentage: bool) -> str:
    return f"{COUNT_AXIS_LABEL}{' (%)' if percentage else ''}"


def _axis_titles(config: BarPlotConfig) -> Tuple[str, str]:
    """
    Composes the x and y axis titles; the count title goes on the count axis.

    Args:
        config (BarPlotConfig): Chart configuration.

    Returns:
        Tuple[str, str]: (x_title, y_title), multi-line where both parts are present.
    """
    count_title = _count_axis_title(config.percentage)
    x_parts = [config.axis_label_x or ""]
    y_parts = [config.axis_label_y or ""]
    if config.horizontal:
        x_parts.insert(0, count_title)
    else:
        y_parts.append(count_title)
    x_title = "\n".join(p for p in x_parts if p)
    y_title = "\n".join(p for p in y_parts if p)
    return x_title, y_title


def _count_limit(max_count: float, plot_length: float, padding: float) -> float:
    """
    Returns the count-axis upper limit that leaves `padding` pixels above `max_count`.

    Args:
        max_count (float): Largest plotted value.
        plot_length (float): Plot-area length along the count axis in pixels.
        padding (float): Pixels to leave above the largest value.

    Returns:
        float: Upper count-axis limit.
    """
    top = max_count if max_count > 0 else 1.0
    if plot_length > padding:
        return top * plot_length / (plot_length - padding)
    return 2.0 * top


def empty_layout(config: BarPlotConfig) -> LayoutResult:
    """
    Returns the degenerate layout of a chart with no data.

    Args:
        config (BarPlotConfig): Chart configuration.

    Returns:
        LayoutResult: Layout flagged as empty, with zero bars.
    """
    return LayoutResult(
        empty=True,
        horizontal=config.horizontal,
        stacked=config.stacked,
        chart_width=MISC_PADDING,
        chart_height=MISC_PADDING,
        padding=Padding(),
        domain={"x": (0.0, 0.0), "y": (0.0, 0.0)},
        domain_padding={"x": 0.0, "y": 0.0},
    )


def compute_layout(
    dataset: PlotDataset,
    config: BarPlotConfig,
    measure_text: TextMeasure,
    *,
    measured_legend_width: float = 0.0,
    fonts: Optional[LabelFonts] = None,
) -> LayoutResult:
    """
    Solves chart extents, axis domains, padding, and legend placement.

    Args:
        dataset (PlotDataset): Cross-tabulated dataset.
        config (BarPlotConfig): Chart configuration.
        measure_text (TextMeasure): Returns the pixel width of text in a given font.

    Kwargs:
        measured_legend_width (float): Legend width measured after the last render. Only
            affects the right padding when the legend is not on the right. Defaults to 0.0.
        fonts (Optional[LabelFonts]): Fonts used for measurement. Defaults to None.

    Returns:
        LayoutResult: Solved layout; `empty` is True when the dataset has no entries.
    """
    if dataset.is_empty:
        return empty_layout(config)
    fonts = fonts or LabelFonts()

    def label_width(text: str) -> float:
        return float(measure_text(text, fonts.family, fonts.label_size))

    def tick_width(text: str) -> float:
        return float(measure_text(text, fonts.family, fonts.tick_size))

    n_minor = len(dataset.minor_categories)
    n_major = len(dataset.major_categories)
    coords = CategoryCoordinates(config.bar_width, 1 if config.stacked else n_minor)
    domain_padding = config.resolved_domain_padding

    legend_entries = tuple(
        sort_by_category(dataset.minor_categories, str, index_lookup(config.minor_category_order))
    )
    category_labels = tuple(
        sort_by_category(dataset.major_categories, str, index_lookup(config.major_category_order))
    )
    category_ticks = tuple(coords.tick(i) for i in range(n_major))

    # Category-axis extent
    num_bars = n_major if config.stacked else n_major * n_minor
    additional_padding = 0.0 if config.stacked else coords.coord(n_minor / 2)
    # Same span as the category domain, so one data unit stays one pixel
    category_span = coords.coord(max(1, num_bars - 1))
    chart_extent = category_span + 2 * domain_padding + MISC_PADDING + additional_padding

    # Chart box must fit the axis titles
    if config.horizontal:
        chart_width, chart_height = float(config.chart_base), chart_extent
    else:
        chart_width, chart_height = chart_extent, float(config.chart_base)
    chart_width = max(chart_width, label_width(config.axis_label_x or ""))
    chart_height = max(chart_height, label_width(config.axis_label_y or ""))

    # Legend placement
    threshold = config.legend_location_width_threshold
    if (threshold is not None and chart_width > threshold) or (
        len(legend_entries) > MAX_SIDE_LEGEND_ENTRIES
    ):
        legend_location = "bottom"
    else:
        legend_location = "right"
    if legend_entries:
        n_rows = math.ceil(len(legend_entries) / LEGEND_ITEMS_PER_ROW)
        bottom_legend_height = LEGEND_ROW_HEIGHT * n_rows
    else:
        bottom_legend_height = 0.0

    # Label sizes
    biggest_tick = max((tick_width(label) for label in category_labels), default=0.0)
    if config.horizontal:
        category_label_size = biggest_tick
    else:
        # Rotated labels extend downward by their projected height
        category_label_size = biggest_tick * abs(
            math.sin(math.radians(CATEGORY_LABEL_HORZ_ANGLE))
        )
    legend_label_width = max((label_width(name) for name in legend_entries), default=0.0)

    # Padding
    left = category_label_size if config.horizontal else DEFAULT_LEFT_PADDING
    top = 0.0
    if legend_entries and legend_location == "right":
        right = legend_label_width + SIDE_LEGEND_MARGIN
    else:
        right = max(RIGHT_PADDING_FOR_LONG_LABELS, float(measured_legend_width) - chart_width)
    bottom = DEFAULT_BOTTOM_PADDING if config.horizontal else category_label_size
    if legend_location == "bottom":
        bottom += bottom_legend_height + BOTTOM_LEGEND_PADDING
    padding = Padding(left=left, right=right, top=top, bottom=bottom)

    # Domains
    max_count = max_major_count(dataset, stacked=config.stacked, percentage=config.percentage)
    count_domain = (0.0, max_count)
    category_domain = (coords.coord(0), category_span)
    count_axis = config.count_axis
    category_axis = config.category_axis
    count_plot_length = (chart_width if config.horizontal else chart_height) - 2 * AXIS_OFFSET

    canvas_height = top + chart_height + bottom
    if legend_location == "right":
        legend_position = (left + chart_width - SIDE_LEGEND_MARGIN, top + SIDE_LEGEND_Y)
    else:
        legend_position = (left, canvas_height - bottom_legend_height)

    x_title, y_title = _axis_titles(config)
    return LayoutResult(
        empty=False,
        horizontal=config.horizontal,
        stacked=config.stacked,
        chart_width=chart_width,
        chart_height=chart_height,
        padding=padding,
        domain={count_axis: count_domain, category_axis: category_domain},
        domain_padding={
            count_axis: domain_padding,
            category_axis: domain_padding + additional_padding / 2.0,
        },
        count_limit=_count_limit(max_count, count_plot_length, domain_padding),
        max_count=max_count,
        zero_count_offset=zero_count_offset(max_count, stacked=config.stacked),
        legend_location=legend_location,
        legend_entries=legend_entries,
        legend_position=legend_position,
        bottom_legend_height=bottom_legend_height,
        category_labels=category_labels,
        category_ticks=category_ticks,
        category_label_size=category_label_size,
        legend_label_width=legend_label_width,
        x_title=x_title,
        y_title=y_title,
        num_bars=num_bars,
    )
