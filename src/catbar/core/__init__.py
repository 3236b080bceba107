"""
catbar/core
~~~~~~~~~~~
"""

from .chart import BarChart
from .colors import ColorAllocator
from .config import BarPlotConfig, LabelFonts
from .crosstab import CategoryCount, PlotDataset, PlotDatasetEntry, make_plot_data
from .feedback import LegendWidthFeedback
from .geometry import BarGroup, BarSize, BarSpec, make_bar_specs
from .hover import HoverController, TooltipState, format_tooltip, tooltip_anchor
from .layout import LayoutResult, Padding, compute_layout
from .ordering import CategoryCoordinates, index_lookup, sort_by_category
from .series import AxisDatum, AxisSeriesPoint, join_axis_data

__all__ = [
    "AxisDatum",
    "AxisSeriesPoint",
    "BarChart",
    "BarGroup",
    "BarPlotConfig",
    "BarSize",
    "BarSpec",
    "CategoryCoordinates",
    "CategoryCount",
    "ColorAllocator",
    "HoverController",
    "LabelFonts",
    "LayoutResult",
    "LegendWidthFeedback",
    "Padding",
    "PlotDataset",
    "PlotDatasetEntry",
    "TooltipState",
    "compute_layout",
    "format_tooltip",
    "index_lookup",
    "join_axis_data",
    "make_bar_specs",
    "make_plot_data",
    "sort_by_category",
    "tooltip_anchor",
]
