"""
catbar/core/chart
~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any, Callable, Dict, Hashable, Iterable, List, Optional, Tuple

from ..util.text import measure_text_width
from .colors import ColorAllocator
from .config import BarPlotConfig, LabelFonts
from .crosstab import PlotDataset, make_plot_data
from .geometry import BarGroup, make_bar_specs, max_major_count, zero_count_offset
from .layout import LayoutResult, TextMeasure, compute_layout
from .ordering import CategoryCoordinates, index_lookup
from .series import AxisDatum, AxisSeriesPoint, join_axis_data


class BarChart:
    """
    Class for running the bar chart pipeline (cross-tabulation, coordinates, bar geometry,
    layout) over one chart's inputs. Each stage is memoized against its last inputs, so
    repeated calls with structurally equal data and configuration recompute nothing.
    """

    def __init__(
        self,
        horz_data: Optional[Iterable[AxisSeriesPoint]],
        vert_data: Optional[Iterable[AxisSeriesPoint]],
        config: BarPlotConfig,
        *,
        colors: Optional[ColorAllocator] = None,
        measure_text: Optional[TextMeasure] = None,
        fonts: Optional[LabelFonts] = None,
    ) -> None:
        """
        Initializes the BarChart instance.

        Args:
            horz_data (Optional[Iterable[AxisSeriesPoint]]): Points tied to the horizontal axis.
            vert_data (Optional[Iterable[AxisSeriesPoint]]): Points tied to the vertical axis.
            config (BarPlotConfig): Chart configuration.

        Kwargs:
            colors (Optional[ColorAllocator]): Color allocator for minor categories.
                Defaults to None (a fresh allocator with the default palette).
            measure_text (Optional[TextMeasure]): Text width oracle. Defaults to None
                (matplotlib text metrics).
            fonts (Optional[LabelFonts]): Fonts used for measurement. Defaults to None.
        """
        self.colors = colors if colors is not None else ColorAllocator()
        self.measure_text = measure_text if measure_text is not None else measure_text_width
        self.fonts = fonts if fonts is not None else LabelFonts()
        self._memo: Dict[str, Tuple[Hashable, Any]] = {}
        self.horz_data: Tuple[AxisSeriesPoint, ...] = tuple(horz_data or ())
        self.vert_data: Tuple[AxisSeriesPoint, ...] = tuple(vert_data or ())
        self.config = config

    @classmethod
    def from_axis_data(
        cls,
        horz_data: Iterable[AxisDatum],
        vert_data: Iterable[AxisDatum],
        config: BarPlotConfig,
        **kwargs: Any,
    ) -> BarChart:
        """
        Builds a chart from two per-sample axis series joined on sample key.

        Args:
            horz_data (Iterable[AxisDatum]): Per-sample values on the horizontal axis.
            vert_data (Iterable[AxisDatum]): Per-sample values on the vertical axis.
            config (BarPlotConfig): Chart configuration.

        Kwargs:
            **kwargs: Forwarded to the constructor. Defaults to {}.

        Returns:
            BarChart: Chart over the joined points.
        """
        return cls(join_axis_data(horz_data, vert_data), None, config, **kwargs)

    def update(
        self,
        horz_data: Optional[Iterable[AxisSeriesPoint]] = None,
        vert_data: Optional[Iterable[AxisSeriesPoint]] = None,
        config: Optional[BarPlotConfig] = None,
        **changes: Any,
    ) -> BarChart:
        """
        Replaces inputs. Stages whose inputs are unchanged keep their memoized output.

        Args:
            horz_data (Optional[Iterable[AxisSeriesPoint]]): New horizontal points, or None
                to keep the current ones.
            vert_data (Optional[Iterable[AxisSeriesPoint]]): New vertical points, or None
                to keep the current ones.
            config (Optional[BarPlotConfig]): New configuration, or None to keep it.

        Kwargs:
            **changes: Individual configuration fields to replace. Defaults to {}.

        Returns:
            BarChart: The BarChart instance (for method chaining).
        """
        if horz_data is not None:
            self.horz_data = tuple(horz_data)
        if vert_data is not None:
            self.vert_data = tuple(vert_data)
        if config is not None:
            self.config = config
        if changes:
            self.config = replace(self.config, **changes)
        return self

    def _memoized(self, stage: str, key: Hashable, compute: Callable[[], Any]) -> Any:
        cached = self._memo.get(stage)
        if cached is not None and cached[0] == key:
            return cached[1]
        value = compute()
        self._memo[stage] = (key, value)
        return value

    @property
    def dataset(self) -> PlotDataset:
        invert = bool(self.config.horizontal)
        return self._memoized(
            "dataset",
            (self.horz_data, self.vert_data, invert),
            lambda: make_plot_data(self.horz_data, self.vert_data, invert),
        )

    @property
    def is_empty(self) -> bool:
        return self.dataset.is_empty

    @property
    def coordinates(self) -> CategoryCoordinates:
        group_size = 1 if self.config.stacked else max(1, len(self.dataset))
        return CategoryCoordinates(float(self.config.bar_width), group_size)

    def bar_groups(self) -> List[BarGroup]:
        """
        Returns the render-ready bar groups, one per minor category in draw order.

        Returns:
            List[BarGroup]: Bar groups; empty for an empty dataset.
        """
        dataset = self.dataset
        config = self.config

        def _compute() -> List[BarGroup]:
            return make_bar_specs(
                dataset,
                index_lookup(config.minor_category_order),
                index_lookup(config.major_category_order),
                self.colors.allocate,
                self.coordinates,
                stacked=config.stacked,
                percentage=config.percentage,
                zero_offset=zero_count_offset(
                    max_major_count(
                        dataset, stacked=config.stacked, percentage=config.percentage
                    ),
                    stacked=config.stacked,
                ),
            )

        return list(self._memoized("bars", (dataset, config, self.colors), _compute))

    def layout(self, measured_legend_width: float = 0.0) -> LayoutResult:
        """
        Solves the layout for the current inputs.

        Args:
            measured_legend_width (float): Legend width measured after the previous render.
                Defaults to 0.0.

        Returns:
            LayoutResult: Solved layout.
        """
        dataset = self.dataset
        config = self.config
        width = float(measured_legend_width)
        return self._memoized(
            "layout",
            (dataset, config, self.fonts, self.measure_text, width),
            lambda: compute_layout(
                dataset,
                config,
                self.measure_text,
                measured_legend_width=width,
                fonts=self.fonts,
            ),
        )
