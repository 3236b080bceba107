"""
catbar/core/config
~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from ..util.warnings import warn

DEFAULT_BAR_WIDTH = 10.0
# Default margin around the data domain, in pixels
PLOT_DATA_PADDING_PIXELS = 100.0


def _normalize_order(name: str, order: Optional[Sequence[str]]) -> Optional[Tuple[str, ...]]:
    """
    Normalizes an explicit category order into a tuple of strings.

    Args:
        name (str): Field name used in error messages.
        order (Optional[Sequence[str]]): Category labels, or None.

    Returns:
        Optional[Tuple[str, ...]]: Normalized order, or None.

    Raises:
        TypeError: If `order` is a string rather than a sequence of labels.
    """
    if order is None:
        return None
    if isinstance(order, (str, bytes)):
        raise TypeError(f"`{name}` must be a sequence of category labels, not a string")
    return tuple(str(label) for label in order)


@dataclass(frozen=True)
class LabelFonts:
    """
    Data class for the fonts used to measure axis, tick, and legend text.
    """

    family: str = "DejaVu Sans"
    label_size: float = 13.0
    tick_size: float = 12.0


@dataclass(frozen=True)
class BarPlotConfig:
    """
    Immutable configuration snapshot for one bar chart.

    Orientation decides which explicit order governs which category: with vertical bars
    the horizontal order sorts major categories and the vertical order sorts minor ones;
    horizontal bars swap the two.
    """

    chart_base: float
    bar_width: Optional[float] = DEFAULT_BAR_WIDTH
    horizontal: bool = False
    stacked: bool = False
    percentage: bool = False
    domain_padding: Optional[float] = None
    horz_category_order: Optional[Sequence[str]] = None
    vert_category_order: Optional[Sequence[str]] = None
    legend_location_width_threshold: Optional[float] = None
    axis_label_x: Optional[str] = None
    axis_label_y: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "horz_category_order",
            _normalize_order("horz_category_order", self.horz_category_order),
        )
        object.__setattr__(
            self,
            "vert_category_order",
            _normalize_order("vert_category_order", self.vert_category_order),
        )
        if not self.bar_width or self.bar_width <= 0:
            warn(
                f"bar_width={self.bar_width!r} is not a positive width; "
                f"using {DEFAULT_BAR_WIDTH:g}",
                RuntimeWarning,
                stacklevel=4,
            )
            object.__setattr__(self, "bar_width", DEFAULT_BAR_WIDTH)

    @property
    def resolved_domain_padding(self) -> float:
        if self.domain_padding is None:
            return PLOT_DATA_PADDING_PIXELS
        return float(self.domain_padding)

    @property
    def minor_category_order(self) -> Optional[Tuple[str, ...]]:
        return self.horz_category_order if self.horizontal else self.vert_category_order

    @property
    def major_category_order(self) -> Optional[Tuple[str, ...]]:
        return self.vert_category_order if self.horizontal else self.horz_category_order

    @property
    def count_axis(self) -> str:
        return "x" if self.horizontal else "y"

    @property
    def category_axis(self) -> str:
        return "y" if self.horizontal else "x"
