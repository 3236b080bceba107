"""Axis limits, tick, and title renderers."""

from __future__ import annotations

from typing import Any, List, Optional

import matplotlib.pyplot as plt
from matplotlib.ticker import MaxNLocator

from ...core.config import LabelFonts
from ...core.geometry import NUM_AXIS_TICKS
from ...core.layout import CATEGORY_LABEL_HORZ_ANGLE, LayoutResult
from ...util.text import escape_mathtext
from ._tick_format import format_numerals


def count_ticks(layout: LayoutResult) -> List[float]:
    """
    Returns count-axis tick values between 0 and the count-axis maximum.

    Args:
        layout (LayoutResult): Solved chart layout.

    Returns:
        List[float]: Tick values.
    """
    top = layout.max_count if layout.max_count > 0 else 1.0
    locator = MaxNLocator(nbins=NUM_AXIS_TICKS)
    return [float(t) for t in locator.tick_values(0.0, top) if 0.0 <= t <= top + 1e-9]


class AxesRenderer:
    """
    Class for rendering axis limits, ticks, and titles for the chart axes.
    """

    def __init__(self, kind: str, fonts: Optional[LabelFonts] = None, **kwargs: Any) -> None:
        """
        Initializes the AxesRenderer instance.
        """
        self.kind = kind
        self.fonts = fonts if fonts is not None else LabelFonts()
        self.kwargs = dict(kwargs)

    def render(
        self,
        fig: plt.Figure,
        ax: plt.Axes,
        layout: LayoutResult,
        style: Any,
        **kwargs: Any,
    ) -> None:
        if self.kind == "limits":
            self._render_limits(ax, layout)
            return
        if self.kind == "category_ticks":
            self._render_category_ticks(ax, layout, style)
            return
        if self.kind == "count_ticks":
            self._render_count_ticks(ax, layout, style)
            return
        if self.kind == "titles":
            self._render_titles(ax, layout, style)
            return
        raise NotImplementedError(f"Unknown axes layer: {self.kind}")

    def _render_limits(self, ax: plt.Axes, layout: LayoutResult) -> None:
        c_lo, c_hi = layout.category_limits
        if layout.horizontal:
            ax.set_xlim(0.0, layout.count_limit)
            # First category on top
            ax.set_ylim(c_hi, c_lo)
        else:
            ax.set_xlim(c_lo, c_hi)
            ax.set_ylim(0.0, layout.count_limit)
        for side in ("top", "right"):
            ax.spines[side].set_visible(False)

    def _render_category_ticks(self, ax: plt.Axes, layout: LayoutResult, style: Any) -> None:
        text_kwargs = {
            "fontsize": self.fonts.tick_size,
            "family": self.fonts.family,
            "color": style.get("text_color", "black"),
        }
        ticks = list(layout.category_ticks)
        labels = [escape_mathtext(label) for label in layout.category_labels]
        if layout.horizontal:
            ax.set_yticks(ticks)
            ax.set_yticklabels(labels, **text_kwargs)
            return
        ax.set_xticks(ticks)
        # Labels hang down and to the right of their tick
        ax.set_xticklabels(
            labels,
            rotation=-CATEGORY_LABEL_HORZ_ANGLE,
            ha="left",
            va="top",
            rotation_mode="anchor",
            **text_kwargs,
        )

    def _render_count_ticks(self, ax: plt.Axes, layout: LayoutResult, style: Any) -> None:
        ticks = count_ticks(layout)
        labels = format_numerals(ticks)
        text_kwargs = {
            "fontsize": self.fonts.tick_size,
            "family": self.fonts.family,
            "color": style.get("text_color", "black"),
        }
        if layout.horizontal:
            ax.set_xticks(ticks)
            ax.set_xticklabels(labels, **text_kwargs)
        else:
            ax.set_yticks(ticks)
            ax.set_yticklabels(labels, **text_kwargs)
        ax.tick_params(colors=style.get("axis_color", "black"), which="both")

    def _render_titles(self, ax: plt.Axes, layout: LayoutResult, style: Any) -> None:
        text_kwargs = {
            "fontsize": self.fonts.label_size,
            "family": self.fonts.family,
            "color": style.get("text_color", "black"),
        }
        ax.set_xlabel(escape_mathtext(layout.x_title), **text_kwargs)
        ax.set_ylabel(escape_mathtext(layout.y_title), **text_kwargs)
