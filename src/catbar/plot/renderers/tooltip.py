"""
catbar/plot/renderers/tooltip
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from typing import Optional, TYPE_CHECKING

import matplotlib.pyplot as plt
from matplotlib.text import Annotation

from ...core.hover import TooltipState, format_tooltip, tooltip_anchor
from ...util.text import escape_mathtext
from .base import canvas_to_figure

if TYPE_CHECKING:
    from ...core.layout import LayoutResult
    from ..style import StyleConfig


class TooltipRenderer:
    """
    Class for the hover tooltip overlay, a single annotation shown and moved on demand.
    """

    def __init__(self) -> None:
        """
        Initializes the TooltipRenderer instance.
        """
        self.annotation: Optional[Annotation] = None
        self._layout: Optional[LayoutResult] = None
        self._offset = 12.0

    def render(
        self,
        fig: plt.Figure,
        ax: plt.Axes,
        layout: LayoutResult,
        style: StyleConfig,
    ) -> Annotation:
        """
        Creates the (hidden) tooltip annotation.

        Args:
            fig (plt.Figure): Target figure.
            ax (plt.Axes): Chart axes.
            layout (LayoutResult): Solved chart layout.
            style (StyleConfig): Style configuration.

        Returns:
            Annotation: Tooltip annotation.
        """
        self._layout = layout
        self._offset = float(style.get("tooltip_offset", 12.0))
        self.annotation = ax.annotate(
            "",
            xy=(0.0, 0.0),
            xycoords="figure fraction",
            xytext=(self._offset, 0.0),
            textcoords="offset points",
            fontsize=style.get("tooltip_fontsize", 10.0),
            color=style.get("text_color", "black"),
            bbox={
                "boxstyle": "round,pad=0.4",
                "facecolor": style.get("tooltip_facecolor", "white"),
                "edgecolor": style.get("tooltip_edgecolor", "#cccccc"),
            },
            arrowprops={"arrowstyle": "-", "color": style.get("tooltip_edgecolor", "#cccccc")},
            annotation_clip=False,
            zorder=20,
        )
        self.annotation.set_visible(False)
        return self.annotation

    def update(self, state: TooltipState) -> None:
        """
        Shows, moves, or hides the tooltip to match the hover state.

        Args:
            state (TooltipState): Current hover state.
        """
        if self.annotation is None or self._layout is None:
            return
        if not state.visible or state.hovered is None:
            self.annotation.set_visible(False)
            return
        anchor = tooltip_anchor(state.hovered, self._layout)
        self.annotation.xy = canvas_to_figure(self._layout, anchor.x, anchor.y)
        if anchor.placement == "bottom":
            self.annotation.set_position((0.0, -self._offset))
            self.annotation.set_horizontalalignment("center")
            self.annotation.set_verticalalignment("top")
        else:
            self.annotation.set_position((self._offset, 0.0))
            self.annotation.set_horizontalalignment("left")
            self.annotation.set_verticalalignment("center")
        self.annotation.set_text(escape_mathtext(format_tooltip(state.hovered)))
        self.annotation.set_visible(True)
