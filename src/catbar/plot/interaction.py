"""
catbar/plot/interaction
~~~~~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Optional, TYPE_CHECKING

import matplotlib.pyplot as plt
from matplotlib.patches import Rectangle

from ..core.hover import HoverController, TooltipState
from ..util.warnings import warn

if TYPE_CHECKING:
    from ..core.geometry import BarSpec
    from .renderers.tooltip import TooltipRenderer


class _TimerAction:
    """
    Class for a started single-shot canvas timer that can be cancelled.
    """

    def __init__(self, timer: Any) -> None:
        self.timer = timer

    def cancel(self) -> None:
        self.timer.stop()


class CanvasScheduler:
    """
    Class for scheduling delayed callbacks with the figure canvas's GUI timer, so callbacks
    run on the UI event loop. Non-interactive canvases (e.g. Agg) never fire them.
    """

    def __init__(self, canvas: Any) -> None:
        """
        Initializes the CanvasScheduler instance.

        Args:
            canvas (Any): Matplotlib figure canvas.
        """
        self.canvas = canvas

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> _TimerAction:
        """
        Runs `callback` once after `delay_ms` milliseconds.

        Args:
            delay_ms (float): Delay in milliseconds.
            callback (Callable[[], None]): Callback to run.

        Returns:
            _TimerAction: Handle whose `cancel()` stops the timer.
        """
        timer = self.canvas.new_timer(interval=int(delay_ms))
        timer.single_shot = True
        timer.add_callback(callback)
        timer.start()
        return _TimerAction(timer)


class HoverBinding:
    """
    Class for wiring pointer motion over drawn bars into a HoverController and the tooltip.
    """

    def __init__(
        self,
        fig: plt.Figure,
        patches: Dict[Rectangle, BarSpec],
        tooltip: TooltipRenderer,
        controller: Optional[HoverController] = None,
    ) -> None:
        """
        Initializes the HoverBinding instance and connects to the canvas.

        Args:
            fig (plt.Figure): Rendered figure.
            patches (Dict[Rectangle, BarSpec]): Drawn patch → bar it represents.
            tooltip (TooltipRenderer): Tooltip overlay to update.
            controller (Optional[HoverController]): Hover state machine. Defaults to None
                (one driven by the canvas timer).
        """
        self.fig = fig
        self.patches = dict(patches)
        self.tooltip = tooltip
        if controller is None:
            if getattr(fig.canvas, "required_interactive_framework", None) is None:
                warn(
                    "Figure canvas is not interactive; tooltips will not hide on their own.",
                    stacklevel=3,
                )
            controller = HoverController(CanvasScheduler(fig.canvas))
        controller.on_change = self._on_change
        self.controller = controller
        self._current: Optional[Rectangle] = None
        self._cid: Optional[int] = fig.canvas.mpl_connect("motion_notify_event", self.on_motion)

    def _patch_at(self, event: Any) -> Optional[Rectangle]:
        for patch in self.patches:
            contains, _info = patch.contains(event)
            if contains:
                return patch
        return None

    def on_motion(self, event: Any) -> None:
        """
        Handles a pointer motion event.

        Args:
            event (Any): Matplotlib mouse event.
        """
        patch = self._patch_at(event)
        if patch is self._current:
            return
        self._current = patch
        if patch is None:
            self.controller.leave()
        else:
            self.controller.enter(self.patches[patch])

    def _on_change(self, state: TooltipState) -> None:
        self.tooltip.update(state)
        self.fig.canvas.draw_idle()

    def disconnect(self) -> None:
        """
        Disconnects from the canvas and discards hover state.
        """
        if self._cid is not None:
            self.fig.canvas.mpl_disconnect(self._cid)
            self._cid = None
        self.controller.dispose()
        self._current = None
