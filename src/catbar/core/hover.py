"""
catbar/core/hover
~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, NamedTuple, Optional, Protocol, TYPE_CHECKING

if TYPE_CHECKING:
    from .geometry import BarSpec
    from .layout import LayoutResult

HIDE_DELAY_MS = 250


class ScheduledAction(Protocol):
    """
    Class for a pending delayed callback that can be cancelled.
    Protocol only; returned by concrete schedulers.
    """

    def cancel(self) -> None:
        ...


class Scheduler(Protocol):
    """
    Class for scheduling delayed callbacks on the UI thread.
    Protocol only; implement in concrete schedulers.
    """

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> ScheduledAction:
        ...


@dataclass(frozen=True)
class TooltipState:
    """
    Data class for the tooltip's hovered bar and visibility.
    """

    hovered: Optional[BarSpec] = None
    visible: bool = False

    @property
    def status(self) -> str:
        return "hovering" if self.visible and self.hovered is not None else "idle"


class TooltipAnchor(NamedTuple):
    """
    Canvas point the tooltip points at, and which side of it the tooltip opens on.
    """

    x: float
    y: float
    placement: str


class HoverController:
    """
    Class for tracking the hovered bar and debouncing the tooltip's disappearance.

    Entering a bar shows the tooltip at once and cancels any pending hide. Leaving a bar
    schedules a hide after `delay_ms`; entering another bar before it fires cancels it, so
    moving across adjacent bars never flickers. At most one hide is pending at a time.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        delay_ms: float = HIDE_DELAY_MS,
        on_change: Optional[Callable[[TooltipState], None]] = None,
    ) -> None:
        """
        Initializes the HoverController instance.

        Args:
            scheduler (Scheduler): Schedules the delayed hide.
            delay_ms (float): Hide delay in milliseconds. Defaults to 250.
            on_change (Optional[Callable[[TooltipState], None]]): Called after every state
                change. Defaults to None.
        """
        self.scheduler = scheduler
        self.delay_ms = float(delay_ms)
        self.on_change = on_change
        self._state = TooltipState()
        self._pending: Optional[ScheduledAction] = None

    @property
    def state(self) -> TooltipState:
        return self._state

    @property
    def hide_pending(self) -> bool:
        return self._pending is not None

    def _cancel_pending(self) -> None:
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None

    def _set_state(self, state: TooltipState) -> None:
        if state == self._state:
            return
        self._state = state
        if self.on_change is not None:
            self.on_change(state)

    def enter(self, bar: BarSpec) -> None:
        """
        Handles the pointer entering a bar.

        Args:
            bar (BarSpec): Bar under the pointer.
        """
        self._cancel_pending()
        self._set_state(TooltipState(hovered=bar, visible=True))

    def leave(self) -> None:
        """
        Handles the pointer leaving a bar by scheduling the hide.
        """
        self._cancel_pending()
        if not self._state.visible:
            return
        self._pending = self.scheduler.call_later(self.delay_ms, self._hide)

    def _hide(self) -> None:
        self._pending = None
        self._set_state(TooltipState())

    def dispose(self) -> None:
        """
        Cancels any pending hide and discards the tooltip state without notifying.
        """
        self._cancel_pending()
        self._state = TooltipState()


def tooltip_anchor(bar: BarSpec, layout: LayoutResult) -> TooltipAnchor:
    """
    Returns the canvas point a bar's tooltip points at: the bar's category coordinate and
    the midpoint of its extent along the count axis.

    Args:
        bar (BarSpec): Hovered bar.
        layout (LayoutResult): Layout the bar was rendered with.

    Returns:
        TooltipAnchor: Canvas point and placement ("bottom" for horizontal bars).
    """
    x, y = layout.project(bar.position, bar.midpoint)
    return TooltipAnchor(x=x, y=y, placement="bottom" if layout.horizontal else "right")


def format_tooltip(bar: BarSpec) -> str:
    """
    Formats the tooltip text for a bar.

    Args:
        bar (BarSpec): Hovered bar.

    Returns:
        str: Two-line tooltip text.
    """
    noun = "sample" if bar.count == 1 else "samples"
    return (
        f"{bar.major_category}\n"
        f"{bar.minor_category}: {bar.count} {noun} ({bar.percentage:.2f}%)"
    )
