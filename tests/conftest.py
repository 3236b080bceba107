"""
tests/conftest
~~~~~~~~~~~~~~
"""

from typing import Callable, List

import pytest

from catbar import AxisSeriesPoint, BarPlotConfig


def fake_measure(text: str, family: str, size: float) -> float:
    """
    Measures text as half an em per character.

    Args:
        text (str): Text to measure.
        family (str): Font family (ignored).
        size (float): Font size.

    Returns:
        float: Text width.
    """
    return len(text) * size * 0.5


class FakeAction:
    """
    Class for a manually fired scheduled callback.
    """

    def __init__(self, due: float, callback: Callable[[], None]) -> None:
        self.due = due
        self.callback = callback
        self.cancelled = False
        self.fired = False

    def cancel(self) -> None:
        self.cancelled = True


class FakeScheduler:
    """
    Class for a scheduler driven by a manual clock.
    """

    def __init__(self) -> None:
        self.now = 0.0
        self.actions: List[FakeAction] = []

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> FakeAction:
        action = FakeAction(self.now + delay_ms, callback)
        self.actions.append(action)
        return action

    @property
    def live(self) -> List[FakeAction]:
        return [a for a in self.actions if not a.cancelled and not a.fired]

    def advance(self, ms: float) -> None:
        self.now += ms
        for action in list(self.live):
            if action.due <= self.now:
                action.fired = True
                action.callback()


@pytest.fixture
def measure():
    """
    Returns the deterministic text measurement oracle.

    Returns:
        Callable[[str, str, float], float]: Text width function.
    """
    return fake_measure


@pytest.fixture
def scheduler():
    """
    Returns a fresh manual-clock scheduler.

    Returns:
        FakeScheduler: Scheduler with time at 0 ms.
    """
    return FakeScheduler()


@pytest.fixture(scope="session")
def scenario_points():
    """
    Returns the three-point series: A×X, A×Y, B×X.

    Returns:
        List[AxisSeriesPoint]: Points tied to the horizontal axis.
    """
    return [
        AxisSeriesPoint(minor="A", major="X"),
        AxisSeriesPoint(minor="A", major="Y"),
        AxisSeriesPoint(minor="B", major="X"),
    ]


@pytest.fixture(scope="session")
def stacked_config():
    """
    Returns a vertical stacked configuration with 10 px bars.

    Returns:
        BarPlotConfig: Chart configuration.
    """
    return BarPlotConfig(chart_base=300, bar_width=10, stacked=True)


@pytest.fixture(scope="session")
def grouped_config():
    """
    Returns a vertical grouped configuration with 10 px bars.

    Returns:
        BarPlotConfig: Chart configuration.
    """
    return BarPlotConfig(chart_base=300, bar_width=10, stacked=False)


@pytest.fixture(scope="session")
def many_minor_points():
    """
    Returns points for 20 distinct minor categories on one major category.

    Returns:
        List[AxisSeriesPoint]: Points tied to the horizontal axis.
    """
    return [AxisSeriesPoint(minor=f"cohort {i:02d}", major="missense") for i in range(20)]
