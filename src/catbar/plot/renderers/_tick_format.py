"""
catbar/plot/renderers/_tick_format
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from typing import List, Sequence

MAX_TICK_DECIMALS = 4


def tick_decimals(ticks: Sequence[float], max_decimals: int = MAX_TICK_DECIMALS) -> int:
    """
    Returns the fewest decimals that represent every tick exactly.

    Args:
        ticks (Sequence[float]): Tick values.
        max_decimals (int): Upper bound on decimals. Defaults to 4.

    Returns:
        int: Number of decimals.
    """
    for decimals in range(max_decimals + 1):
        if all(abs(round(t, decimals) - t) < 1e-9 for t in ticks):
            return decimals
    return max_decimals


def format_numeral(value: float, ticks: Sequence[float]) -> str:
    """
    Formats a numeric tick with the precision shared by its sibling ticks.

    Args:
        value (float): Tick value.
        ticks (Sequence[float]): All tick values on the axis.

    Returns:
        str: Tick label.
    """
    text = f"{value:.{tick_decimals(ticks)}f}"
    if text.startswith("-") and float(text) == 0:
        return text[1:]
    return text


def format_numerals(ticks: Sequence[float]) -> List[str]:
    """
    Formats all ticks of an axis with a shared precision.

    Args:
        ticks (Sequence[float]): Tick values.

    Returns:
        List[str]: Tick labels.
    """
    return [format_numeral(t, ticks) for t in ticks]
