"""
catbar/core/crosstab
~~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

import pandas as pd

from .series import AxisSeriesPoint


@dataclass(frozen=True)
class CategoryCount:
    """
    Data class for the count of one major category inside a minor-category group.
    """

    major_category: str
    count: int
    percentage: float


@dataclass(frozen=True)
class PlotDatasetEntry:
    """
    Data class for one minor category and its zero-filled major-category counts.
    """

    minor_category: str
    counts: Tuple[CategoryCount, ...]

    @property
    def total(self) -> int:
        return sum(c.count for c in self.counts)


@dataclass(frozen=True)
class PlotDataset:
    """
    Data class for a cross-tabulated dataset. Every entry enumerates the same major
    categories in the same order.
    """

    entries: Tuple[PlotDatasetEntry, ...] = ()

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)

    def __getitem__(self, index: int) -> PlotDatasetEntry:
        return self.entries[index]

    @property
    def is_empty(self) -> bool:
        return len(self.entries) == 0

    @property
    def minor_categories(self) -> List[str]:
        return [entry.minor_category for entry in self.entries]

    @property
    def major_categories(self) -> List[str]:
        if self.is_empty:
            return []
        return [c.major_category for c in self.entries[0].counts]

    def to_frame(self, value: str = "count") -> pd.DataFrame:
        """
        Returns the dataset as a minor × major DataFrame.

        Args:
            value (str): Either "count" or "percentage". Defaults to "count".

        Returns:
            pd.DataFrame: Table indexed by minor category with one column per major category.

        Raises:
            ValueError: If `value` is not a recognized field.
        """
        if value not in {"count", "percentage"}:
            raise ValueError("value must be 'count' or 'percentage'")
        rows = {
            entry.minor_category: [getattr(c, value) for c in entry.counts]
            for entry in self.entries
        }
        return pd.DataFrame.from_dict(rows, orient="index", columns=self.major_categories)


def _first_seen(labels: Iterable[str]) -> List[str]:
    """
    Returns unique labels in first-seen order.

    Args:
        labels (Iterable[str]): Labels in encounter order.

    Returns:
        List[str]: Unique labels.
    """
    return list(dict.fromkeys(labels))


def make_plot_data(
    horz_points: Optional[Iterable[AxisSeriesPoint]],
    vert_points: Optional[Iterable[AxisSeriesPoint]],
    invert: bool = False,
) -> PlotDataset:
    """
    Cross-tabulates two point series into per-minor-category counts and percentages.
    Major categories seen anywhere are enumerated for every minor category (zero-filled),
    in first-seen order. Percentages are taken within each minor-category group.

    Args:
        horz_points (Optional[Iterable[AxisSeriesPoint]]): Points tied to the horizontal axis.
        vert_points (Optional[Iterable[AxisSeriesPoint]]): Points tied to the vertical axis.
        invert (bool): Swap minor and major labels of every point. Defaults to False.

    Returns:
        PlotDataset: Cross-tabulated dataset; empty if there are no points.
    """
    points = list(horz_points or ()) + list(vert_points or ())
    if invert:
        points = [p.swapped() for p in points]
    if not points:
        return PlotDataset()

    minors = [p.minor for p in points]
    majors = [p.major for p in points]
    minor_order = _first_seen(minors)
    major_order = _first_seen(majors)

    # Reindex restores first-seen order and zero-fills absent combinations
    counts = (
        pd.DataFrame({"minor": minors, "major": majors})
        .groupby(["minor", "major"], sort=False)
        .size()
        .unstack(fill_value=0)
    )
    counts = counts.reindex(index=minor_order, columns=major_order, fill_value=0)
    totals = counts.sum(axis=1)
    percentages = counts.div(totals.where(totals > 0), axis=0).fillna(0.0) * 100.0

    entries = []
    for minor in minor_order:
        row_counts = counts.loc[minor]
        row_pcts = percentages.loc[minor]
        entries.append(
            PlotDatasetEntry(
                minor_category=minor,
                counts=tuple(
                    CategoryCount(
                        major_category=major,
                        count=int(row_counts[major]),
                        percentage=float(row_pcts[major]),
                    )
                    for major in major_order
                ),
            )
        )
    return PlotDataset(entries=tuple(entries))
