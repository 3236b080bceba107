"""
tests/test_crosstab
~~~~~~~~~~~~~~~~~~~
"""

import pytest

from catbar import AxisSeriesPoint, make_plot_data
from catbar.core.crosstab import PlotDataset


@pytest.mark.api
def test_make_plot_data_counts_and_percentages(scenario_points):
    """
    Ensures counts are zero-filled and percentages are taken per minor category.

    Args:
        scenario_points (List[AxisSeriesPoint]): A×X, A×Y, B×X points.
    """
    data = make_plot_data(scenario_points, [], invert=False)

    assert data.minor_categories == ["A", "B"]
    a, b = data.entries
    assert [(c.major_category, c.count, c.percentage) for c in a.counts] == [
        ("X", 1, 50.0),
        ("Y", 1, 50.0),
    ]
    assert [(c.major_category, c.count, c.percentage) for c in b.counts] == [
        ("X", 1, 100.0),
        ("Y", 0, 0.0),
    ]


@pytest.mark.api
def test_make_plot_data_empty_series():
    """
    Ensures empty input yields an empty dataset rather than an error.
    """
    data = make_plot_data([], None)

    assert isinstance(data, PlotDataset)
    assert data.is_empty
    assert data.major_categories == []


@pytest.mark.api
def test_make_plot_data_entries_share_major_universe():
    """
    Ensures every entry enumerates the same major categories in the same order.
    """
    horz = [AxisSeriesPoint("A", "X"), AxisSeriesPoint("B", "Z")]
    vert = [AxisSeriesPoint("C", "Y"), AxisSeriesPoint("A", "Z")]
    data = make_plot_data(horz, vert)

    orders = [[c.major_category for c in entry.counts] for entry in data]
    assert orders == [["X", "Z", "Y"]] * 3


@pytest.mark.api
def test_make_plot_data_percentages_sum_to_100():
    """
    Ensures per-group percentages sum to 100 within floating tolerance.
    """
    points = [AxisSeriesPoint("A", m) for m in ["X", "Y", "Y", "Z", "Z", "Z"]]
    points += [AxisSeriesPoint("B", "W")] * 7
    data = make_plot_data(points, [])

    for entry in data:
        assert sum(c.percentage for c in entry.counts) == pytest.approx(100.0, abs=1e-6)


@pytest.mark.api
def test_make_plot_data_invert_swaps_roles(scenario_points):
    """
    Ensures invert=True makes the labels of each point swap minor and major roles.

    Args:
        scenario_points (List[AxisSeriesPoint]): A×X, A×Y, B×X points.
    """
    data = make_plot_data(scenario_points, [], invert=True)

    assert data.minor_categories == ["X", "Y"]
    assert data.major_categories == ["A", "B"]
    x = data.entries[0]
    assert [c.count for c in x.counts] == [1, 1]


@pytest.mark.unit
def test_make_plot_data_coerces_labels_to_strings():
    """
    Ensures non-string labels become new categories instead of raising.
    """
    data = make_plot_data([AxisSeriesPoint(1, None), AxisSeriesPoint(1, 2.5)], [])

    assert data.minor_categories == ["1"]
    assert data.major_categories == ["None", "2.5"]


@pytest.mark.unit
def test_to_frame_matches_entries(scenario_points):
    """
    Ensures the DataFrame view mirrors the dataset counts.

    Args:
        scenario_points (List[AxisSeriesPoint]): A×X, A×Y, B×X points.
    """
    frame = make_plot_data(scenario_points, []).to_frame()

    assert list(frame.index) == ["A", "B"]
    assert list(frame.columns) == ["X", "Y"]
    assert frame.loc["B", "Y"] == 0
    with pytest.raises(ValueError):
        make_plot_data(scenario_points, []).to_frame("total")
