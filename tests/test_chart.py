"""
tests/test_chart
~~~~~~~~~~~~~~~~
"""

import pytest

from catbar import AxisDatum, AxisSeriesPoint, BarChart, BarPlotConfig


@pytest.fixture
def chart(scenario_points, stacked_config, measure):
    """
    Returns a stacked chart over the three-point series.

    Args:
        scenario_points (List[AxisSeriesPoint]): A×X, A×Y, B×X points.
        stacked_config (BarPlotConfig): Stacked vertical configuration.
        measure (Callable): Deterministic text measurement oracle.

    Returns:
        BarChart: Chart with a deterministic measurement oracle.
    """
    return BarChart(scenario_points, None, stacked_config, measure_text=measure)


@pytest.mark.api
def test_stages_are_memoized(chart):
    """
    Ensures repeated calls return the memoized stage outputs.

    Args:
        chart (BarChart): Stacked chart fixture.
    """
    assert chart.dataset is chart.dataset
    assert chart.layout() is chart.layout()
    assert chart.bar_groups() == chart.bar_groups()


@pytest.mark.api
def test_equal_inputs_keep_memo(chart, scenario_points):
    """
    Ensures structurally equal inputs reuse the memoized dataset and layout.

    Args:
        chart (BarChart): Stacked chart fixture.
        scenario_points (List[AxisSeriesPoint]): A×X, A×Y, B×X points.
    """
    dataset, layout = chart.dataset, chart.layout()
    chart.update(horz_data=[AxisSeriesPoint(p.minor, p.major) for p in scenario_points])

    assert chart.dataset is dataset
    assert chart.layout() is layout


@pytest.mark.api
def test_config_change_invalidates_downstream(chart):
    """
    Ensures a config change recomputes layout but keeps the dataset.

    Args:
        chart (BarChart): Stacked chart fixture.
    """
    dataset, layout = chart.dataset, chart.layout()
    chart.update(stacked=False)

    assert chart.dataset is dataset
    assert chart.layout() is not layout
    assert chart.layout().num_bars == 4
    assert chart.coordinates.group_size == 2


@pytest.mark.api
def test_horizontal_swaps_categories(chart):
    """
    Ensures horizontal charts plot the former minor categories along the category axis.

    Args:
        chart (BarChart): Stacked chart fixture.
    """
    chart.update(horizontal=True)

    assert chart.dataset.minor_categories == ["X", "Y"]
    assert chart.layout().category_labels == ("A", "B")


@pytest.mark.api
def test_measured_width_is_part_of_layout_key(chart):
    """
    Ensures a new measured legend width yields a fresh layout.

    Args:
        chart (BarChart): Stacked chart fixture.
    """
    assert chart.layout(0.0) is not chart.layout(400.0)


@pytest.mark.api
def test_from_axis_data_joins_on_sample(stacked_config, measure):
    """
    Ensures per-sample axis values are joined into points.

    Args:
        stacked_config (BarPlotConfig): Stacked vertical configuration.
        measure (Callable): Deterministic text measurement oracle.
    """
    horz = [AxisDatum("s1", "X"), AxisDatum("s2", "Y"), AxisDatum("s3", "X")]
    vert = [AxisDatum("s1", "A"), AxisDatum("s2", "A"), AxisDatum("s4", "B")]

    chart = BarChart.from_axis_data(horz, vert, stacked_config, measure_text=measure)

    assert chart.dataset.minor_categories == ["A"]
    assert chart.dataset.major_categories == ["X", "Y"]


@pytest.mark.api
def test_empty_chart(measure):
    """
    Ensures a chart with no points is empty and produces no bars.

    Args:
        measure (Callable): Deterministic text measurement oracle.
    """
    chart = BarChart(None, None, BarPlotConfig(chart_base=300), measure_text=measure)

    assert chart.is_empty
    assert chart.bar_groups() == []
    assert chart.layout().empty


@pytest.mark.api
def test_replacing_measure_text_refreshes_layout(chart):
    """
    Ensures swapping the text measurement oracle yields a layout measured with it.

    Args:
        chart (BarChart): Stacked chart fixture.
    """
    before = chart.layout()
    chart.measure_text = lambda text, family, size: 10.0 * len(text)

    after = chart.layout()

    assert after is not before
    assert after.legend_label_width == pytest.approx(10.0)


@pytest.mark.api
def test_dollar_labels_measure_literally(stacked_config):
    """
    Ensures labels containing dollar signs are measured as plain text by the default
    oracle instead of being parsed as math.

    Args:
        stacked_config (BarPlotConfig): Stacked vertical configuration.
    """
    chart = BarChart(
        [AxisSeriesPoint("A", "cost $^$ band"), AxisSeriesPoint("$5-$10", "X")],
        None,
        stacked_config,
    )

    layout = chart.layout()

    assert layout.category_labels == ("cost $^$ band", "X")
    assert layout.legend_entries == ("A", "$5-$10")
    assert layout.category_label_size > 0.0
