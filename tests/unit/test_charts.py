"""tests/unit/test_charts.py"""

from __future__ import annotations

import math

import numpy as np

from pdforecast.forecasting.engine import ForecastResult
from pdforecast.forecasting.intervals import normal_band
from pdforecast.reporting import charts


def _result() -> ForecastResult:
    cases = np.array([740.0, 750.0, 745.0])
    return ForecastResult(
        years=(2024, 2025, 2026),
        cases=tuple(cases),
        confidence=0.99,
        percent_change=1.3,
        overall_confidence=0.99,
        peak_year=2025,
        historical_cases=(700.0, 735.63),
        baseline=735.63,
        interval=normal_band(cases, sigma=5.0, level=0.95),
    )


def test_age_distribution_bar(supplier) -> None:
    fig = charts.age_distribution_figure(supplier.get_age_distribution())
    assert fig.data[0].type == "bar"
    assert len(fig.data[0].x) == 18
    assert fig.layout.title.text == "Population by Age Group"
    assert fig.layout.xaxis.title.text == "Age Group"


def test_projection_title_follows_scenario(supplier) -> None:
    fig = charts.projection_figure(supplier.get_population_projections("age65plus"))
    assert fig.layout.title.text == "Age 65+ Population Projection"
    assert fig.data[0].fill == "tozeroy"


def test_mortality_uses_red_scale(supplier) -> None:
    fig = charts.mortality_figure(supplier.get_mortality_data())
    assert list(fig.data[0].marker.color) == [0.8, 2.4, 8.7, 22.1, 35.6]
    assert fig.data[0].marker.showscale


def test_mortality_trend_one_line_per_group(supplier) -> None:
    fig = charts.mortality_trend_figure(supplier.get_mortality_data())
    assert len(fig.data) == 5
    assert list(fig.data[0].x) == [2018, 2019, 2020, 2021, 2022]


def test_forecast_with_and_without_band() -> None:
    result = _result()
    with_band = charts.forecast_figure(result)
    without = charts.forecast_figure(result, show_band=False)

    assert len(with_band.data) == 2
    assert len(without.data) == 1
    assert without.data[0].name == "Predicted PD Cases"


def test_heatmap_marker_sizes(supplier) -> None:
    hm = supplier.get_geographic_heatmap(2024, "prevalence")
    fig = charts.heatmap_figure(hm)

    trace = fig.data[0]
    assert trace.type == "scattergeo"
    assert trace.marker.size[0] == math.sqrt(45.0) * 3
    assert "Prevalence" in fig.layout.title.text
    assert fig.layout.geo.projection.type == "mercator"
