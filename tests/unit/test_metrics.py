"""tests/unit/test_metrics.py"""

from __future__ import annotations

import math

import pytest

from pdforecast.forecasting.metrics import clamp_confidence, dispersion_confidence, peak_year, percent_change


def test_percent_change() -> None:
    assert percent_change(100.0, 110.0) == pytest.approx(10.0)
    assert percent_change(200.0, 150.0) == pytest.approx(-25.0)


def test_dispersion_confidence_uses_population_std() -> None:
    # mean 2, population std sqrt(2/3)
    expected = 1.0 - math.sqrt(2.0 / 3.0) / 2.0
    assert dispersion_confidence([1.0, 2.0, 3.0]) == pytest.approx(expected)


def test_flat_series_is_fully_confident() -> None:
    assert dispersion_confidence([5.0, 5.0, 5.0]) == pytest.approx(1.0)


def test_dispersion_confidence_degenerate_inputs() -> None:
    assert math.isnan(dispersion_confidence([]))
    assert math.isnan(dispersion_confidence([-1.0, 1.0]))


@pytest.mark.parametrize("raw", [-3.0, 0.0, 0.5, 0.69, float("nan"), float("-inf")])
def test_clamp_never_below_floor(raw: float) -> None:
    assert clamp_confidence(raw) == 0.7


def test_clamp_keeps_higher_confidence() -> None:
    assert clamp_confidence(0.93) == 0.93
    assert clamp_confidence(0.5, floor=0.4) == 0.5


def test_peak_year_first_occurrence_on_ties() -> None:
    assert peak_year([2024, 2025, 2026], [1.0, 3.0, 3.0]) == 2025
    assert peak_year([], []) is None


def test_negative_mean_confidence_is_finite() -> None:
    # mean -3, population std 1
    c = dispersion_confidence([-2.0, -4.0])
    assert c == pytest.approx(1.0 + 1.0 / 3.0)
    assert clamp_confidence(c) == pytest.approx(c)
