"""tests/unit/test_features.py"""

from __future__ import annotations

import pytest

from pdforecast.features.build_features import (
    FEATURE_COLUMNS,
    REFERENCE_HISTORY,
    HistoricalSeries,
    build_future_features,
    build_training_features,
    estimate_cases,
)


def test_estimate_cases_formula() -> None:
    # 678000 * 0.001 * (1 + 8.5 / 100)
    assert estimate_cases([678_000], [8.5])[0] == pytest.approx(735.63)


def test_training_features_are_aligned() -> None:
    X, y = build_training_features()

    assert list(X.columns) == FEATURE_COLUMNS
    assert X.shape == (6, 4)
    assert len(y) == len(X)
    assert X["Year"].tolist() == [2018, 2019, 2020, 2021, 2022, 2023]
    assert X["Time_Index"].tolist() == [0, 1, 2, 3, 4, 5]
    assert y[-1] == pytest.approx(735.63)


def test_future_features_hold_mortality_and_extend_time_index() -> None:
    X = build_future_features([2025, 2030], [215_800, 248_600], target_year=2026)

    assert X["Year"].tolist() == [2024, 2025, 2026]
    assert X["Time_Index"].tolist() == [6, 7, 8]
    assert (X["Mortality_Rate"] == REFERENCE_HISTORY.last_mortality_rate).all()
    assert X["Senior_Population"].tolist() == pytest.approx([215_800, 215_800, 222_360])


def test_future_features_empty_when_target_before_start() -> None:
    X = build_future_features([2025], [1], target_year=2023)
    assert X.empty
    assert list(X.columns) == FEATURE_COLUMNS


def test_future_features_empty_projection_raises() -> None:
    with pytest.raises(ValueError):
        build_future_features([], [], target_year=2030)


def test_historical_series_rejects_unaligned_input() -> None:
    with pytest.raises(ValueError):
        HistoricalSeries(years=(2018, 2019), senior_population=(1,), mortality_rate=(1.0, 2.0))
