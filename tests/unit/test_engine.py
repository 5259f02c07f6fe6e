"""tests/unit/test_engine.py"""

from __future__ import annotations

import pytest

import pdforecast.forecasting.engine as engine_mod
from pdforecast.data.records import ProjectionSeries
from pdforecast.forecasting.engine import ForecastEngine, ForecastError

# Exact predictions depend on stochastic training; only shape and
# bounded properties are asserted here.


@pytest.fixture
def seniors(supplier) -> ProjectionSeries:
    return supplier.get_population_projections("age65plus")


def test_single_year_forecast(engine, seniors) -> None:
    result = engine.generate_forecast(seniors, 2024)

    assert result.years == (2024,)
    assert len(result.cases) == 1
    assert result.peak_year == 2024


def test_forecast_shape_and_bounds(engine, seniors) -> None:
    result = engine.generate_forecast(seniors, 2030)

    assert result.years == tuple(range(2024, 2031))
    assert len(result.cases) == len(result.years)
    assert result.overall_confidence >= 0.7
    assert result.peak_year in result.years
    assert len(result.historical_cases) == 6
    assert result.baseline == pytest.approx(735.63)
    assert result.final_cases == result.cases[-1]


def test_percent_change_matches_definition(engine, seniors) -> None:
    result = engine.generate_forecast(seniors, 2027)
    expected = (result.cases[-1] - result.baseline) / result.baseline * 100.0
    assert result.percent_change == pytest.approx(expected)


def test_band_brackets_forecast(engine, seniors) -> None:
    result = engine.generate_forecast(seniors, 2028)

    assert result.interval is not None
    assert (result.interval.lower <= result.interval.upper).all()
    frame = result.to_frame()
    assert list(frame.columns[:2]) == ["Year", "Predicted_Cases"]
    assert len(frame) == 5


def test_fit_metrics_reported(engine, seniors) -> None:
    result = engine.generate_forecast(seniors, 2025)
    assert result.fit_metrics is not None
    assert set(result.fit_metrics.as_dict()) == {"RMSE", "MAE", "SMAPE", "Residual_Std"}


def test_model_is_refit_every_call(engine, seniors) -> None:
    engine.generate_forecast(seniors, 2025)
    first = engine.model
    engine.generate_forecast(seniors, 2025)
    assert engine.model is not None
    assert engine.model is not first


def test_target_before_start_year_is_rejected(engine, seniors) -> None:
    with pytest.raises(ValueError):
        engine.generate_forecast(seniors, 2023)
    assert engine.model is None


def test_empty_projection_is_rejected(engine) -> None:
    with pytest.raises(ValueError):
        engine.generate_forecast(ProjectionSeries(scenario="age65plus", years=(), values=()), 2030)


def test_fit_failure_is_wrapped(engine, seniors, monkeypatch) -> None:
    def boom(*args, **kwargs):
        raise FloatingPointError("diverged")

    monkeypatch.setattr(engine_mod, "fit_case_regressor", boom)
    with pytest.raises(ForecastError):
        engine.generate_forecast(seniors, 2026)


def test_from_config(cfg) -> None:
    eng = ForecastEngine.from_config(cfg)
    assert eng.start_year == 2024
    assert eng.interval_level == 0.9
    assert eng.settings.hidden_layer_sizes == (16, 8)
    assert eng.settings.random_state == 0
