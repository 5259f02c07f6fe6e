"""src/pdforecast/forecasting/engine.py"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np
import pandas as pd

from pdforecast.common.config import AppConfig
from pdforecast.common.utils import parse_year, safe_float, safe_int
from pdforecast.data.records import ProjectionSeries
from pdforecast.features.build_features import (
    BASE_PREVALENCE_RATE,
    FORECAST_START_YEAR,
    REFERENCE_HISTORY,
    HistoricalSeries,
    build_future_features,
    build_training_features,
)
from pdforecast.forecasting.intervals import IntervalResult, normal_band
from pdforecast.forecasting.metrics import (
    CONFIDENCE_FLOOR,
    clamp_confidence,
    dispersion_confidence,
    peak_year,
    percent_change,
)
from pdforecast.modeling.evaluation import FitMetrics, compute_fit_metrics
from pdforecast.modeling.nn_models import CaseRegressor, NetworkSettings, fit_case_regressor

logger = logging.getLogger(__name__)


class ForecastError(RuntimeError):
    """Model fitting or prediction failed."""


@dataclass(frozen=True)
class ForecastResult:
    years: tuple[int, ...]
    cases: tuple[float, ...]
    confidence: float
    percent_change: float
    overall_confidence: float
    peak_year: int | None
    historical_cases: tuple[float, ...]
    baseline: float
    interval: IntervalResult | None = None
    fit_metrics: FitMetrics | None = None

    @property
    def final_cases(self) -> float | None:
        return self.cases[-1] if self.cases else None

    def to_frame(self) -> pd.DataFrame:
        base = pd.DataFrame({"Year": list(self.years), "Predicted_Cases": list(self.cases)})
        if self.interval is None or base.empty:
            return base
        band = self.interval.to_frame(self.years, "Predicted_Cases").drop(columns=["Predicted_Cases"])
        return base.merge(band, on="Year", how="left")


class ForecastEngine:
    """
    Fits a small feed-forward network on the case history and projects PD
    case counts forward one year at a time. The network is refit from
    scratch on every call; ``self.model`` holds the latest fit only.
    """

    def __init__(
        self,
        settings: NetworkSettings | None = None,
        *,
        history: HistoricalSeries = REFERENCE_HISTORY,
        start_year: int = FORECAST_START_YEAR,
        prevalence_rate: float = BASE_PREVALENCE_RATE,
        confidence_floor: float = CONFIDENCE_FLOOR,
        interval_level: float = 0.95,
    ) -> None:
        self.settings = settings or NetworkSettings()
        self.history = history
        self.start_year = int(start_year)
        self.prevalence_rate = float(prevalence_rate)
        self.confidence_floor = float(confidence_floor)
        self.interval_level = float(interval_level)
        self.model: CaseRegressor | None = None

    @classmethod
    def from_config(cls, cfg: AppConfig) -> "ForecastEngine":
        fc = cfg.forecast
        return cls(
            NetworkSettings.from_config(cfg.model),
            start_year=safe_int(fc.get("start_year"), FORECAST_START_YEAR),
            confidence_floor=safe_float(fc.get("confidence_floor"), CONFIDENCE_FLOOR),
            interval_level=safe_float(fc.get("interval_level"), 0.95),
        )

    def generate_forecast(self, projection: ProjectionSeries, target_year: int) -> ForecastResult:
        """
        Forecast PD cases for every year from start_year to target_year.

        Raises ValueError for an empty projection series or a target year
        before start_year; ForecastError if the network cannot be fit.
        """
        target_year = parse_year(target_year)
        if target_year < self.start_year:
            raise ValueError(f"target_year {target_year} precedes the first forecast year {self.start_year}")
        if len(projection.years) == 0:
            raise ValueError(f"Projection series {projection.scenario!r} is empty")

        X_hist, y_hist = build_training_features(self.history, prevalence_rate=self.prevalence_rate)
        X_future = build_future_features(
            projection.years,
            projection.values,
            target_year=target_year,
            start_year=self.start_year,
            history=self.history,
        )

        logger.info(
            "Training case regressor on %d historical years (%d epochs, batch %d)",
            len(X_hist),
            self.settings.epochs,
            self.settings.batch_size,
        )
        try:
            self.model = fit_case_regressor(X_hist, y_hist, self.settings)
            fitted = self.model.predict(X_hist)
            predictions = self.model.predict(X_future)
        except Exception as e:
            raise ForecastError(f"Case regressor failed: {e}") from e
        logger.info("Case regressor trained; forecasting %d year(s) to %d", len(X_future), target_year)

        fit = compute_fit_metrics(y_hist, fitted)
        years = [int(y) for y in X_future["Year"]]
        baseline = float(y_hist[-1])
        confidence = dispersion_confidence(predictions)

        return ForecastResult(
            years=tuple(years),
            cases=tuple(float(v) for v in predictions),
            confidence=confidence,
            percent_change=percent_change(baseline, float(predictions[-1])),
            overall_confidence=clamp_confidence(confidence, self.confidence_floor),
            peak_year=peak_year(years, predictions),
            historical_cases=tuple(float(v) for v in y_hist),
            baseline=baseline,
            interval=normal_band(np.asarray(predictions), fit.residual_std, self.interval_level),
            fit_metrics=fit,
        )
