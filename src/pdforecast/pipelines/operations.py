"""src/pdforecast/pipelines/operations.py"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable

import plotly.graph_objects as go

from pdforecast.common.config import AppConfig
from pdforecast.common.utils import parse_year
from pdforecast.data import reference as ref
from pdforecast.data.supplier import DataRetrievalError, ReferenceDataSupplier
from pdforecast.forecasting.engine import ForecastEngine
from pdforecast.reporting import charts
from pdforecast.reporting.formatting import age_summary, forecast_summary, mortality_summary

logger = logging.getLogger(__name__)

DATA_ERROR_MESSAGE = "Failed to load data. Please refresh the page."
FORECAST_ERROR_MESSAGE = "Failed to generate ML forecast. Please check your input."

FORECAST_SCENARIO = "age65plus"
DEFAULT_TARGET_YEAR = 2030


class Operation(str, Enum):
    AGE_DISTRIBUTION = "age_distribution"
    PROJECTION = "projection"
    MORTALITY = "mortality"
    HEATMAP = "heatmap"
    FORECAST = "forecast"


@dataclass(frozen=True)
class OperationResult:
    """Record + chart + formatted stats for one UI action, or an error message."""
    operation: Operation
    record: Any = None
    figure: go.Figure | None = None
    stats: dict[str, str] = field(default_factory=dict)
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class DashboardOperations:
    """
    Dispatch table for the dashboard actions. Every action fetches from the
    supplier (and the engine, for forecasts), then builds its chart.

    A failure only affects the action that raised it: data failures report
    DATA_ERROR_MESSAGE, forecast failures FORECAST_ERROR_MESSAGE.
    """

    def __init__(
        self,
        supplier: ReferenceDataSupplier,
        engine: ForecastEngine,
        *,
        forecast_scenario: str = FORECAST_SCENARIO,
    ) -> None:
        self.supplier = supplier
        self.engine = engine
        self.forecast_scenario = forecast_scenario
        self._handlers: dict[Operation, Callable[..., OperationResult]] = {
            Operation.AGE_DISTRIBUTION: self.age_distribution,
            Operation.PROJECTION: self.projection,
            Operation.MORTALITY: self.mortality,
            Operation.HEATMAP: self.heatmap,
            Operation.FORECAST: self.forecast,
        }

    @classmethod
    def from_config(cls, cfg: AppConfig) -> "DashboardOperations":
        return cls(ReferenceDataSupplier.from_config(cfg), ForecastEngine.from_config(cfg))

    def dispatch(self, operation: Operation | str, **params: Any) -> OperationResult:
        op = Operation(operation)
        logger.debug("Dispatching %s with %s", op.value, params)
        return self._handlers[op](**params)

    def _data_failure(self, op: Operation, e: Exception) -> OperationResult:
        logger.error("Error loading data for %s: %s", op.value, e)
        return OperationResult(operation=op, error=DATA_ERROR_MESSAGE)

    # ---- actions ----

    def age_distribution(self, year: Any = None) -> OperationResult:
        op = Operation.AGE_DISTRIBUTION
        try:
            dist = self.supplier.get_age_distribution(year)
        except (DataRetrievalError, ValueError) as e:
            return self._data_failure(op, e)
        return OperationResult(op, dist, charts.age_distribution_figure(dist), age_summary(dist))

    def projection(self, scenario: str = ref.DEFAULT_SCENARIO) -> OperationResult:
        op = Operation.PROJECTION
        try:
            series = self.supplier.get_population_projections(scenario)
        except (DataRetrievalError, ValueError) as e:
            return self._data_failure(op, e)
        return OperationResult(op, series, charts.projection_figure(series))

    def mortality(self) -> OperationResult:
        op = Operation.MORTALITY
        try:
            record = self.supplier.get_mortality_data()
        except (DataRetrievalError, ValueError) as e:
            return self._data_failure(op, e)
        return OperationResult(op, record, charts.mortality_figure(record), mortality_summary(record))

    def heatmap(self, year: int | str = ref.HEATMAP_REFERENCE_YEAR, metric: str = "prevalence") -> OperationResult:
        op = Operation.HEATMAP
        try:
            hm = self.supplier.get_geographic_heatmap(year, metric)
        except (DataRetrievalError, ValueError) as e:
            return self._data_failure(op, e)
        return OperationResult(op, hm, charts.heatmap_figure(hm))

    def forecast(self, target_year: int | str = DEFAULT_TARGET_YEAR) -> OperationResult:
        op = Operation.FORECAST
        try:
            projection = self.supplier.get_population_projections(self.forecast_scenario)
            result = self.engine.generate_forecast(projection, parse_year(target_year))
        except Exception as e:
            logger.exception("ML forecast error: %s", e)
            return OperationResult(operation=op, error=FORECAST_ERROR_MESSAGE)
        return OperationResult(op, result, charts.forecast_figure(result), forecast_summary(result))

    def load_initial(self) -> dict[Operation, OperationResult]:
        """Initial dashboard load: every chart except the forecast."""
        logger.info("Loading initial dashboard data")
        return {
            Operation.AGE_DISTRIBUTION: self.age_distribution(),
            Operation.PROJECTION: self.projection(),
            Operation.MORTALITY: self.mortality(),
            Operation.HEATMAP: self.heatmap(),
        }
