"""src/pdforecast/features/__init__.py"""

from .build_features import (
    BASE_PREVALENCE_RATE,
    FEATURE_COLUMNS,
    FORECAST_START_YEAR,
    REFERENCE_HISTORY,
    HistoricalSeries,
    build_future_features,
    build_training_features,
    estimate_cases,
)
from .projection import interpolate_projection, interpolate_projection_many

__all__ = [
    "BASE_PREVALENCE_RATE",
    "FEATURE_COLUMNS",
    "FORECAST_START_YEAR",
    "REFERENCE_HISTORY",
    "HistoricalSeries",
    "estimate_cases",
    "build_training_features",
    "build_future_features",
    "interpolate_projection",
    "interpolate_projection_many",
]
