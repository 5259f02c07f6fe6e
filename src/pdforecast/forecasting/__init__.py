"""src/pdforecast/forecasting/__init__.py"""

from .engine import ForecastEngine, ForecastError, ForecastResult
from .intervals import IntervalResult, normal_band
from .metrics import CONFIDENCE_FLOOR, clamp_confidence, dispersion_confidence, peak_year, percent_change

__all__ = [
    "ForecastEngine",
    "ForecastError",
    "ForecastResult",
    "IntervalResult",
    "normal_band",
    "CONFIDENCE_FLOOR",
    "clamp_confidence",
    "dispersion_confidence",
    "peak_year",
    "percent_change",
]
