"""src/pdforecast/forecasting/intervals.py"""

from __future__ import annotations

from dataclasses import dataclass
from statistics import NormalDist
from typing import Iterable

import numpy as np
import pandas as pd


@dataclass(frozen=True)
class IntervalResult:
    """
    Point forecast with a symmetric prediction band.

    level: central coverage, e.g. 0.8, 0.95
    """
    forecast: np.ndarray
    lower: np.ndarray
    upper: np.ndarray
    level: float

    def to_frame(self, years: Iterable[int], value_col: str) -> pd.DataFrame:
        pct = int(round(self.level * 100))
        return pd.DataFrame(
            {
                "Year": list(years),
                value_col: self.forecast.astype(float),
                f"{value_col}_Lower_{pct}": self.lower.astype(float),
                f"{value_col}_Upper_{pct}": self.upper.astype(float),
            }
        )


def z_from_level(level: float) -> float:
    """0.80 -> ~1.2816, 0.95 -> ~1.96"""
    x = min(max(float(level), 1e-6), 0.999999)
    return NormalDist().inv_cdf((1.0 + x) / 2.0)


def normal_band(yhat: np.ndarray, sigma: float, level: float = 0.95) -> IntervalResult:
    """Band of +/- z*sigma around yhat; sigma is the in-sample residual std."""
    yhat = np.asarray(yhat, dtype=float)
    s = float(sigma) if np.isfinite(sigma) and sigma > 0 else 0.0
    z = z_from_level(level)
    return IntervalResult(forecast=yhat, lower=yhat - z * s, upper=yhat + z * s, level=float(level))
