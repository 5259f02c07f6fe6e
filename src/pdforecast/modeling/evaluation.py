"""
src/pdforecast/modeling/evaluation.py

In-sample fit diagnostics for the case regressor. With six training rows
there is nothing to hold out, so these describe how closely the network
reproduces the history it was trained on.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

import numpy as np


def residuals(actual: Iterable[float], fitted: Iterable[float]) -> np.ndarray:
    """actual - fitted over the positions where both are finite."""
    a = np.asarray(list(actual), dtype=float)
    f = np.asarray(list(fitted), dtype=float)
    if a.shape != f.shape:
        raise ValueError(f"actual and fitted differ in length: {a.size} vs {f.size}")
    keep = np.isfinite(a) & np.isfinite(f)
    return a[keep] - f[keep]


def rmse(resid: np.ndarray) -> float:
    return float(np.sqrt(np.mean(resid**2))) if resid.size else float("nan")


def mae(resid: np.ndarray) -> float:
    return float(np.mean(np.abs(resid))) if resid.size else float("nan")


def smape(actual: np.ndarray, fitted: np.ndarray) -> float:
    """Symmetric MAPE in percent; pairs with a zero denominator count as 0."""
    a = np.asarray(actual, dtype=float)
    f = np.asarray(fitted, dtype=float)
    if a.size == 0:
        return float("nan")
    denom = (np.abs(a) + np.abs(f)) / 2.0
    ratio = np.divide(np.abs(a - f), denom, out=np.zeros_like(denom), where=denom > 0)
    return float(ratio.mean() * 100.0)


@dataclass(frozen=True)
class FitMetrics:
    """Fit quality of the case regressor on the case history."""
    rmse: float
    mae: float
    smape: float
    residual_std: float

    def as_dict(self) -> dict[str, float]:
        return {
            "RMSE": self.rmse,
            "MAE": self.mae,
            "SMAPE": self.smape,
            "Residual_Std": self.residual_std,
        }


def compute_fit_metrics(actual: Iterable[float], fitted: Iterable[float]) -> FitMetrics:
    a = np.asarray(list(actual), dtype=float)
    f = np.asarray(list(fitted), dtype=float)
    resid = residuals(a, f)
    keep = np.isfinite(a) & np.isfinite(f)
    return FitMetrics(
        rmse=rmse(resid),
        mae=mae(resid),
        smape=smape(a[keep], f[keep]),
        # population std, matching the confidence metric
        residual_std=float(resid.std()) if resid.size else float("nan"),
    )
