"""src/pdforecast/forecasting/metrics.py"""

from __future__ import annotations

from typing import Sequence

import numpy as np

CONFIDENCE_FLOOR = 0.7


def percent_change(baseline: float, latest: float) -> float:
    """(latest - baseline) / baseline * 100"""
    if baseline == 0:
        return float("nan")
    return (float(latest) - float(baseline)) / float(baseline) * 100.0


def dispersion_confidence(predictions: Sequence[float]) -> float:
    """
    1 - std/mean of the predicted series (population std). This measures
    how flat the forecast is, not how accurate it is.
    """
    p = np.asarray(predictions, dtype=float)
    if p.size == 0:
        return float("nan")
    mean = float(np.mean(p))
    if mean == 0 or not np.isfinite(mean):
        return float("nan")
    return 1.0 - float(np.std(p)) / mean


def clamp_confidence(confidence: float, floor: float = CONFIDENCE_FLOOR) -> float:
    """max(floor, confidence); a non-finite confidence reports the floor."""
    if not np.isfinite(confidence):
        return float(floor)
    return max(float(floor), float(confidence))


def peak_year(years: Sequence[int], predictions: Sequence[float]) -> int | None:
    """Year of the maximum prediction, first occurrence on ties."""
    if len(predictions) == 0:
        return None
    return int(years[int(np.argmax(np.asarray(predictions, dtype=float)))])
