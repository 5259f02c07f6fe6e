"""src/pdforecast/features/projection.py"""

from __future__ import annotations

from typing import Sequence

import numpy as np


def interpolate_projection(years: Sequence[int], values: Sequence[float], target_year: float) -> float:
    """
    Linear interpolation over a projection series.

    Before the first point the first value is used, after the last point
    the last value; in between
        v1 + (target - y1) / (y2 - y1) * (v2 - v1)
    Sample years return their value unchanged.
    """
    xp = np.asarray(years, dtype=float)
    fp = np.asarray(values, dtype=float)
    if xp.size == 0:
        raise ValueError("Cannot interpolate an empty projection series.")
    if xp.size != fp.size:
        raise ValueError(f"Projection years/values length mismatch: {xp.size} vs {fp.size}")
    if xp.size > 1 and np.any(np.diff(xp) <= 0):
        raise ValueError("Projection years must be strictly increasing.")

    return float(np.interp(float(target_year), xp, fp))


def interpolate_projection_many(years: Sequence[int], values: Sequence[float], targets: Sequence[int]) -> np.ndarray:
    return np.asarray([interpolate_projection(years, values, t) for t in targets], dtype=float)
