"""src/pdforecast/features/build_features.py"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np
import pandas as pd

from pdforecast.features.projection import interpolate_projection_many

BASE_PREVALENCE_RATE = 0.001
FORECAST_START_YEAR = 2024

FEATURE_COLUMNS = ["Year", "Senior_Population", "Mortality_Rate", "Time_Index"]


@dataclass(frozen=True)
class HistoricalSeries:
    """
    Yearly senior (65+) population and PD mortality per 100k used as the
    training history. Sequences are index-aligned by year.
    """
    years: tuple[int, ...]
    senior_population: tuple[int, ...]
    mortality_rate: tuple[float, ...]

    def __post_init__(self) -> None:
        n = len(self.years)
        if n == 0:
            raise ValueError("Historical series is empty.")
        if len(self.senior_population) != n or len(self.mortality_rate) != n:
            raise ValueError(
                f"Historical series unaligned: years={n}, population={len(self.senior_population)}, "
                f"mortality={len(self.mortality_rate)}"
            )

    @property
    def first_year(self) -> int:
        return int(self.years[0])

    @property
    def last_mortality_rate(self) -> float:
        return float(self.mortality_rate[-1])

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(
            {
                "Year": list(self.years),
                "Senior_Population": list(self.senior_population),
                "Mortality_Rate": list(self.mortality_rate),
            }
        )


REFERENCE_HISTORY = HistoricalSeries(
    years=(2018, 2019, 2020, 2021, 2022, 2023),
    senior_population=(605_000, 610_000, 620_000, 638_000, 655_000, 678_000),
    mortality_rate=(7.8, 8.1, 8.4, 8.9, 8.7, 8.5),
)


def estimate_cases(
    population: Sequence[float],
    mortality_rate: Sequence[float],
    *,
    prevalence_rate: float = BASE_PREVALENCE_RATE,
) -> np.ndarray:
    """cases = population * prevalence_rate * (1 + mortality_rate / 100)"""
    pop = np.asarray(population, dtype=float)
    mort = np.asarray(mortality_rate, dtype=float)
    return pop * float(prevalence_rate) * (1.0 + mort / 100.0)


def build_training_features(
    history: HistoricalSeries = REFERENCE_HISTORY,
    *,
    prevalence_rate: float = BASE_PREVALENCE_RATE,
) -> tuple[pd.DataFrame, np.ndarray]:
    """
    Returns (X, y): one row per historical year with FEATURE_COLUMNS, and
    the estimated case count for that year as target.
    """
    years = np.asarray(history.years, dtype=int)
    X = pd.DataFrame(
        {
            "Year": years,
            "Senior_Population": np.asarray(history.senior_population, dtype=float),
            "Mortality_Rate": np.asarray(history.mortality_rate, dtype=float),
            "Time_Index": years - history.first_year,
        },
        columns=FEATURE_COLUMNS,
    )
    y = estimate_cases(history.senior_population, history.mortality_rate, prevalence_rate=prevalence_rate)
    return X, y


def build_future_features(
    projection_years: Sequence[int],
    projection_values: Sequence[float],
    *,
    target_year: int,
    start_year: int = FORECAST_START_YEAR,
    history: HistoricalSeries = REFERENCE_HISTORY,
) -> pd.DataFrame:
    """
    One row per year in [start_year, target_year]. Senior population comes
    from the projection series, mortality is held at the last observed
    rate. Empty when target_year < start_year.
    """
    years = np.arange(int(start_year), int(target_year) + 1, dtype=int)
    if len(projection_years) == 0:
        raise ValueError("Projection series is empty; cannot build forecast features.")

    population = interpolate_projection_many(projection_years, projection_values, years.tolist())
    return pd.DataFrame(
        {
            "Year": years,
            "Senior_Population": population,
            "Mortality_Rate": np.full(years.shape, history.last_mortality_rate, dtype=float),
            "Time_Index": years - history.first_year,
        },
        columns=FEATURE_COLUMNS,
    )
