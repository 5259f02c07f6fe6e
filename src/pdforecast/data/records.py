"""src/pdforecast/data/records.py"""

from __future__ import annotations

from dataclasses import dataclass, field

import pandas as pd


@dataclass(frozen=True)
class CensusData:
    """Age structure of the county for a single reference year."""
    year: int
    population: int
    median_age: float
    age_groups: dict[str, int]


@dataclass(frozen=True)
class AgeDistribution:
    age_groups: tuple[str, ...]
    population: tuple[int, ...]
    total_population: int
    age65plus: int
    median_age: float

    @property
    def senior_pct(self) -> float:
        if self.total_population <= 0:
            return 0.0
        return self.age65plus / self.total_population * 100.0

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame({"Age_Group": list(self.age_groups), "Population": list(self.population)})


@dataclass(frozen=True)
class ProjectionSeries:
    """One projection scenario; years strictly increasing."""
    scenario: str
    years: tuple[int, ...]
    values: tuple[int, ...]

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(
            {"Scenario": self.scenario, "Year": list(self.years), "Population": list(self.values)}
        )


@dataclass(frozen=True)
class PopulationProjections:
    series: dict[str, ProjectionSeries]
    default_scenario: str = "total"

    def get(self, scenario: str | None) -> ProjectionSeries:
        """Unrecognized scenarios fall back to the default one."""
        key = str(scenario).strip() if scenario is not None else self.default_scenario
        return self.series.get(key, self.series[self.default_scenario])

    @property
    def scenarios(self) -> tuple[str, ...]:
        return tuple(self.series)


@dataclass(frozen=True)
class MortalityRecord:
    """
    Age-stratified mortality per 100,000.

    age_groups, rates and confidence are index-aligned; every year_data
    entry holds one rate per age group in the same order.
    """
    age_groups: tuple[str, ...]
    rates: tuple[float, ...]
    confidence: tuple[float, ...]
    year_data: dict[int, tuple[float, ...]] = field(default_factory=dict)

    def highest_risk(self) -> tuple[str, float]:
        idx = max(range(len(self.rates)), key=lambda i: self.rates[i])
        return self.age_groups[idx], self.rates[idx]

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(
            {
                "Age_Group": list(self.age_groups),
                "Rate_per_100k": list(self.rates),
                "Confidence": list(self.confidence),
            }
        )

    def history_frame(self) -> pd.DataFrame:
        rows = [
            {"Year": int(year), "Age_Group": group, "Rate_per_100k": float(rate)}
            for year, rates in sorted(self.year_data.items())
            for group, rate in zip(self.age_groups, rates)
        ]
        return pd.DataFrame(rows, columns=["Year", "Age_Group", "Rate_per_100k"])


@dataclass(frozen=True)
class City:
    name: str
    lat: float
    lng: float
    population: int


@dataclass(frozen=True)
class GeoHeatmap:
    year: int
    metric: str
    cities: tuple[City, ...]
    values: tuple[float, ...]

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(
            {
                "City": [c.name for c in self.cities],
                "Lat": [c.lat for c in self.cities],
                "Lng": [c.lng for c in self.cities],
                "Population": [c.population for c in self.cities],
                "Year": self.year,
                "Metric": self.metric,
                "Value": list(self.values),
            }
        )
