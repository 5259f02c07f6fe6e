"""src/pdforecast/data/sources.py"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from pdforecast.data import reference as ref
from pdforecast.data.records import CensusData, MortalityRecord, PopulationProjections, ProjectionSeries


class ReferenceSource(Protocol):
    """Anything that can produce the three reference record types."""
    def load_census(self) -> CensusData: ...

    def load_projections(self) -> PopulationProjections: ...

    def load_mortality(self) -> MortalityRecord: ...


def _projection_series(scenario: str, pairs: list[tuple[int, int]]) -> ProjectionSeries:
    return ProjectionSeries(
        scenario=scenario,
        years=tuple(int(y) for y, _ in pairs),
        values=tuple(int(v) for _, v in pairs),
    )


class StaticReferenceSource:
    """Serves the built-in Lee County tables."""

    def load_census(self) -> CensusData:
        return CensusData(
            year=ref.CENSUS_YEAR,
            population=ref.CENSUS_REPORTED_TOTAL,
            median_age=ref.CENSUS_MEDIAN_AGE,
            age_groups=dict(ref.CENSUS_AGE_GROUPS),
        )

    def load_projections(self) -> PopulationProjections:
        return PopulationProjections(
            series={name: _projection_series(name, pairs) for name, pairs in ref.PROJECTIONS.items()},
            default_scenario=ref.DEFAULT_SCENARIO,
        )

    def load_mortality(self) -> MortalityRecord:
        return MortalityRecord(
            age_groups=tuple(ref.MORTALITY_AGE_GROUPS),
            rates=tuple(ref.MORTALITY_RATES),
            confidence=tuple(ref.MORTALITY_CONFIDENCE),
            year_data={int(y): tuple(r) for y, r in ref.MORTALITY_BY_YEAR.items()},
        )


@dataclass(frozen=True)
class CsvReferenceSource:
    """
    Reads the reference tables from CSV files.

    Expected layouts:
        census:      Year, Age_Group, Population, Median_Age (optional: Reported_Total)
        projections: Scenario, Year, Population
        mortality:   Year, Age_Group, Rate_per_100k, Confidence (optional: Current)
    """
    census_path: Path
    projections_path: Path
    mortality_path: Path

    def load_census(self) -> CensusData:
        from pdforecast.io.readers import read_census_csv
        return read_census_csv(self.census_path)

    def load_projections(self) -> PopulationProjections:
        from pdforecast.io.readers import read_projections_csv
        return read_projections_csv(self.projections_path, default_scenario=ref.DEFAULT_SCENARIO)

    def load_mortality(self) -> MortalityRecord:
        from pdforecast.io.readers import read_mortality_csv
        return read_mortality_csv(self.mortality_path)
