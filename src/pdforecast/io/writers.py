"""src/pdforecast/io/writers.py"""

from __future__ import annotations

from pathlib import Path

import pandas as pd

from pdforecast.data.records import CensusData, MortalityRecord, PopulationProjections


def ensure_parent_dir(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)


def write_csv(df: pd.DataFrame, path: Path, *, index: bool = False) -> Path:
    """Write DataFrame to CSV (ensures parent folder exists)."""
    ensure_parent_dir(path)
    df.to_csv(path, index=index)
    return path


def census_to_frame(census: CensusData) -> pd.DataFrame:
    return pd.DataFrame(
        {
            "Year": census.year,
            "Age_Group": list(census.age_groups),
            "Population": list(census.age_groups.values()),
            "Median_Age": census.median_age,
            "Reported_Total": census.population,
        }
    )


def projections_to_frame(projections: PopulationProjections) -> pd.DataFrame:
    frames = [s.to_frame() for s in projections.series.values()]
    return pd.concat(frames, ignore_index=True)


def mortality_to_frame(mortality: MortalityRecord) -> pd.DataFrame:
    """
    Long format accepted by read_mortality_csv. The current rates are written
    as Current=True rows with no Year; history rows follow. Confidence is only
    known for the current rates, so it is repeated across history years.
    """
    cols = ["Year", "Age_Group", "Rate_per_100k", "Confidence", "Current"]

    current = mortality.to_frame()
    current.insert(0, "Year", pd.array([pd.NA] * len(current), dtype="Int64"))
    current["Current"] = True

    hist = mortality.history_frame()
    conf = dict(zip(mortality.age_groups, mortality.confidence))
    hist["Year"] = hist["Year"].astype("Int64")
    hist["Confidence"] = hist["Age_Group"].map(conf).astype(float)
    hist["Current"] = False

    return pd.concat([current[cols], hist[cols]], ignore_index=True)


def write_reference_tables(
    *,
    census: CensusData,
    projections: PopulationProjections,
    mortality: MortalityRecord,
    census_path: Path,
    projections_path: Path,
    mortality_path: Path,
) -> list[Path]:
    """Dump reference records in the CSV layouts read by CsvReferenceSource."""
    return [
        write_csv(census_to_frame(census), census_path),
        write_csv(projections_to_frame(projections), projections_path),
        write_csv(mortality_to_frame(mortality), mortality_path),
    ]
