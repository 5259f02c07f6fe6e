"""src/pdforecast/io/readers.py"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pandas as pd

from pdforecast.data.records import CensusData, MortalityRecord, PopulationProjections, ProjectionSeries
from pdforecast.validation.schemas import CENSUS_TABLE, MORTALITY_TABLE, PROJECTIONS_TABLE, assert_schema


# ---------- generic helpers ----------

def read_csv(path: Path, *, dtype: dict[str, Any] | None = None) -> pd.DataFrame:
    if not path.exists():
        raise FileNotFoundError(f"Missing file:\n{path}")
    df = pd.read_csv(path, dtype=dtype)
    df.columns = [str(c).strip() for c in df.columns]
    return df


def _rename_first(df: pd.DataFrame, target: str, candidates: list[str]) -> pd.DataFrame:
    if target in df.columns:
        return df
    for candidate in candidates:
        if candidate in df.columns:
            return df.rename(columns={candidate: target})
    return df


def _coerce_year(df: pd.DataFrame, col: str = "Year") -> pd.DataFrame:
    out = df.copy()
    out[col] = pd.to_numeric(out[col], errors="coerce").astype("Int64")
    out = out.dropna(subset=[col]).copy()
    out[col] = out[col].astype(int)
    return out


# ---------- domain-specific reads ----------

def read_census_csv(path: Path) -> CensusData:
    """
    Census age table, one row per bracket in display order:
        Year, Age_Group, Population, Median_Age (optional: Reported_Total)
    """
    df = read_csv(path, dtype={"Age_Group": "string"})
    df = _rename_first(df, "Age_Group", ["Age", "age_group", "Bracket"])
    df = _rename_first(df, "Population", ["Count", "Value", "population"])
    assert_schema(df, CENSUS_TABLE)

    df = _coerce_year(df)
    df["Age_Group"] = df["Age_Group"].astype(str).str.strip()
    df["Population"] = pd.to_numeric(df["Population"], errors="coerce")
    df = df.dropna(subset=["Population"]).copy()

    years = df["Year"].unique().tolist()
    if len(years) != 1:
        raise ValueError(f"{path.name}: expected a single census year, found {sorted(years)}")

    groups = {str(g): int(p) for g, p in zip(df["Age_Group"], df["Population"])}
    total = int(df["Reported_Total"].iloc[0]) if "Reported_Total" in df.columns else int(sum(groups.values()))

    return CensusData(
        year=int(years[0]),
        population=total,
        median_age=float(df["Median_Age"].iloc[0]),
        age_groups=groups,
    )


def read_projections_csv(path: Path, *, default_scenario: str = "total") -> PopulationProjections:
    """
    Long-format projections:
        Scenario, Year, Population
    """
    df = read_csv(path, dtype={"Scenario": "string"})
    df = _rename_first(df, "Population", ["Value", "Projected_Population", "population"])
    assert_schema(df, PROJECTIONS_TABLE)

    df = _coerce_year(df)
    df["Scenario"] = df["Scenario"].astype(str).str.strip()
    df["Population"] = pd.to_numeric(df["Population"], errors="coerce")
    df = df.dropna(subset=["Population"]).sort_values(["Scenario", "Year"])

    series: dict[str, ProjectionSeries] = {}
    for scenario, sub in df.groupby("Scenario", sort=False):
        series[str(scenario)] = ProjectionSeries(
            scenario=str(scenario),
            years=tuple(int(y) for y in sub["Year"]),
            values=tuple(int(round(v)) for v in sub["Population"]),
        )

    if default_scenario not in series:
        raise KeyError(f"{path.name}: default scenario {default_scenario!r} missing. Found: {sorted(series)}")
    return PopulationProjections(series=series, default_scenario=default_scenario)


def _flag(col: pd.Series) -> pd.Series:
    return col.astype(str).str.strip().str.lower().isin(["true", "1", "yes"])


def read_mortality_csv(path: Path) -> MortalityRecord:
    """
    Long-format mortality table:
        Year, Age_Group, Rate_per_100k, Confidence (optional: Current)

    Rows flagged Current carry the current rates and confidence and need no
    Year; every other row is history and goes into year_data. Without a
    Current column, the latest history year supplies the current rates.
    Age-group order follows the first appearance.
    """
    df = read_csv(path, dtype={"Age_Group": "string"})
    df = _rename_first(df, "Rate_per_100k", ["Rate", "rate"])
    assert_schema(df, MORTALITY_TABLE)

    df["Age_Group"] = df["Age_Group"].astype(str).str.strip()
    df["Rate_per_100k"] = pd.to_numeric(df["Rate_per_100k"], errors="coerce")
    df["Confidence"] = pd.to_numeric(df["Confidence"], errors="coerce")

    is_current = _flag(df["Current"]) if "Current" in df.columns else pd.Series(False, index=df.index)
    current = df[is_current]
    hist = _coerce_year(df[~is_current])

    if current.empty:
        if hist.empty:
            raise ValueError(f"{path.name}: no mortality rows")
        current = hist[hist["Year"] == int(hist["Year"].max())]

    groups = tuple(dict.fromkeys(current["Age_Group"].tolist()))
    current = current.set_index("Age_Group").reindex(list(groups))

    year_data: dict[int, tuple[float, ...]] = {}
    if not hist.empty:
        wide = hist.pivot(index="Year", columns="Age_Group", values="Rate_per_100k").reindex(columns=list(groups))
        year_data = {int(y): tuple(float(v) for v in row) for y, row in wide.iterrows()}

    return MortalityRecord(
        age_groups=groups,
        rates=tuple(float(v) for v in current["Rate_per_100k"]),
        confidence=tuple(float(v) for v in current["Confidence"]),
        year_data=year_data,
    )
