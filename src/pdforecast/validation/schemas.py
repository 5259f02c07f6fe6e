"""src/pdforecast/validation/schemas.py"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

import pandas as pd


@dataclass(frozen=True)
class SchemaSpec:
    """Minimal schema specification for a DataFrame."""
    name: str
    required_cols: tuple[str, ...]
    dtype_hints: dict[str, str] | None = None  # e.g. {"Year": "int", "Age_Group": "string"}


def _missing_cols(df: pd.DataFrame, required: Iterable[str]) -> list[str]:
    return [c for c in required if c not in df.columns]


# ---- Reference tables (CSV layouts) ----

CENSUS_TABLE = SchemaSpec(
    name="census_age_groups",
    required_cols=("Year", "Age_Group", "Population", "Median_Age"),
    dtype_hints={"Year": "int", "Age_Group": "string", "Population": "int", "Median_Age": "float"},
)

PROJECTIONS_TABLE = SchemaSpec(
    name="population_projections",
    required_cols=("Scenario", "Year", "Population"),
    dtype_hints={"Scenario": "string", "Year": "int", "Population": "int"},
)

MORTALITY_TABLE = SchemaSpec(
    name="pd_mortality",
    required_cols=("Year", "Age_Group", "Rate_per_100k", "Confidence"),
    dtype_hints={"Year": "int", "Age_Group": "string", "Rate_per_100k": "float", "Confidence": "float"},
)

# ---- Outputs ----

FORECAST_TABLE = SchemaSpec(
    name="pd_case_forecast",
    required_cols=("Year", "Predicted_Cases"),
    dtype_hints={"Year": "int", "Predicted_Cases": "float"},
)

HEATMAP_TABLE = SchemaSpec(
    name="geo_heatmap",
    required_cols=("City", "Lat", "Lng", "Year", "Metric", "Value"),
    dtype_hints={"City": "string", "Lat": "float", "Lng": "float", "Year": "int", "Metric": "string", "Value": "float"},
)


def assert_schema(df: pd.DataFrame, spec: SchemaSpec) -> None:
    """Raise a KeyError if required columns are missing."""
    missing = _missing_cols(df, spec.required_cols)
    if missing:
        raise KeyError(
            f"{spec.name}: missing columns {missing}. Found: {list(df.columns)}"
        )
