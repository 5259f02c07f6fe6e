"""src/pdforecast/validation/checks.py"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np
import pandas as pd

from pdforecast.data.records import CensusData, MortalityRecord, PopulationProjections
from pdforecast.validation.schemas import SchemaSpec, assert_schema

EXPECTED_CENSUS_BRACKETS = 18


@dataclass(frozen=True)
class CheckResult:
    ok: bool
    errors: tuple[str, ...]

    def raise_if_failed(self) -> None:
        if not self.ok:
            msg = "\n".join(self.errors) if self.errors else "Validation failed."
            raise ValueError(msg)


def _result(errors: list[str]) -> CheckResult:
    return CheckResult(ok=(len(errors) == 0), errors=tuple(errors))


# ---- DataFrame checks ----

def check_year_range(df: pd.DataFrame, *, col: str = "Year", min_year: int | None = None, max_year: int | None = None) -> list[str]:
    errs: list[str] = []
    if col not in df.columns:
        return errs
    y = pd.to_numeric(df[col], errors="coerce").astype("Int64")
    if min_year is not None:
        bad = y < int(min_year)
        if int(bad.sum()):
            errs.append(f"{col}: {int(bad.sum())} rows below min_year={min_year}")
    if max_year is not None:
        bad = y > int(max_year)
        if int(bad.sum()):
            errs.append(f"{col}: {int(bad.sum())} rows above max_year={max_year}")
    return errs


def check_nonnegative(df: pd.DataFrame, cols: Sequence[str]) -> list[str]:
    errs: list[str] = []
    for c in cols:
        if c not in df.columns:
            continue
        x = pd.to_numeric(df[c], errors="coerce")
        n_bad = int((x < 0).sum())
        if n_bad:
            errs.append(f"{c}: {n_bad} negative values found")
    return errs


def check_unique_keys(df: pd.DataFrame, keys: Sequence[str]) -> list[str]:
    errs: list[str] = []
    if any(k not in df.columns for k in keys):
        return errs
    dup_mask = df.duplicated(subset=list(keys), keep=False)
    n_dup = int(dup_mask.sum())
    if n_dup:
        sample = df.loc[dup_mask, list(keys)].head(10).to_dict(orient="records")
        errs.append(f"duplicate keys on {list(keys)}; dup_rows={n_dup}; sample={sample}")
    return errs


def validate_df(
    df: pd.DataFrame,
    *,
    schema: SchemaSpec | None = None,
    year_col: str | None = None,
    year_min: int | None = None,
    year_max: int | None = None,
    nonnegative_cols: Sequence[str] = (),
    unique_keys: Sequence[str] = (),
) -> CheckResult:
    """
    Generic validation runner.
    - validates required columns via schema (if provided)
    - validates year range (if year_col + bounds)
    - validates nonnegativity and uniqueness (optional)
    """
    errors: list[str] = []

    if schema is not None:
        try:
            assert_schema(df, schema)
        except KeyError as e:
            # If schema fails, don't attempt downstream checks that may crash
            return _result([str(e)])

    if year_col:
        errors.extend(check_year_range(df, col=year_col, min_year=year_min, max_year=year_max))
    if nonnegative_cols:
        errors.extend(check_nonnegative(df, cols=list(nonnegative_cols)))
    if unique_keys:
        errors.extend(check_unique_keys(df, keys=list(unique_keys)))

    return _result(errors)


# ---- Record checks ----

def validate_census(census: CensusData) -> CheckResult:
    errors: list[str] = []
    n = len(census.age_groups)
    if n != EXPECTED_CENSUS_BRACKETS:
        errors.append(f"census: expected {EXPECTED_CENSUS_BRACKETS} age brackets, found {n}")
    negative = [g for g, v in census.age_groups.items() if v < 0]
    if negative:
        errors.append(f"census: negative population for brackets {negative}")
    if census.population < 0:
        errors.append(f"census: negative reported total {census.population}")
    return _result(errors)


def validate_projections(projections: PopulationProjections) -> CheckResult:
    errors: list[str] = []
    if projections.default_scenario not in projections.series:
        errors.append(f"projections: default scenario {projections.default_scenario!r} missing")
    for name, s in projections.series.items():
        if len(s.years) != len(s.values):
            errors.append(f"projections[{name}]: {len(s.years)} years vs {len(s.values)} values")
            continue
        if not s.years:
            errors.append(f"projections[{name}]: empty series")
            continue
        if np.any(np.diff(np.asarray(s.years, dtype=int)) <= 0):
            errors.append(f"projections[{name}]: years must be strictly increasing, got {list(s.years)}")
        if any(v < 0 for v in s.values):
            errors.append(f"projections[{name}]: negative population values")
    return _result(errors)


def validate_mortality(mortality: MortalityRecord) -> CheckResult:
    errors: list[str] = []
    n = len(mortality.age_groups)
    if len(mortality.rates) != n or len(mortality.confidence) != n:
        errors.append(
            f"mortality: unaligned sequences (groups={n}, rates={len(mortality.rates)}, "
            f"confidence={len(mortality.confidence)})"
        )
    if any(not 0.0 <= c <= 1.0 for c in mortality.confidence):
        errors.append(f"mortality: confidence outside [0, 1]: {list(mortality.confidence)}")
    if any(r < 0 for r in mortality.rates):
        errors.append("mortality: negative rates")
    for year, rates in mortality.year_data.items():
        if len(rates) != n:
            errors.append(f"mortality: year {year} has {len(rates)} rates for {n} age groups")
    return _result(errors)
