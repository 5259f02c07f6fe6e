"""src/pdforecast/validation/__init__.py"""

from __future__ import annotations

from .checks import (
    CheckResult,
    validate_census,
    validate_df,
    validate_mortality,
    validate_projections,
)
from .schemas import (
    CENSUS_TABLE,
    FORECAST_TABLE,
    HEATMAP_TABLE,
    MORTALITY_TABLE,
    PROJECTIONS_TABLE,
    SchemaSpec,
    assert_schema,
)

__all__ = [
    # checks
    "CheckResult",
    "validate_df",
    "validate_census",
    "validate_projections",
    "validate_mortality",
    # schemas
    "SchemaSpec",
    "assert_schema",
    "CENSUS_TABLE",
    "PROJECTIONS_TABLE",
    "MORTALITY_TABLE",
    "FORECAST_TABLE",
    "HEATMAP_TABLE",
]
