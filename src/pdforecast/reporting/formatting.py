"""src/pdforecast/reporting/formatting.py"""

from __future__ import annotations

import math

from pdforecast.data.records import AgeDistribution, MortalityRecord
from pdforecast.forecasting.engine import ForecastResult

MISSING = "—"


def format_number(value: float | int | None) -> str:
    """Round half up and add thousands separators: 735.63 -> '736'."""
    if value is None or not math.isfinite(float(value)):
        return MISSING
    return f"{int(math.floor(float(value) + 0.5)):,}"


def format_decimal(value: float | None) -> str:
    if value is None or not math.isfinite(float(value)):
        return MISSING
    return f"{float(value):.1f}"


def format_pct(value: float | None) -> str:
    """value is already a percentage: 26.14 -> '26.1%'"""
    text = format_decimal(value)
    return text if text == MISSING else f"{text}%"


def age_summary(dist: AgeDistribution) -> dict[str, str]:
    return {
        "Total Population": format_number(dist.total_population),
        "Median Age": format_decimal(dist.median_age),
        "Population 65+": format_number(dist.age65plus),
        "Percent 65+": format_pct(dist.senior_pct),
    }


def mortality_summary(record: MortalityRecord) -> dict[str, str]:
    group, rate = record.highest_risk()
    return {
        "Highest Risk Group": group,
        "Mortality Rate (per 100k)": format_decimal(rate),
    }


def forecast_summary(result: ForecastResult) -> dict[str, str]:
    return {
        "Predicted Cases": format_number(result.final_cases),
        "Change vs Baseline": format_pct(result.percent_change),
        "Model Confidence": format_pct(result.overall_confidence * 100.0),
        "Peak Risk Year": str(result.peak_year) if result.peak_year is not None else MISSING,
    }
