"""tests/unit/test_formatting.py"""

from __future__ import annotations

from pdforecast.reporting.formatting import (
    MISSING,
    age_summary,
    format_decimal,
    format_number,
    format_pct,
    mortality_summary,
)


def test_format_number_rounds_and_groups() -> None:
    assert format_number(678_674) == "678,674"
    assert format_number(735.63) == "736"
    assert format_number(1_234_567.5) == "1,234,568"


def test_format_decimal_and_pct_one_place() -> None:
    assert format_decimal(47.2) == "47.2"
    assert format_decimal(35.64) == "35.6"
    assert format_pct(26.138) == "26.1%"
    assert format_pct(-4.26) == "-4.3%"


def test_non_finite_values_render_placeholder() -> None:
    assert format_number(float("nan")) == MISSING
    assert format_pct(None) == MISSING


def test_age_summary(supplier) -> None:
    stats = age_summary(supplier.get_age_distribution())
    assert stats["Median Age"] == "47.2"
    assert stats["Population 65+"] == "177,400"
    assert stats["Total Population"] == format_number(sum(supplier.get_age_distribution().population))
    assert stats["Percent 65+"] == "26.1%"


def test_mortality_summary_highest_risk(supplier) -> None:
    stats = mortality_summary(supplier.get_mortality_data())
    assert stats == {"Highest Risk Group": "85+", "Mortality Rate (per 100k)": "35.6"}
