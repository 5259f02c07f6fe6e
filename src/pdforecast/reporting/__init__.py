"""src/pdforecast/reporting/__init__.py"""

from __future__ import annotations

from .charts import (
    age_distribution_figure,
    forecast_figure,
    heatmap_figure,
    mortality_figure,
    mortality_trend_figure,
    projection_figure,
)
from .export import ReportPackPaths, export_report_pack
from .formatting import age_summary, forecast_summary, format_decimal, format_number, format_pct, mortality_summary
from .tables import (
    make_age_summary_table,
    make_forecast_summary_table,
    make_forecast_table,
    make_mortality_trend_table,
)

__all__ = [
    "age_distribution_figure",
    "projection_figure",
    "mortality_figure",
    "mortality_trend_figure",
    "forecast_figure",
    "heatmap_figure",
    "ReportPackPaths",
    "export_report_pack",
    "format_number",
    "format_decimal",
    "format_pct",
    "age_summary",
    "mortality_summary",
    "forecast_summary",
    "make_age_summary_table",
    "make_mortality_trend_table",
    "make_forecast_table",
    "make_forecast_summary_table",
]
