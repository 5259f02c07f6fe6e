"""src/pdforecast/reporting/tables.py"""

from __future__ import annotations

import pandas as pd

from pdforecast.data.records import AgeDistribution, MortalityRecord
from pdforecast.forecasting.engine import ForecastResult


def make_age_summary_table(dist: AgeDistribution) -> pd.DataFrame:
    """Bracket counts with each bracket's share of the total, in percent."""
    d = dist.to_frame()
    total = float(dist.total_population) or 1.0
    d["Share_Pct"] = d["Population"] / total * 100.0
    return d


def make_mortality_trend_table(record: MortalityRecord) -> pd.DataFrame:
    """
    Wide history table: one row per age group, one column per year, plus
    the change between the first and last year.
    """
    hist = record.history_frame()
    if hist.empty:
        return pd.DataFrame(columns=["Age_Group"])

    wide = hist.pivot(index="Age_Group", columns="Year", values="Rate_per_100k").reindex(list(record.age_groups))
    years = sorted(int(c) for c in wide.columns)
    wide["Change"] = wide[years[-1]] - wide[years[0]]
    wide.columns = [str(c) for c in wide.columns]
    return wide.reset_index()


def make_forecast_table(result: ForecastResult) -> pd.DataFrame:
    """Yearly forecast with the change against the last historical estimate."""
    d = result.to_frame()
    if d.empty:
        return d
    d["Change_vs_Baseline_Pct"] = (d["Predicted_Cases"] - result.baseline) / result.baseline * 100.0
    return d


def make_forecast_summary_table(result: ForecastResult) -> pd.DataFrame:
    row = {
        "Year_Start": result.years[0] if result.years else None,
        "Year_End": result.years[-1] if result.years else None,
        "Baseline_Cases": result.baseline,
        "Final_Predicted_Cases": result.final_cases,
        "Percent_Change": result.percent_change,
        "Confidence": result.confidence,
        "Overall_Confidence": result.overall_confidence,
        "Peak_Year": result.peak_year,
    }
    if result.fit_metrics is not None:
        row.update(result.fit_metrics.as_dict())
    return pd.DataFrame([row])
