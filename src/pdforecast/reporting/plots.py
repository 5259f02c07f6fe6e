"""src/pdforecast/reporting/plots.py"""

from __future__ import annotations

from pathlib import Path

import matplotlib.pyplot as plt

from pdforecast.data.records import AgeDistribution, MortalityRecord
from pdforecast.forecasting.engine import ForecastResult


def _ensure_dir(p: Path) -> None:
    p.mkdir(parents=True, exist_ok=True)


def plot_age_distribution(dist: AgeDistribution, *, out_dir: Path) -> Path:
    _ensure_dir(out_dir)
    plt.figure(figsize=(10, 4))
    plt.bar(list(dist.age_groups), list(dist.population), color="#667eea")
    plt.title("Population by age group")
    plt.xlabel("Age group")
    plt.ylabel("Population")
    plt.xticks(rotation=45)
    out = out_dir / "age_distribution.png"
    plt.savefig(out, dpi=150, bbox_inches="tight")
    plt.close()
    return out


def plot_mortality(record: MortalityRecord, *, out_dir: Path) -> Path:
    _ensure_dir(out_dir)
    plt.figure()
    plt.bar(list(record.age_groups), list(record.rates), color="#c53030")
    plt.title("PD mortality rate by age group (per 100,000)")
    plt.xlabel("Age group")
    plt.ylabel("Mortality rate")
    out = out_dir / "pd_mortality.png"
    plt.savefig(out, dpi=150, bbox_inches="tight")
    plt.close()
    return out


def plot_forecast(result: ForecastResult, *, out_dir: Path) -> Path | None:
    """Forecast line with its prediction band; None when there is nothing to plot."""
    if not result.years:
        return None
    _ensure_dir(out_dir)

    years = list(result.years)
    plt.figure()
    if result.interval is not None:
        plt.fill_between(years, result.interval.lower, result.interval.upper, color="#764ba2", alpha=0.15)
    plt.plot(years, list(result.cases), color="#764ba2", marker="o")
    plt.title(f"Forecast PD cases {years[0]}–{years[-1]}")
    plt.xlabel("Year")
    plt.ylabel("Predicted cases")
    out = out_dir / f"pd_case_forecast_{years[0]}_{years[-1]}.png"
    plt.savefig(out, dpi=150, bbox_inches="tight")
    plt.close()
    return out
