"""src/pdforecast/reporting/export.py"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from pdforecast.data.records import AgeDistribution, GeoHeatmap, MortalityRecord, ProjectionSeries
from pdforecast.forecasting.engine import ForecastResult
from pdforecast.io.writers import write_csv
from pdforecast.reporting import charts
from pdforecast.reporting.plots import plot_age_distribution, plot_forecast, plot_mortality
from pdforecast.reporting.tables import (
    make_age_summary_table,
    make_forecast_summary_table,
    make_forecast_table,
    make_mortality_trend_table,
)
from pdforecast.validation.checks import validate_df
from pdforecast.validation.schemas import FORECAST_TABLE, HEATMAP_TABLE

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReportPackPaths:
    out_dir: Path
    tables_dir: Path
    figures_dir: Path
    html_dir: Path

    tables: tuple[Path, ...]
    figures: tuple[Path, ...]
    html: tuple[Path, ...]


def _ensure_dir(p: Path) -> None:
    p.mkdir(parents=True, exist_ok=True)


def export_report_pack(
    *,
    age_distribution: AgeDistribution,
    projection: ProjectionSeries,
    mortality: MortalityRecord,
    heatmap: GeoHeatmap,
    forecast: ForecastResult,
    out_dir: Path,
) -> ReportPackPaths:
    """
    Write a report pack:
        - tables/: summary CSVs
        - figures/: static PNGs (matplotlib)
        - html/: interactive Plotly charts

    This module does NOT forecast. It consumes records produced upstream.
    """
    out_dir = Path(out_dir)
    tables_dir = out_dir / "tables"
    figures_dir = out_dir / "figures"
    html_dir = out_dir / "html"
    for d in (tables_dir, figures_dir, html_dir):
        _ensure_dir(d)

    forecast_df = make_forecast_table(forecast)
    heatmap_df = heatmap.to_frame()

    # Validate outputs (fail early)
    validate_df(forecast_df, schema=FORECAST_TABLE, year_col="Year", unique_keys=("Year",)).raise_if_failed()
    # heatmap values go negative for years long before the reference year
    validate_df(heatmap_df, schema=HEATMAP_TABLE, unique_keys=("City",)).raise_if_failed()

    tables = (
        write_csv(make_age_summary_table(age_distribution), tables_dir / "age_distribution.csv"),
        write_csv(projection.to_frame(), tables_dir / f"projection_{projection.scenario}.csv"),
        write_csv(make_mortality_trend_table(mortality), tables_dir / "pd_mortality_trend.csv"),
        write_csv(heatmap_df, tables_dir / f"heatmap_{heatmap.metric}_{heatmap.year}.csv"),
        write_csv(forecast_df, tables_dir / "pd_case_forecast.csv"),
        write_csv(make_forecast_summary_table(forecast), tables_dir / "pd_case_forecast_summary.csv"),
    )

    figures = [
        plot_age_distribution(age_distribution, out_dir=figures_dir),
        plot_mortality(mortality, out_dir=figures_dir),
    ]
    fc_png = plot_forecast(forecast, out_dir=figures_dir)
    if fc_png is not None:
        figures.append(fc_png)

    html_figs = {
        "age_distribution.html": charts.age_distribution_figure(age_distribution),
        f"projection_{projection.scenario}.html": charts.projection_figure(projection),
        "pd_mortality.html": charts.mortality_figure(mortality),
        f"heatmap_{heatmap.metric}_{heatmap.year}.html": charts.heatmap_figure(heatmap),
        "pd_case_forecast.html": charts.forecast_figure(forecast),
    }
    html: list[Path] = []
    for name, fig in html_figs.items():
        out = html_dir / name
        fig.write_html(str(out), include_plotlyjs="cdn")
        html.append(out)

    logger.info("Report pack written to %s (%d tables, %d figures)", out_dir, len(tables), len(figures) + len(html))

    return ReportPackPaths(
        out_dir=out_dir,
        tables_dir=tables_dir,
        figures_dir=figures_dir,
        html_dir=html_dir,
        tables=tuple(tables),
        figures=tuple(figures),
        html=tuple(html),
    )
