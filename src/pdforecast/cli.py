"""src/pdforecast/cli.py"""

from __future__ import annotations

from typing import Optional

import typer
from rich import print
from rich.table import Table

from pdforecast.common.config import AppConfig, load_config
from pdforecast.common.logging import setup_logging
from pdforecast.data import reference as ref
from pdforecast.data.supplier import ReferenceDataSupplier
from pdforecast.io.writers import write_reference_tables
from pdforecast.pipelines.operations import DEFAULT_TARGET_YEAR, DashboardOperations, Operation, OperationResult
from pdforecast.pipelines.run_report import run_report
from pdforecast.reporting.formatting import format_decimal, format_number

app = typer.Typer(help="Lee County Parkinson's disease burden CLI")

DEFAULT_CONFIG = "configs/config.yaml"


def _setup(config_path: str) -> AppConfig:
    cfg = load_config(config_path)
    setup_logging(cfg)
    return cfg


def _stats_table(title: str, stats: dict[str, str]) -> Table:
    table = Table(title=title)
    table.add_column("Statistic")
    table.add_column("Value", justify="right")
    for k, v in stats.items():
        table.add_row(k, v)
    return table


def _show(result: OperationResult, table: Table | None = None) -> None:
    if not result.ok:
        print(f"[bold red]{result.error}[/bold red]")
        raise typer.Exit(code=1)
    if table is not None:
        print(table)
    if result.stats:
        print(_stats_table("Summary", result.stats))


@app.command()
def init(config_path: str = typer.Option(DEFAULT_CONFIG, help="Path to YAML config")) -> None:
    """Create expected directories and write the reference tables as CSV."""
    cfg = _setup(config_path)
    created = cfg.ensure_directories()

    supplier = ReferenceDataSupplier()
    written = write_reference_tables(
        census=supplier.fetch_census_data(),
        projections=supplier.fetch_population_projections(),
        mortality=supplier.fetch_mortality_data(),
        census_path=cfg.reference_csv("census"),
        projections_path=cfg.reference_csv("projections"),
        mortality_path=cfg.reference_csv("mortality"),
    )

    print("[bold green]Init complete.[/bold green]")
    for p in created:
        print(f"  created {p}")
    for p in written:
        print(f"  wrote {p}")


@app.command("age-distribution")
def age_distribution(
    year: Optional[int] = typer.Option(None, help="Reference year (data covers one census year)"),
    config_path: str = typer.Option(DEFAULT_CONFIG, help="Path to YAML config"),
) -> None:
    """Population by age bracket with 65+ summary."""
    ops = DashboardOperations.from_config(_setup(config_path))
    result = ops.dispatch(Operation.AGE_DISTRIBUTION, year=year)

    table = None
    if result.ok:
        table = Table(title="Population by Age Group")
        table.add_column("Age Group")
        table.add_column("Population", justify="right")
        for g, p in zip(result.record.age_groups, result.record.population):
            table.add_row(g, format_number(p))
    _show(result, table)


@app.command()
def projections(
    scenario: str = typer.Option(ref.DEFAULT_SCENARIO, help="Projection scenario: total | age65plus"),
    config_path: str = typer.Option(DEFAULT_CONFIG, help="Path to YAML config"),
) -> None:
    """Multi-decade population projection for a scenario."""
    ops = DashboardOperations.from_config(_setup(config_path))
    result = ops.dispatch(Operation.PROJECTION, scenario=scenario)

    table = None
    if result.ok:
        table = Table(title=f"Population Projection ({result.record.scenario})")
        table.add_column("Year", justify="right")
        table.add_column("Population", justify="right")
        for y, v in zip(result.record.years, result.record.values):
            table.add_row(str(y), format_number(v))
    _show(result, table)


@app.command()
def mortality(config_path: str = typer.Option(DEFAULT_CONFIG, help="Path to YAML config")) -> None:
    """PD mortality per 100,000 by age group."""
    ops = DashboardOperations.from_config(_setup(config_path))
    result = ops.dispatch(Operation.MORTALITY)

    table = None
    if result.ok:
        table = Table(title="PD Mortality Rate by Age Group (per 100,000)")
        table.add_column("Age Group")
        table.add_column("Rate", justify="right")
        table.add_column("Confidence", justify="right")
        for g, r, c in zip(result.record.age_groups, result.record.rates, result.record.confidence):
            table.add_row(g, format_decimal(r), f"{c:.2f}")
    _show(result, table)


@app.command()
def heatmap(
    year: int = typer.Option(ref.HEATMAP_REFERENCE_YEAR, help="Year to project the city rates to"),
    metric: str = typer.Option("prevalence", help="incidence | prevalence | mortality"),
    config_path: str = typer.Option(DEFAULT_CONFIG, help="Path to YAML config"),
) -> None:
    """Per-city distribution of a PD metric."""
    ops = DashboardOperations.from_config(_setup(config_path))
    result = ops.dispatch(Operation.HEATMAP, year=year, metric=metric)

    table = None
    if result.ok:
        table = Table(title=f"PD {result.record.metric.capitalize()} by City ({result.record.year}, per 100K)")
        table.add_column("City")
        table.add_column("Value", justify="right")
        for city, v in zip(result.record.cities, result.record.values):
            table.add_row(city.name, format_decimal(v))
    _show(result, table)


@app.command()
def forecast(
    target_year: int = typer.Option(DEFAULT_TARGET_YEAR, help="Last forecast year (>= 2024)"),
    config_path: str = typer.Option(DEFAULT_CONFIG, help="Path to YAML config"),
) -> None:
    """Train the case regressor and forecast PD cases to the target year."""
    ops = DashboardOperations.from_config(_setup(config_path))
    result = ops.dispatch(Operation.FORECAST, target_year=target_year)

    table = None
    if result.ok:
        table = Table(title="Forecasted PD Cases")
        table.add_column("Year", justify="right")
        table.add_column("Predicted Cases", justify="right")
        for y, c in zip(result.record.years, result.record.cases):
            table.add_row(str(y), format_number(c))
    _show(result, table)


@app.command()
def report(
    target_year: Optional[int] = typer.Option(None, help="Last forecast year; defaults to forecast.target_year"),
    config_path: str = typer.Option(DEFAULT_CONFIG, help="Path to YAML config"),
) -> None:
    """Export CSV tables, PNG figures and HTML charts."""
    cfg = _setup(config_path)
    cfg.ensure_directories()
    paths = run_report(cfg, target_year=target_year)
    print(f"[bold green]Report pack written:[/bold green] {paths.out_dir}")


if __name__ == "__main__":
    app()
