"""tests/integration/test_cli.py"""

from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from pdforecast.cli import app

runner = CliRunner()


def test_init_writes_reference_csvs(config_path: Path) -> None:
    result = runner.invoke(app, ["init", "--config-path", str(config_path)])
    assert result.exit_code == 0, result.output

    root = config_path.parent.parent
    assert (root / "data/reference/census_age_groups.csv").exists()
    assert (root / "data/reference/pd_mortality.csv").exists()


def test_csv_source_after_init(make_config) -> None:
    path = make_config(data={"source": "csv"})
    assert runner.invoke(app, ["init", "--config-path", str(path)]).exit_code == 0

    result = runner.invoke(app, ["age-distribution", "--config-path", str(path)])
    assert result.exit_code == 0, result.output
    assert "177,400" in result.output


def test_forecast_command(config_path: Path) -> None:
    result = runner.invoke(app, ["forecast", "--target-year", "2025", "--config-path", str(config_path)])
    assert result.exit_code == 0, result.output
    assert "Peak Risk Year" in result.output


def test_forecast_command_rejects_early_year(config_path: Path) -> None:
    result = runner.invoke(app, ["forecast", "--target-year", "2019", "--config-path", str(config_path)])
    assert result.exit_code == 1
    assert "Failed to generate ML forecast" in result.output


def test_heatmap_unknown_metric(config_path: Path) -> None:
    result = runner.invoke(app, ["heatmap", "--metric", "nope", "--config-path", str(config_path)])
    assert result.exit_code == 1
    assert "Failed to load data" in result.output
