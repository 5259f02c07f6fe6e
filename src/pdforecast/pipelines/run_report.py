"""src/pdforecast/pipelines/run_report.py"""

from __future__ import annotations

import logging
from pathlib import Path

from pdforecast.common.config import AppConfig
from pdforecast.common.utils import safe_int
from pdforecast.data import reference as ref
from pdforecast.data.supplier import ReferenceDataSupplier
from pdforecast.forecasting.engine import ForecastEngine
from pdforecast.pipelines.operations import DEFAULT_TARGET_YEAR, FORECAST_SCENARIO
from pdforecast.reporting.export import ReportPackPaths, export_report_pack

logger = logging.getLogger(__name__)


def run_report(
    cfg: AppConfig,
    *,
    target_year: int | None = None,
    scenario: str = ref.DEFAULT_SCENARIO,
    heatmap_year: int = ref.HEATMAP_REFERENCE_YEAR,
    heatmap_metric: str = "prevalence",
    out_dir: Path | None = None,
) -> ReportPackPaths:
    """
    Build every record, run one forecast, and export the report pack.
    Unlike the dashboard actions, any failure here propagates.
    """
    target = target_year if target_year is not None else safe_int(cfg.forecast.get("target_year"), DEFAULT_TARGET_YEAR)
    if out_dir is None:
        reports_dir = cfg.paths.get("reports_dir", cfg.resolve("artifacts/reports"))
        out_dir = reports_dir / f"report_{target}"

    supplier = ReferenceDataSupplier.from_config(cfg)
    engine = ForecastEngine.from_config(cfg)

    forecast = engine.generate_forecast(supplier.get_population_projections(FORECAST_SCENARIO), target)
    logger.info("Forecast to %d complete; peak year %s", target, forecast.peak_year)

    return export_report_pack(
        age_distribution=supplier.get_age_distribution(),
        projection=supplier.get_population_projections(scenario),
        mortality=supplier.get_mortality_data(),
        heatmap=supplier.get_geographic_heatmap(heatmap_year, heatmap_metric),
        forecast=forecast,
        out_dir=out_dir,
    )
