"""tests/conftest.py"""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from pdforecast.common.config import AppConfig, load_config
from pdforecast.data.records import CensusData, MortalityRecord, PopulationProjections
from pdforecast.data.sources import StaticReferenceSource
from pdforecast.data.supplier import ReferenceDataSupplier
from pdforecast.forecasting.engine import ForecastEngine
from pdforecast.modeling.nn_models import NetworkSettings


class CountingSource(StaticReferenceSource):
    """Static source that records how often each loader runs."""

    def __init__(self) -> None:
        self.calls = {"census": 0, "projections": 0, "mortality": 0}

    def load_census(self) -> CensusData:
        self.calls["census"] += 1
        return super().load_census()

    def load_projections(self) -> PopulationProjections:
        self.calls["projections"] += 1
        return super().load_projections()

    def load_mortality(self) -> MortalityRecord:
        self.calls["mortality"] += 1
        return super().load_mortality()


class FailingSource:
    """Every load raises, like an unreachable upstream API."""

    def load_census(self) -> CensusData:
        raise ConnectionError("census endpoint unreachable")

    def load_projections(self) -> PopulationProjections:
        raise ConnectionError("projections endpoint unreachable")

    def load_mortality(self) -> MortalityRecord:
        raise ConnectionError("mortality endpoint unreachable")


@pytest.fixture
def supplier() -> ReferenceDataSupplier:
    return ReferenceDataSupplier()


@pytest.fixture
def counting_source() -> CountingSource:
    return CountingSource()


@pytest.fixture
def failing_supplier() -> ReferenceDataSupplier:
    return ReferenceDataSupplier(FailingSource())


@pytest.fixture
def settings() -> NetworkSettings:
    return NetworkSettings(random_state=0)


@pytest.fixture
def engine(settings: NetworkSettings) -> ForecastEngine:
    return ForecastEngine(settings)


def write_config(project_root: Path, **overrides: dict) -> Path:
    raw = {
        "paths": {"data_dir": "data/reference", "reports_dir": "artifacts/reports"},
        "logging": {"level": "WARNING", "file": "artifacts/logs/test.log"},
        "data": {
            "source": "static",
            "census_csv": "data/reference/census_age_groups.csv",
            "projections_csv": "data/reference/population_projections.csv",
            "mortality_csv": "data/reference/pd_mortality.csv",
        },
        "forecast": {"start_year": 2024, "target_year": 2026, "confidence_floor": 0.7, "interval_level": 0.9},
        "model": {"hidden_layer_sizes": [16, 8], "learning_rate": 0.01, "epochs": 100, "batch_size": 2, "random_state": 0},
    }
    for section, values in overrides.items():
        raw.setdefault(section, {}).update(values)

    cfg_dir = project_root / "configs"
    cfg_dir.mkdir(parents=True, exist_ok=True)
    path = cfg_dir / "config.yaml"
    path.write_text(yaml.safe_dump(raw), encoding="utf-8")
    return path


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    return write_config(tmp_path)


@pytest.fixture
def cfg(config_path: Path) -> AppConfig:
    return load_config(config_path)


@pytest.fixture
def make_config(tmp_path: Path):
    """Factory for configs with per-section overrides, rooted in tmp_path."""
    def _make(**overrides: dict) -> Path:
        return write_config(tmp_path, **overrides)
    return _make
