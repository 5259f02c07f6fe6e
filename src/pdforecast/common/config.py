"""src/pdforecast/common/config.py"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List

import yaml

CONFIG_SECTIONS = ("paths", "logging", "data", "forecast", "model")

# Where CsvReferenceSource looks when data.<kind>_csv is not set
DEFAULT_REFERENCE_CSVS = {
    "census": "data/reference/census_age_groups.csv",
    "projections": "data/reference/population_projections.csv",
    "mortality": "data/reference/pd_mortality.csv",
}


@dataclass(frozen=True)
class AppConfig:
    """
    Parsed config.yaml. Relative paths resolve against the project root,
    which is the directory holding ``configs/``.
    """

    raw: Dict[str, Any]
    config_path: Path

    @property
    def project_root(self) -> Path:
        return self.config_path.parent.parent.resolve()

    def section(self, name: str) -> Dict[str, Any]:
        value = self.raw.get(name) or {}
        if not isinstance(value, dict):
            raise ValueError(f"{self.config_path.name}: section {name!r} must be a mapping, got {type(value).__name__}")
        return value

    @property
    def paths(self) -> Dict[str, Path]:
        return {k: self.resolve(v) for k, v in self.section("paths").items()}

    @property
    def logging(self) -> Dict[str, Any]:
        return self.section("logging")

    @property
    def data(self) -> Dict[str, Any]:
        return self.section("data")

    @property
    def forecast(self) -> Dict[str, Any]:
        return self.section("forecast")

    @property
    def model(self) -> Dict[str, Any]:
        return self.section("model")

    @property
    def data_source(self) -> str:
        return str(self.data.get("source", "static")).strip().lower()

    def reference_csv(self, kind: str) -> Path:
        """Resolved CSV path for census | projections | mortality."""
        if kind not in DEFAULT_REFERENCE_CSVS:
            raise KeyError(f"Unknown reference table {kind!r}; expected one of {sorted(DEFAULT_REFERENCE_CSVS)}")
        return self.resolve(self.data.get(f"{kind}_csv") or DEFAULT_REFERENCE_CSVS[kind])

    def resolve(self, maybe_path: str | Path) -> Path:
        p = Path(maybe_path)
        return p if p.is_absolute() else (self.project_root / p).resolve()

    def ensure_directories(self) -> List[str]:
        """Create configured output directories; returns the ones that were missing."""
        wanted = list(self.paths.values())
        log_file = self.logging.get("file")
        if log_file:
            wanted.append(self.resolve(log_file).parent)

        created: List[str] = []
        for path in wanted:
            if path.exists():
                continue
            path.mkdir(parents=True, exist_ok=True)
            created.append(str(path))
        return created


def load_config(config_path: str | Path) -> AppConfig:
    config_path = Path(config_path).resolve()
    if not config_path.exists():
        raise FileNotFoundError(f"Config not found: {config_path}")
    with config_path.open("r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}
    unknown = sorted(set(raw) - set(CONFIG_SECTIONS))
    if unknown:
        raise ValueError(f"{config_path.name}: unknown config sections {unknown}")
    return AppConfig(raw=raw, config_path=config_path)
