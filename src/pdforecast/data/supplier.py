"""src/pdforecast/data/supplier.py"""

from __future__ import annotations

import logging
import threading
from typing import Any, Callable, TypeVar

from pdforecast.common.config import AppConfig
from pdforecast.common.utils import parse_year
from pdforecast.data import reference as ref
from pdforecast.data.records import (
    AgeDistribution,
    CensusData,
    City,
    GeoHeatmap,
    MortalityRecord,
    PopulationProjections,
    ProjectionSeries,
)
from pdforecast.data.sources import CsvReferenceSource, ReferenceSource, StaticReferenceSource
from pdforecast.validation.checks import (
    CheckResult,
    validate_census,
    validate_mortality,
    validate_projections,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

HEATMAP_METRICS = tuple(ref.HEATMAP_BASELINES)


class DataRetrievalError(RuntimeError):
    """A reference record could not be loaded or failed validation."""


class ReferenceDataSupplier:
    """
    Owns the reference records for one dashboard session.

    Each record type is loaded once and memoized for the lifetime of the
    supplier; there is no eviction. First population of a cache is guarded
    by a lock so a supplier can be shared across Streamlit session threads.
    """

    def __init__(self, source: ReferenceSource | None = None) -> None:
        self.source: ReferenceSource = source if source is not None else StaticReferenceSource()
        self._census: CensusData | None = None
        self._projections: PopulationProjections | None = None
        self._mortality: MortalityRecord | None = None
        self._lock = threading.Lock()

    @classmethod
    def from_config(cls, cfg: AppConfig) -> "ReferenceDataSupplier":
        kind = cfg.data_source
        if kind == "static":
            return cls(StaticReferenceSource())
        if kind == "csv":
            return cls(
                CsvReferenceSource(
                    census_path=cfg.reference_csv("census"),
                    projections_path=cfg.reference_csv("projections"),
                    mortality_path=cfg.reference_csv("mortality"),
                )
            )
        raise ValueError(f"Unknown data.source {kind!r}; expected 'static' or 'csv'")

    def _memoized(
        self,
        attr: str,
        label: str,
        loader: Callable[[], T],
        validator: Callable[[T], CheckResult],
    ) -> T:
        cached = getattr(self, attr)
        if cached is not None:
            return cached

        with self._lock:
            cached = getattr(self, attr)
            if cached is not None:
                return cached
            try:
                value = loader()
                validator(value).raise_if_failed()
            except Exception as e:
                logger.error("%s load failed: %s", label, e)
                raise DataRetrievalError(f"Failed to load {label}: {e}") from e
            setattr(self, attr, value)
            logger.info("Loaded %s from %s", label, type(self.source).__name__)
            return value

    # ---- raw record fetches (memoized) ----

    def fetch_census_data(self) -> CensusData:
        return self._memoized("_census", "census data", self.source.load_census, validate_census)

    def fetch_population_projections(self) -> PopulationProjections:
        return self._memoized(
            "_projections", "population projections", self.source.load_projections, validate_projections
        )

    def fetch_mortality_data(self) -> MortalityRecord:
        return self._memoized("_mortality", "mortality data", self.source.load_mortality, validate_mortality)

    # ---- derived queries ----

    def get_age_distribution(self, year: Any = None) -> AgeDistribution:
        """
        Age structure summary. The reference data covers a single census
        year, so ``year`` does not change the result. Seniors are the last
        five brackets by position, whatever the source labels them.
        """
        census = self.fetch_census_data()
        groups = tuple(census.age_groups)
        population = tuple(int(v) for v in census.age_groups.values())
        senior = sum(population[-len(ref.SENIOR_BRACKETS):])
        return AgeDistribution(
            age_groups=groups,
            population=population,
            total_population=int(sum(population)),
            age65plus=int(senior),
            median_age=float(census.median_age),
        )

    def get_population_projections(self, scenario: str | None = ref.DEFAULT_SCENARIO) -> ProjectionSeries:
        return self.fetch_population_projections().get(scenario)

    def get_mortality_data(self) -> MortalityRecord:
        return self.fetch_mortality_data()

    def get_census_data(self) -> CensusData:
        return self.fetch_census_data()

    def get_geographic_heatmap(self, year: int | str, metric: str) -> GeoHeatmap:
        """
        Distribute a per-100k metric over the county's six sub-regions.
        Years other than the reference year scale linearly by 8% per year.
        """
        metric_key = str(metric).strip().lower()
        if metric_key not in ref.HEATMAP_BASELINES:
            raise ValueError(f"Unknown heatmap metric {metric!r}; expected one of {list(HEATMAP_METRICS)}")

        yr = parse_year(year)
        values = ref.HEATMAP_BASELINES[metric_key]
        if yr != ref.HEATMAP_REFERENCE_YEAR:
            multiplier = 1.0 + (yr - ref.HEATMAP_REFERENCE_YEAR) * ref.HEATMAP_ANNUAL_GROWTH
            values = tuple(v * multiplier for v in values)

        return GeoHeatmap(
            year=yr,
            metric=metric_key,
            cities=tuple(City(name=n, lat=lat, lng=lng, population=p) for n, lat, lng, p in ref.CITIES),
            values=tuple(float(v) for v in values),
        )
