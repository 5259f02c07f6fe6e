"""tests/unit/test_supplier.py"""

from __future__ import annotations

import pytest

from pdforecast.data import reference as ref
from pdforecast.data.records import CensusData
from pdforecast.data.sources import CsvReferenceSource, StaticReferenceSource
from pdforecast.data.supplier import DataRetrievalError, ReferenceDataSupplier
from pdforecast.reporting.formatting import format_pct


def test_age_distribution_total_is_sum_of_brackets(supplier) -> None:
    dist = supplier.get_age_distribution(2023)
    assert len(dist.age_groups) == 18
    assert dist.total_population == sum(dist.population)


def test_age65plus_is_sum_of_last_five_brackets(supplier) -> None:
    dist = supplier.get_age_distribution()
    assert dist.age65plus == sum(dist.population[-5:])
    assert dist.age65plus == 177_400
    assert dist.age_groups[-5:] == ("65-69", "70-74", "75-79", "80-84", "85+")


def test_senior_share(supplier) -> None:
    dist = supplier.get_age_distribution()
    assert round(dist.senior_pct, 1) == 26.1
    # 177,400 of the published 678,674 residents rounds the same way
    assert format_pct(177_400 / 678_674 * 100) == "26.1%"


class RelabelledCensusSource(StaticReferenceSource):
    """Same counts, brackets labelled the way a different export might."""

    def load_census(self) -> CensusData:
        census = super().load_census()
        labels = [g.replace("-", " to ").replace("+", " and over") for g in census.age_groups]
        return CensusData(
            year=census.year,
            population=census.population,
            median_age=census.median_age,
            age_groups=dict(zip(labels, census.age_groups.values())),
        )


def test_seniors_are_last_five_brackets_regardless_of_labels() -> None:
    dist = ReferenceDataSupplier(RelabelledCensusSource()).get_age_distribution()
    assert dist.age_groups[-1] == "85 and over"
    assert dist.age65plus == 177_400
    assert round(dist.senior_pct, 1) == 26.1


def test_age_distribution_ignores_year(supplier) -> None:
    assert supplier.get_age_distribution(2020) == supplier.get_age_distribution(2023)


def test_fetches_are_memoized(counting_source) -> None:
    sup = ReferenceDataSupplier(counting_source)

    first = sup.fetch_census_data()
    second = sup.fetch_census_data()
    sup.get_age_distribution()

    assert first is second
    assert counting_source.calls["census"] == 1

    sup.get_population_projections("total")
    sup.get_population_projections("age65plus")
    assert counting_source.calls["projections"] == 1

    assert sup.get_mortality_data() is sup.fetch_mortality_data()
    assert counting_source.calls["mortality"] == 1


def test_projection_scenarios(supplier) -> None:
    total = supplier.get_population_projections("total")
    seniors = supplier.get_population_projections("age65plus")

    assert total.years == (2025, 2030, 2035, 2040, 2045, 2050)
    assert total.values[0] == 698_200
    assert seniors.values[-1] == 331_200


def test_unknown_projection_scenario_falls_back_to_total(supplier) -> None:
    fallback = supplier.get_population_projections("ageStructure")
    assert fallback == supplier.get_population_projections("total")
    assert supplier.get_population_projections(None).scenario == "total"


def test_heatmap_reference_year_uses_baselines(supplier) -> None:
    hm = supplier.get_geographic_heatmap("2024", "prevalence")
    assert hm.year == 2024
    assert hm.values == (45.0, 52.0, 48.0, 41.0, 58.0, 38.0)
    assert [c.name for c in hm.cities][:2] == ["Fort Myers", "Cape Coral"]
    assert len(hm.cities) == len(hm.values) == 6


def test_heatmap_scales_eight_percent_per_year(supplier) -> None:
    hm = supplier.get_geographic_heatmap(2026, "incidence")
    expected = [v * 1.16 for v in ref.HEATMAP_BASELINES["incidence"]]
    assert list(hm.values) == pytest.approx(expected)


def test_heatmap_before_reference_year_scales_down(supplier) -> None:
    hm = supplier.get_geographic_heatmap(2023, "mortality")
    assert hm.values[0] == pytest.approx(8.2 * 0.92)


def test_heatmap_unknown_metric_raises(supplier) -> None:
    with pytest.raises(ValueError):
        supplier.get_geographic_heatmap(2024, "severity")


def test_failed_fetch_is_wrapped(failing_supplier) -> None:
    with pytest.raises(DataRetrievalError) as excinfo:
        failing_supplier.fetch_census_data()
    assert isinstance(excinfo.value.__cause__, ConnectionError)

    # nothing cached after a failure
    with pytest.raises(DataRetrievalError):
        failing_supplier.get_age_distribution()


def test_invalid_reference_data_is_a_retrieval_failure() -> None:
    class ShortCensus(StaticReferenceSource):
        def load_census(self) -> CensusData:
            full = super().load_census()
            groups = dict(list(full.age_groups.items())[:17])
            return CensusData(year=full.year, population=full.population, median_age=full.median_age, age_groups=groups)

    with pytest.raises(DataRetrievalError, match="18 age brackets"):
        ReferenceDataSupplier(ShortCensus()).fetch_census_data()


def test_from_config_selects_source(cfg) -> None:
    assert isinstance(ReferenceDataSupplier.from_config(cfg).source, StaticReferenceSource)

    csv_cfg = type(cfg)(raw={**cfg.raw, "data": {**cfg.data, "source": "csv"}}, config_path=cfg.config_path)
    assert isinstance(ReferenceDataSupplier.from_config(csv_cfg).source, CsvReferenceSource)

    bad_cfg = type(cfg)(raw={**cfg.raw, "data": {"source": "api"}}, config_path=cfg.config_path)
    with pytest.raises(ValueError):
        ReferenceDataSupplier.from_config(bad_cfg)
