"""tests/unit/test_io.py"""

from __future__ import annotations

from pathlib import Path

import pandas as pd
import pytest

from pdforecast.data.sources import CsvReferenceSource, StaticReferenceSource
from pdforecast.data.supplier import DataRetrievalError, ReferenceDataSupplier
from pdforecast.data.records import MortalityRecord
from pdforecast.io.readers import read_mortality_csv, read_projections_csv
from pdforecast.io.writers import mortality_to_frame, write_csv, write_reference_tables


def _seed(tmp_path: Path) -> CsvReferenceSource:
    static = StaticReferenceSource()
    src = CsvReferenceSource(
        census_path=tmp_path / "census.csv",
        projections_path=tmp_path / "projections.csv",
        mortality_path=tmp_path / "mortality.csv",
    )
    write_reference_tables(
        census=static.load_census(),
        projections=static.load_projections(),
        mortality=static.load_mortality(),
        census_path=src.census_path,
        projections_path=src.projections_path,
        mortality_path=src.mortality_path,
    )
    return src


def test_csv_source_matches_static_tables(tmp_path: Path) -> None:
    src = _seed(tmp_path)
    static = StaticReferenceSource()

    assert src.load_census() == static.load_census()
    assert src.load_projections().series == static.load_projections().series
    assert src.load_mortality() == static.load_mortality()


def test_supplier_over_csv_source(tmp_path: Path) -> None:
    sup = ReferenceDataSupplier(_seed(tmp_path))
    assert sup.get_age_distribution().age65plus == 177_400


def test_projection_reader_accepts_value_column(tmp_path: Path) -> None:
    f = tmp_path / "proj.csv"
    pd.DataFrame({"Scenario": ["total", "total"], "Year": [2030, 2025], "Value": [20, 10]}).to_csv(f, index=False)

    proj = read_projections_csv(f)
    assert proj.get("total").years == (2025, 2030)
    assert proj.get("total").values == (10, 20)


def test_missing_csv_is_a_retrieval_failure(tmp_path: Path) -> None:
    src = CsvReferenceSource(
        census_path=tmp_path / "nope.csv",
        projections_path=tmp_path / "nope.csv",
        mortality_path=tmp_path / "nope.csv",
    )
    with pytest.raises(DataRetrievalError):
        ReferenceDataSupplier(src).fetch_census_data()


def test_mortality_current_rates_survive_round_trip(tmp_path: Path) -> None:
    record = MortalityRecord(
        age_groups=("75-84", "85+"),
        rates=(1.0, 2.0),
        confidence=(0.9, 0.8),
        year_data={2021: (0.5, 1.5)},
    )
    path = write_csv(mortality_to_frame(record), tmp_path / "mortality.csv")

    assert read_mortality_csv(path) == record


def test_mortality_without_history(tmp_path: Path) -> None:
    record = MortalityRecord(age_groups=("85+",), rates=(35.6,), confidence=(0.9,))
    path = write_csv(mortality_to_frame(record), tmp_path / "mortality.csv")

    back = read_mortality_csv(path)
    assert back.rates == (35.6,)
    assert back.year_data == {}


def test_mortality_without_current_flag_uses_latest_year(tmp_path: Path) -> None:
    f = tmp_path / "mortality.csv"
    pd.DataFrame(
        {
            "Year": [2021, 2021, 2022, 2022],
            "Age_Group": ["75-84", "85+", "75-84", "85+"],
            "Rate": [20.0, 30.0, 22.1, 35.6],
            "Confidence": [0.95, 0.9, 0.95, 0.9],
        }
    ).to_csv(f, index=False)

    back = read_mortality_csv(f)
    assert back.rates == (22.1, 35.6)
    assert back.year_data[2021] == (20.0, 30.0)


def test_empty_mortality_csv_rejected(tmp_path: Path) -> None:
    f = tmp_path / "mortality.csv"
    pd.DataFrame(columns=["Year", "Age_Group", "Rate_per_100k", "Confidence"]).to_csv(f, index=False)
    with pytest.raises(ValueError, match="no mortality rows"):
        read_mortality_csv(f)
