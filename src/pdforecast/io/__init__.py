"""src/pdforecast/io/__init__.py"""
from .readers import read_census_csv, read_csv, read_mortality_csv, read_projections_csv
from .writers import ensure_parent_dir, write_csv, write_reference_tables

__all__ = [
    "read_csv",
    "read_census_csv",
    "read_projections_csv",
    "read_mortality_csv",
    "ensure_parent_dir",
    "write_csv",
    "write_reference_tables",
]
