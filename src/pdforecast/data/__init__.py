"""src/pdforecast/data/__init__.py"""

from .records import (
    AgeDistribution,
    CensusData,
    City,
    GeoHeatmap,
    MortalityRecord,
    PopulationProjections,
    ProjectionSeries,
)
from .sources import CsvReferenceSource, ReferenceSource, StaticReferenceSource

__all__ = [
    "AgeDistribution",
    "CensusData",
    "City",
    "GeoHeatmap",
    "MortalityRecord",
    "PopulationProjections",
    "ProjectionSeries",
    "ReferenceSource",
    "StaticReferenceSource",
    "CsvReferenceSource",
]
