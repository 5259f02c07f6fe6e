"""
src/pdforecast/data/reference.py

Built-in reference tables for Lee County, FL (FIPS 12071).

Sources the demo figures are modelled on:
  - ACS 5-year age structure (U.S. Census Bureau)
  - BEBR (University of Florida) population projections
  - CDC WONDER Parkinson's disease mortality, per 100,000
"""

from __future__ import annotations

COUNTY_NAME = "Lee County, FL"
COUNTY_FIPS = "12071"

CENSUS_YEAR = 2023
CENSUS_MEDIAN_AGE = 47.2

# 18 contiguous five-year brackets, 0-4 .. 85+
CENSUS_AGE_GROUPS: dict[str, int] = {
    "0-4": 34_600,
    "5-9": 35_200,
    "10-14": 36_100,
    "15-19": 37_800,
    "20-24": 39_200,
    "25-29": 40_100,
    "30-34": 39_900,
    "35-39": 38_700,
    "40-44": 37_600,
    "45-49": 36_800,
    "50-54": 38_900,
    "55-59": 42_100,
    "60-64": 45_200,
    "65-69": 48_100,
    "70-74": 43_200,
    "75-79": 37_100,
    "80-84": 28_900,
    "85+": 20_100,
}

# Published county total for the census year. The bracket table above is a
# rounded breakdown; the age summary reports the bracket sum.
CENSUS_REPORTED_TOTAL = 678_674

SENIOR_BRACKETS = ("65-69", "70-74", "75-79", "80-84", "85+")

PROJECTIONS: dict[str, list[tuple[int, int]]] = {
    "total": [
        (2025, 698_200),
        (2030, 741_500),
        (2035, 778_900),
        (2040, 810_200),
        (2045, 835_600),
        (2050, 856_400),
    ],
    "age65plus": [
        (2025, 215_800),
        (2030, 248_600),
        (2035, 275_400),
        (2040, 298_500),
        (2045, 316_800),
        (2050, 331_200),
    ],
}

DEFAULT_SCENARIO = "total"

MORTALITY_AGE_GROUPS = ("45-54", "55-64", "65-74", "75-84", "85+")
MORTALITY_RATES = (0.8, 2.4, 8.7, 22.1, 35.6)
MORTALITY_CONFIDENCE = (0.92, 0.94, 0.96, 0.95, 0.90)
MORTALITY_BY_YEAR: dict[int, tuple[float, ...]] = {
    2018: (0.7, 2.1, 8.2, 20.5, 32.1),
    2019: (0.8, 2.3, 8.5, 21.8, 33.9),
    2020: (0.9, 2.5, 9.1, 23.2, 36.2),
    2021: (0.8, 2.4, 8.8, 22.5, 35.1),
    2022: (0.8, 2.4, 8.7, 22.1, 35.6),
}

# (name, lat, lng, population)
CITIES: tuple[tuple[str, float, float, int], ...] = (
    ("Fort Myers", 26.6406, -81.8723, 82_000),
    ("Cape Coral", 26.5625, -81.9490, 194_000),
    ("Lehigh Acres", 26.4819, -81.8319, 86_000),
    ("Estero", 26.4172, -81.7972, 33_000),
    ("Bonita Springs", 26.3493, -81.7796, 55_000),
    ("Fort Myers Beach", 26.4472, -81.9572, 7_000),
)

# Per-city baselines per 100,000, index-aligned with CITIES
HEATMAP_BASELINES: dict[str, tuple[float, ...]] = {
    "incidence": (2.5, 3.1, 2.8, 2.3, 3.5, 2.1),
    "prevalence": (45.0, 52.0, 48.0, 41.0, 58.0, 38.0),
    "mortality": (8.2, 9.1, 8.7, 7.5, 10.2, 6.8),
}

HEATMAP_REFERENCE_YEAR = 2024
HEATMAP_ANNUAL_GROWTH = 0.08
