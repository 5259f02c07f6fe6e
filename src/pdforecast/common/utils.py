"""
src/pdforecast/common/utils.py

Conversions for values arriving from config files, CLI options and
Streamlit widgets, which may be str, int or None.
"""

from __future__ import annotations

from typing import Any


def safe_int(value: Any, default: int) -> int:
    """int(value), or default when value is missing or unparsable."""
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def safe_float(value: Any, default: float) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


def parse_year(value: Any) -> int:
    """'2025', ' 2025 ', 2025 and 2025.0 -> 2025. Anything else raises ValueError."""
    if isinstance(value, bool):
        raise ValueError(f"Not a year: {value!r}")
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"Not a whole year: {value!r}")
        return int(value)
    try:
        return int(str(value).strip())
    except ValueError:
        raise ValueError(f"Not a year: {value!r}") from None
