"""src/pdforecast/common/__init__.py"""

from .config import AppConfig, load_config
from .logging import setup_logging
from .utils import parse_year, safe_float, safe_int

__all__ = ["AppConfig", "load_config", "setup_logging", "safe_int", "safe_float", "parse_year"]
