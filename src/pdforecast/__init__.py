"""Lee County Parkinson's disease burden dashboard and forecasting."""

__version__ = "0.1.0"
