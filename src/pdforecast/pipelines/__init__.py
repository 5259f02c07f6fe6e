"""src/pdforecast/pipelines/__init__.py"""

from .operations import DashboardOperations, Operation, OperationResult
from .run_report import run_report

__all__ = ["DashboardOperations", "Operation", "OperationResult", "run_report"]
