"""src/pdforecast/modeling/__init__.py"""

from .evaluation import FitMetrics, compute_fit_metrics, mae, residuals, rmse, smape
from .nn_models import CaseRegressor, NetworkSettings, build_network, fit_case_regressor

__all__ = [
    "NetworkSettings",
    "CaseRegressor",
    "build_network",
    "fit_case_regressor",
    "FitMetrics",
    "compute_fit_metrics",
    "residuals",
    "rmse",
    "mae",
    "smape",
]
