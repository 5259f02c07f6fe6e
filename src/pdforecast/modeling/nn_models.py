"""src/pdforecast/modeling/nn_models.py"""

from __future__ import annotations

import warnings
from dataclasses import dataclass
from typing import Any, Mapping, Sequence

import numpy as np
import pandas as pd
from sklearn.compose import TransformedTargetRegressor
from sklearn.exceptions import ConvergenceWarning
from sklearn.neural_network import MLPRegressor
from sklearn.pipeline import Pipeline
from sklearn.preprocessing import StandardScaler


@dataclass(frozen=True)
class NetworkSettings:
    """
    Feed-forward regressor: inputs -> 16 (relu) -> 8 (relu) -> 1 (linear).

    scikit-learn has no dropout layer; ``alpha`` (L2 penalty) is the
    regularizer between the hidden layers instead.
    """
    hidden_layer_sizes: tuple[int, ...] = (16, 8)
    learning_rate: float = 0.01
    epochs: int = 100
    batch_size: int = 2
    alpha: float = 1e-4
    random_state: int | None = None

    @classmethod
    def from_config(cls, raw: Mapping[str, Any] | None) -> "NetworkSettings":
        raw = dict(raw or {})
        defaults = cls()
        seed = raw.get("random_state", defaults.random_state)
        return cls(
            hidden_layer_sizes=tuple(int(u) for u in raw.get("hidden_layer_sizes", defaults.hidden_layer_sizes)),
            learning_rate=float(raw.get("learning_rate", defaults.learning_rate)),
            epochs=int(raw.get("epochs", defaults.epochs)),
            batch_size=int(raw.get("batch_size", defaults.batch_size)),
            alpha=float(raw.get("alpha", defaults.alpha)),
            random_state=None if seed is None else int(seed),
        )


@dataclass(frozen=True)
class CaseRegressor:
    """Fitted network plus the feature order it was trained on."""
    estimator: Any
    feature_columns: tuple[str, ...]

    def predict(self, X: pd.DataFrame) -> np.ndarray:
        if X.empty:
            return np.empty(0, dtype=float)
        missing = [c for c in self.feature_columns if c not in X.columns]
        if missing:
            raise KeyError(f"Feature frame missing columns {missing}. Found: {list(X.columns)}")
        yhat = self.estimator.predict(X[list(self.feature_columns)])
        return np.asarray(yhat, dtype=float).reshape(-1)


def build_network(settings: NetworkSettings) -> TransformedTargetRegressor:
    """
    Unfitted estimator. Features and target are standardized so the raw
    year/population magnitudes do not swamp the Adam updates.
    """
    mlp = MLPRegressor(
        hidden_layer_sizes=settings.hidden_layer_sizes,
        activation="relu",
        solver="adam",
        learning_rate_init=settings.learning_rate,
        batch_size=settings.batch_size,
        max_iter=settings.epochs,
        alpha=settings.alpha,
        shuffle=True,
        early_stopping=False,
        # run every epoch; no tolerance-based stopping
        n_iter_no_change=settings.epochs + 1,
        random_state=settings.random_state,
    )
    return TransformedTargetRegressor(
        regressor=Pipeline([("scaler", StandardScaler()), ("mlp", mlp)]),
        transformer=StandardScaler(),
    )


def fit_case_regressor(
    X: pd.DataFrame,
    y: Sequence[float] | np.ndarray,
    settings: NetworkSettings | None = None,
) -> CaseRegressor:
    settings = settings or NetworkSettings()
    target = np.asarray(y, dtype=float).reshape(-1)
    if len(X) == 0:
        raise ValueError("Cannot fit the case regressor on an empty feature frame.")
    if len(X) != target.size:
        raise ValueError(f"Features/target length mismatch: {len(X)} vs {target.size}")

    estimator = build_network(settings)
    with warnings.catch_warnings():
        # a fixed epoch budget on six rows never "converges" by sklearn's test
        warnings.simplefilter("ignore", category=ConvergenceWarning)
        estimator.fit(X, target)

    return CaseRegressor(estimator=estimator, feature_columns=tuple(str(c) for c in X.columns))
