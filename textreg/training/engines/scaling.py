# textreg/training/engines/scaling.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import numpy as np

from textreg.utils.errors import InvalidInputError


def check_xy(X, y) -> Tuple[np.ndarray, np.ndarray]:
    """
    Validate a (features, labels) pair → float arrays.
    """
    X = np.asarray(X, dtype=float)
    y = np.asarray(y, dtype=float).reshape(-1)

    if X.ndim != 2:
        raise InvalidInputError(f"features must be 2-D, got shape {X.shape}")
    if X.shape[0] != y.shape[0]:
        raise InvalidInputError(
            f"features have {X.shape[0]} rows but labels have {y.shape[0]}"
        )
    if X.shape[0] == 0:
        raise InvalidInputError("cannot fit on zero rows")
    if not np.all(np.isfinite(X)) or not np.all(np.isfinite(y)):
        raise InvalidInputError("features / labels must be finite")
    return X, y


@dataclass(frozen=True)
class Standardization:
    """
    Column centering + scaling (population std).

    Constant columns keep scale 1 and are marked inactive:
    they carry no signal and get a zero coefficient.
    """

    mean: np.ndarray
    scale: np.ndarray
    active: np.ndarray

    @classmethod
    def fit(cls, X: np.ndarray) -> "Standardization":
        mean = X.mean(axis=0)
        std = X.std(axis=0)
        active = std > 1e-12
        scale = np.where(active, std, 1.0)
        return cls(mean=mean, scale=scale, active=active)

    def transform(self, X: np.ndarray) -> np.ndarray:
        return (X - self.mean) / self.scale

    def to_raw(self, beta_std: np.ndarray, y_mean: float) -> Tuple[np.ndarray, float]:
        """
        Fold the transform back: y = Xs·b + ȳ  ⇔  y = X·(b/s) + (ȳ − μ·b/s)
        """
        coef = np.where(self.active, beta_std / self.scale, 0.0)
        intercept = float(y_mean - self.mean @ coef)
        return coef, intercept
