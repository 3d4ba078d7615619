# textreg/training/engines/fitted_model.py
from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np
import pandas as pd

from textreg.utils.errors import InvalidInputError


@dataclass(frozen=True)
class Model:
    """
    Model（FROZEN）

    Semantics:
    - coefficients[i] belongs to vocabulary token i
    - coefficients / intercept are in RAW feature units: the solver's
      standardization is folded in, so predict() applies exactly the
      transform used at fit time
    - feature_mean / feature_scale record that transform
    """

    coefficients: np.ndarray
    intercept: float
    penalty: float
    mixture: float = 1.0
    family: str = "lasso"
    n_iter: int = 0

    feature_mean: np.ndarray | None = field(default=None, repr=False, compare=False)
    feature_scale: np.ndarray | None = field(default=None, repr=False, compare=False)

    def __post_init__(self):
        coef = np.array(self.coefficients, dtype=float).reshape(-1)
        coef.setflags(write=False)
        object.__setattr__(self, "coefficients", coef)
        object.__setattr__(self, "intercept", float(self.intercept))
        object.__setattr__(self, "penalty", float(self.penalty))

        for name in ("feature_mean", "feature_scale"):
            value = getattr(self, name)
            if value is not None:
                arr = np.array(value, dtype=float).reshape(-1)
                arr.setflags(write=False)
                object.__setattr__(self, name, arr)

    @property
    def n_features(self) -> int:
        return int(self.coefficients.shape[0])

    @property
    def n_nonzero(self) -> int:
        return int(np.count_nonzero(self.coefficients))

    @property
    def standardized_coefficients(self) -> np.ndarray:
        if self.feature_scale is None:
            return self.coefficients.copy()
        return self.coefficients * self.feature_scale

    def predict(self, X) -> np.ndarray:
        X = np.asarray(X, dtype=float)
        if X.ndim == 1:
            X = X.reshape(1, -1)
        if X.ndim != 2 or X.shape[1] != self.n_features:
            raise InvalidInputError(
                f"[Model] expected {self.n_features} features, got shape {X.shape}"
            )
        return X @ self.coefficients + self.intercept

    def top_terms(self, feature_names, n: int = 10) -> pd.DataFrame:
        """
        Largest positive and negative coefficients by term.
        """
        names = list(feature_names)
        if len(names) != self.n_features:
            raise InvalidInputError(
                f"[Model] {len(names)} names for {self.n_features} coefficients"
            )

        df = pd.DataFrame({"term": names, "estimate": self.coefficients})
        df = df[df["estimate"] != 0.0]

        pos = df[df["estimate"] > 0].sort_values(["estimate", "term"], ascending=[False, True]).head(n)
        neg = df[df["estimate"] < 0].sort_values(["estimate", "term"], ascending=[True, True]).head(n)

        pos = pos.assign(sign="positive")
        neg = neg.assign(sign="negative")
        return pd.concat([pos, neg], ignore_index=True)
