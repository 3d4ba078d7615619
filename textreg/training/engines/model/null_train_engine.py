# textreg/training/engines/model/null_train_engine.py
from __future__ import annotations

import numpy as np

from textreg.training.engines.fitted_model import Model
from textreg.training.engines.model_train_engine import Predictor
from textreg.training.engines.scaling import check_xy


class NullPredictor(Predictor):
    """
    Baseline: always predicts the training mean. Penalty is recorded, not used.
    """

    family = "null"

    def fit(
        self,
        X,
        y,
        *,
        penalty: float = 0.0,
        tol: float | None = None,
    ) -> Model:
        X, y = check_xy(X, y)
        return Model(
            coefficients=np.zeros(X.shape[1]),
            intercept=float(y.mean()),
            penalty=penalty,
            mixture=self.cfg.mixture,
            family=self.family,
        )
