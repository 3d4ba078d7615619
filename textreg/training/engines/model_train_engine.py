# textreg/training/engines/model_train_engine.py
from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np

from textreg.config.model_config import SolverConfig
from textreg.training.engines.fitted_model import Model


class Predictor(ABC):
    """
    Predictor capability

    fit(features, labels, penalty) → Model
    predict(model, features)       → predictions

    Tuner / Evaluator depend on this interface only.
    """

    family: str = ""

    def __init__(self, cfg: SolverConfig | None = None):
        self.cfg = cfg or SolverConfig(family=self.family or "lasso")

    @abstractmethod
    def fit(
        self,
        X,
        y,
        *,
        penalty: float,
        tol: float | None = None,
    ) -> Model:
        """
        Returns a fitted, immutable Model.
        `tol` overrides cfg.tol (relaxed-tolerance retries).
        """
        raise NotImplementedError

    def predict(self, model: Model, X) -> np.ndarray:
        return model.predict(X)
