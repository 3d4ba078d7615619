# textreg/training/engines/model/sgd_regressor_train_engine.py
from __future__ import annotations

import warnings

import numpy as np
from sklearn.exceptions import ConvergenceWarning
from sklearn.linear_model import SGDRegressor

from textreg.training.engines.fitted_model import Model
from textreg.training.engines.model_train_engine import Predictor
from textreg.training.engines.scaling import Standardization, check_xy
from textreg.utils.errors import ConvergenceError, InvalidInputError


class SklearnSGDRegressorPredictor(Predictor):
    """
    SGDRegressor（elastic-net penalty）

    Same standardization contract as the coordinate-descent lasso;
    sklearn's ConvergenceWarning is turned into ConvergenceError.
    """

    family = "sgd"

    def fit(
        self,
        X,
        y,
        *,
        penalty: float,
        tol: float | None = None,
    ) -> Model:
        if penalty is None or not np.isfinite(penalty) or penalty < 0:
            raise InvalidInputError(f"[SGD] penalty must be >= 0, got {penalty}")

        X, y = check_xy(X, y)
        tol = self.cfg.tol if tol is None else float(tol)

        scaling = Standardization.fit(X)
        Xs = scaling.transform(X) * scaling.active
        y_mean = float(y.mean())

        model = SGDRegressor(
            penalty="elasticnet",
            alpha=penalty,
            l1_ratio=self.cfg.mixture,
            max_iter=self.cfg.max_iter,
            tol=tol,
            fit_intercept=False,
            random_state=0,
        )

        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always", ConvergenceWarning)
            model.fit(Xs, y - y_mean)

        if any(issubclass(w.category, ConvergenceWarning) for w in caught):
            raise ConvergenceError(
                f"[SGD] no convergence after {model.n_iter_} epochs (penalty={penalty:.3g})",
                penalty=penalty,
                iterations=int(model.n_iter_),
            )

        coef, intercept = scaling.to_raw(np.asarray(model.coef_, dtype=float), y_mean)

        return Model(
            coefficients=coef,
            intercept=intercept,
            penalty=penalty,
            mixture=self.cfg.mixture,
            family=self.family,
            n_iter=int(model.n_iter_),
            feature_mean=scaling.mean,
            feature_scale=scaling.scale,
        )
