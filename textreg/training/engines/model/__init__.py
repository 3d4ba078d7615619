from .lasso_train_engine import CoordinateDescentLasso
from .sgd_regressor_train_engine import SklearnSGDRegressorPredictor
from .null_train_engine import NullPredictor

__all__ = ["CoordinateDescentLasso", "SklearnSGDRegressorPredictor", "NullPredictor"]
