import numpy as np
import pytest

from textreg.config.model_config import SolverConfig
from textreg.pipeline.model_artifact import ModelSpec
from textreg.training.engines.evaluate_engine import evaluate
from textreg.training.engines.model import (
    CoordinateDescentLasso,
    NullPredictor,
    SklearnSGDRegressorPredictor,
)
from textreg.training.engines.model_train_engine import Predictor
from textreg.training.engines.registry import predictor_for, resolve_predictor
from textreg.utils.errors import UserInputError


@pytest.fixture
def linear_data():
    rng = np.random.default_rng(11)
    X = rng.normal(size=(500, 3))
    y = X @ np.array([2.0, -1.0, 0.5]) + 4.0 + rng.normal(scale=0.1, size=500)
    return X, y


@pytest.mark.parametrize(
    "family,cls",
    [("lasso", CoordinateDescentLasso), ("sgd", SklearnSGDRegressorPredictor), ("null", NullPredictor)],
)
def test_registry_resolves_every_family(family, cls):
    predictor = predictor_for(SolverConfig(family=family))
    assert isinstance(predictor, cls)
    assert isinstance(predictor, Predictor)


def test_registry_unknown_key():
    with pytest.raises(UserInputError, match="No Predictor"):
        resolve_predictor(
            spec=ModelSpec(family="lasso", task="regression", version="v9"),
            cfg=SolverConfig(),
        )


def test_sgd_predictor_fits_linear_signal(linear_data):
    X, y = linear_data
    predictor = SklearnSGDRegressorPredictor(SolverConfig(family="sgd", max_iter=1000, tol=1e-4))
    model = predictor.fit(X, y, penalty=1e-4)

    assert model.family == "sgd"
    assert model.n_features == 3
    assert evaluate(predictor.predict(model, X), y)["r_squared"] > 0.95


def test_null_predictor_predicts_training_mean(linear_data):
    X, y = linear_data
    model = NullPredictor().fit(X, y, penalty=0.5)

    assert model.n_nonzero == 0
    np.testing.assert_allclose(model.predict(X), np.full(len(y), y.mean()))


def test_variants_share_the_capability(linear_data):
    X, y = linear_data
    for family in ("lasso", "sgd", "null"):
        predictor = predictor_for(SolverConfig(family=family))
        model = predictor.fit(X, y, penalty=0.01)
        assert predictor.predict(model, X).shape == (len(y),)
