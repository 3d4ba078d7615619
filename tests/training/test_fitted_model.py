import numpy as np
import pytest

from textreg.training.engines.fitted_model import Model
from textreg.utils.errors import InvalidInputError


@pytest.fixture
def model():
    return Model(coefficients=[2.0, 0.0, -1.5, 0.5], intercept=1900.0, penalty=0.1)


def test_model_is_immutable(model):
    with pytest.raises(Exception):
        model.penalty = 1.0
    with pytest.raises(ValueError):
        model.coefficients[0] = 3.0


def test_predict(model):
    X = np.array([[1, 0, 0, 0], [0, 5, 2, 2]], dtype=float)
    np.testing.assert_allclose(model.predict(X), [1902.0, 1898.0])
    # single row
    assert model.predict([1, 1, 1, 1])[0] == pytest.approx(1901.0)


def test_predict_wrong_width(model):
    with pytest.raises(InvalidInputError):
        model.predict(np.zeros((2, 3)))


def test_nonzero_count(model):
    assert model.n_nonzero == 3


def test_top_terms(model):
    df = model.top_terms(["court", "the", "railroad", "privacy"], n=1)
    assert list(df["term"]) == ["court", "railroad"]
    assert list(df["sign"]) == ["positive", "negative"]


def test_top_terms_name_mismatch(model):
    with pytest.raises(InvalidInputError):
        model.top_terms(["court"])
