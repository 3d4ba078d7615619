import numpy as np
import pytest
from scipy.linalg import hadamard

from textreg.config.model_config import SolverConfig
from textreg.training.engines.model.lasso_train_engine import (
    CoordinateDescentLasso,
    soft_threshold,
)
from textreg.utils.errors import ConvergenceError, InvalidInputError

BETA = np.array([5.0, -4.0, 3.0, -2.0, 1.0, 0.5, 0.25])


@pytest.fixture
def orthogonal():
    """
    Hadamard columns: centered, unit population variance, orthogonal.
    The lasso solution is the soft-thresholded OLS solution.
    """
    X = hadamard(8)[:, 1:].astype(float)
    y = X @ BETA + 10.0
    return X, y


def test_soft_threshold():
    assert soft_threshold(3.0, 1.0) == 2.0
    assert soft_threshold(-3.0, 1.0) == -2.0
    assert soft_threshold(0.5, 1.0) == 0.0


@pytest.mark.parametrize("penalty", [0.0, 0.3, 1.2, 2.5])
def test_orthogonal_design_matches_soft_threshold(orthogonal, penalty):
    X, y = orthogonal
    model = CoordinateDescentLasso(SolverConfig(tol=1e-10)).fit(X, y, penalty=penalty)

    expected = np.array([soft_threshold(b, penalty) for b in BETA])
    np.testing.assert_allclose(model.coefficients, expected, atol=1e-10)
    assert model.intercept == pytest.approx(10.0)
    assert model.penalty == penalty


def test_elastic_net_mixture(orthogonal):
    X, y = orthogonal
    cfg = SolverConfig(mixture=0.5, tol=1e-10)
    model = CoordinateDescentLasso(cfg).fit(X, y, penalty=2.0)

    expected = np.array([soft_threshold(b, 1.0) / 2.0 for b in BETA])
    np.testing.assert_allclose(model.coefficients, expected, atol=1e-10)


def test_sparsity_grows_with_penalty(orthogonal):
    X, y = orthogonal
    predictor = CoordinateDescentLasso()
    nonzero = [
        predictor.fit(X, y, penalty=lam).n_nonzero
        for lam in [0.0, 0.3, 0.75, 1.5, 2.5, 3.5, 4.5, 6.0]
    ]
    assert nonzero == sorted(nonzero, reverse=True)
    assert nonzero[0] == len(BETA)
    assert nonzero[-1] == 0


def test_sparsity_on_random_design():
    rng = np.random.default_rng(5)
    X = rng.normal(size=(300, 20))
    y = X[:, :4] @ np.array([3.0, -2.0, 1.5, 1.0]) + rng.normal(scale=0.1, size=300)

    predictor = CoordinateDescentLasso(SolverConfig(tol=1e-8))
    small = predictor.fit(X, y, penalty=1e-3).n_nonzero
    large = predictor.fit(X, y, penalty=0.5).n_nonzero
    huge = predictor.fit(X, y, penalty=100.0).n_nonzero
    assert small >= large >= huge == 0


def test_zero_penalty_matches_least_squares():
    rng = np.random.default_rng(0)
    X = rng.normal(size=(200, 6)) * np.array([1, 2, 5, 0.5, 10, 3])
    y = X @ np.array([1.5, -2.0, 0.3, 4.0, -0.1, 0.0]) + 3.0 + rng.normal(scale=0.5, size=200)

    model = CoordinateDescentLasso(SolverConfig(tol=1e-12, max_iter=10_000)).fit(X, y, penalty=0.0)

    A = np.column_stack([X, np.ones(len(X))])
    sol, *_ = np.linalg.lstsq(A, y, rcond=None)
    np.testing.assert_allclose(model.coefficients, sol[:-1], rtol=1e-6, atol=1e-8)
    assert model.intercept == pytest.approx(sol[-1], rel=1e-6)


def test_naive_and_covariance_updates_agree():
    rng = np.random.default_rng(1)
    X = rng.normal(size=(50, 8))
    Xs = (X - X.mean(0)) / X.std(0)
    y = Xs @ rng.normal(size=8)
    yc = y - y.mean()

    engine = CoordinateDescentLasso(SolverConfig(tol=1e-12, max_iter=5000))
    a, _ = engine._covariance_descent(Xs, yc, 0.1, 1.0, 1e-12, 0.1)
    b, _ = engine._naive_descent(Xs, yc, 0.1, 1.0, 1e-12, 0.1)
    np.testing.assert_allclose(a, b, atol=1e-9)


def test_wide_matrix_uses_naive_updates():
    rng = np.random.default_rng(2)
    X = rng.normal(size=(15, 40))
    y = X[:, 0] * 2.0 + rng.normal(scale=0.01, size=15)

    model = CoordinateDescentLasso(SolverConfig(max_iter=5000)).fit(X, y, penalty=0.2)
    assert model.n_features == 40
    assert 0 < model.n_nonzero < 40
    assert np.all(np.isfinite(model.predict(X)))


def test_constant_column_gets_zero_coefficient():
    rng = np.random.default_rng(3)
    X = np.column_stack([rng.normal(size=30), np.full(30, 7.0)])
    y = 2 * X[:, 0] + 1
    model = CoordinateDescentLasso(SolverConfig(tol=1e-10)).fit(X, y, penalty=0.0)
    assert model.coefficients[1] == 0.0
    assert model.coefficients[0] == pytest.approx(2.0)


def test_predict_applies_fit_time_standardization(orthogonal):
    X, y = orthogonal
    X = X * 3.0 + 1.0
    model = CoordinateDescentLasso().fit(X, y, penalty=0.5)

    manual = ((X - model.feature_mean) / model.feature_scale) @ model.standardized_coefficients
    manual += y.mean()
    np.testing.assert_allclose(model.predict(X), manual, atol=1e-9)


def test_convergence_error_carries_details():
    rng = np.random.default_rng(4)
    base = rng.normal(size=(100, 1))
    X = np.hstack([base, base + rng.normal(scale=1e-3, size=(100, 1))])
    y = base[:, 0]

    with pytest.raises(ConvergenceError) as exc:
        CoordinateDescentLasso(SolverConfig(max_iter=1, tol=1e-12)).fit(X, y, penalty=0.0)

    assert exc.value.penalty == 0.0
    assert exc.value.iterations == 1
    assert exc.value.delta > 0


@pytest.mark.parametrize("penalty", [-1.0, float("nan")])
def test_invalid_penalty(orthogonal, penalty):
    X, y = orthogonal
    with pytest.raises(InvalidInputError):
        CoordinateDescentLasso().fit(X, y, penalty=penalty)


def test_shape_mismatch(orthogonal):
    X, y = orthogonal
    with pytest.raises(InvalidInputError):
        CoordinateDescentLasso().fit(X, y[:-1], penalty=0.1)


def test_non_finite_labels(orthogonal):
    X, y = orthogonal
    y = y.copy()
    y[0] = np.inf
    with pytest.raises(InvalidInputError):
        CoordinateDescentLasso().fit(X, y, penalty=0.1)


def test_time_budget_raises_convergence_error():
    rng = np.random.default_rng(7)
    X = rng.normal(size=(50, 5))
    y = X @ np.arange(1.0, 6.0)

    # a tolerance no sweep can reach: only the wall-clock budget stops the loop
    solver = SolverConfig(max_iter=10**6, tol=1e-300, max_seconds=1e-9)
    with pytest.raises(ConvergenceError, match="time budget") as exc:
        CoordinateDescentLasso(solver).fit(X, y, penalty=0.01)

    assert exc.value.penalty == 0.01
    assert exc.value.iterations >= 1
