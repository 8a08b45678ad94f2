import numpy as np
import pytest
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))
from sklearn.linear_model import Ridge
from functionApproximators.least_squares import least_squares, linear_prediction, LeastSquaresError


def test_exact_linear_fit_without_regularization():
    rng = np.random.RandomState(0)
    X = rng.randn(50, 4)
    W = rng.randn(4, 2)
    Y = X @ W
    W_hat = least_squares(X, Y)
    np.testing.assert_allclose(W_hat, W, atol=1e-8)
    np.testing.assert_allclose(linear_prediction(X, W_hat), Y, atol=1e-8)


def test_ridge_matches_sklearn_without_intercept():
    rng = np.random.RandomState(1)
    X = rng.randn(40, 6)
    Y = rng.randn(40, 1)
    W_hat = least_squares(X, Y, use_offset=False, regularization=0.5)
    ridge = Ridge(alpha=0.5, fit_intercept=False).fit(X, Y)
    np.testing.assert_allclose(W_hat.ravel(), ridge.coef_.ravel(), rtol=1e-6, atol=1e-9)


def test_offset_is_unpenalized_intercept():
    rng = np.random.RandomState(2)
    X = rng.randn(60, 3)
    Y = X @ np.array([[1.0], [-2.0], [0.5]]) + 4.0 + 0.1 * rng.randn(60, 1)
    W_hat = least_squares(X, Y, use_offset=True, regularization=0.3)
    assert W_hat.shape == (4, 1)
    ridge = Ridge(alpha=0.3, fit_intercept=True).fit(X, Y)
    np.testing.assert_allclose(W_hat[:3].ravel(), ridge.coef_.ravel(), rtol=1e-6, atol=1e-9)
    np.testing.assert_allclose(W_hat[3, 0], np.ravel(ridge.intercept_)[0], rtol=1e-6)
    np.testing.assert_allclose(linear_prediction(X, W_hat, use_offset=True), ridge.predict(X).reshape(-1, 1),
                               rtol=1e-6, atol=1e-9)


def test_underdetermined_system_with_regularization():
    rng = np.random.RandomState(3)
    X = rng.randn(5, 20)
    Y = rng.randn(5, 1)
    W_hat = least_squares(X, Y, regularization=1e-3)
    assert W_hat.shape == (20, 1)
    assert np.all(np.isfinite(W_hat))
    # nearly interpolates the few samples it has
    assert np.max(np.abs(X @ W_hat - Y)) < 1e-2


def test_singular_system_without_regularization_raises():
    X = np.zeros((5, 3))
    Y = np.ones((5, 1))
    with pytest.raises(LeastSquaresError):
        least_squares(X, Y, regularization=0.0)
    assert issubclass(LeastSquaresError, np.linalg.LinAlgError)


def test_invalid_arguments():
    with pytest.raises(ValueError):
        least_squares(np.zeros((4, 2)), np.zeros((3, 1)))
    with pytest.raises(ValueError):
        least_squares(np.eye(3), np.ones(3), regularization=-1.0)
