"""Closed-form (regularized) linear least squares.

least_squares(inputs, targets, use_offset=False, regularization=0.0) -> weights
linear_prediction(inputs, weights, use_offset=False) -> outputs

The weights solve the normal equations (X^T X + lambda*I) W = X^T Y. With
use_offset a column of ones is appended to X; the matching last row of W is the
intercept and is left unpenalized.
"""
import warnings
import numpy as np
from scipy.linalg import solve, LinAlgError, LinAlgWarning


class LeastSquaresError(LinAlgError):
    """The normal equations could not be solved to finite weights."""


def _with_offset(inputs):
    return np.column_stack([inputs, np.ones(inputs.shape[0])])


def least_squares(inputs, targets, use_offset=False, regularization=0.0):
    inputs = np.asarray(inputs, dtype=float)
    targets = np.asarray(targets, dtype=float)
    if inputs.ndim == 1:
        inputs = inputs.reshape(-1, 1)
    if targets.ndim == 1:
        targets = targets.reshape(-1, 1)
    if inputs.shape[0] != targets.shape[0]:
        raise ValueError(f"inputs ({inputs.shape[0]} rows) and targets ({targets.shape[0]} rows) differ in length")
    if regularization < 0:
        raise ValueError(f"regularization must be >= 0; got {regularization}")

    X = _with_offset(inputs) if use_offset else inputs
    n_weights = X.shape[1]
    if regularization == 0 and (np.linalg.matrix_rank(X) if X.size else 0) < n_weights:
        raise LeastSquaresError(
            f"rank-deficient inputs ({X.shape[0]} x {n_weights}) cannot be solved without regularization")
    covar = X.T @ X
    if regularization > 0:
        penalty = np.full(n_weights, float(regularization))
        if use_offset:
            penalty[-1] = 0.0
        covar = covar + np.diag(penalty)

    # Without regularization a (numerically) singular system is an error, not a warning.
    with warnings.catch_warnings():
        if regularization == 0:
            warnings.simplefilter("error", LinAlgWarning)
        try:
            weights = solve(covar, X.T @ targets, assume_a='sym')
        except (LinAlgError, LinAlgWarning) as e:
            raise LeastSquaresError(
                f"least squares system with {n_weights} weights and regularization={regularization} "
                f"is singular or ill-conditioned: {e}") from e

    if not np.all(np.isfinite(weights)):
        raise LeastSquaresError("least squares produced non-finite weights")
    return weights


def linear_prediction(inputs, weights, use_offset=False):
    inputs = np.asarray(inputs, dtype=float)
    if inputs.ndim == 1:
        inputs = inputs.reshape(-1, 1)
    X = _with_offset(inputs) if use_offset else inputs
    return X @ weights


__all__ = ["LeastSquaresError", "least_squares", "linear_prediction"]
