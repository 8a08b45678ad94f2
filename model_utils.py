"""Model utility helpers for scoring approximator fits (avoid code duplication).

fit_metrics(y_true, y_pred) -> {'mse', 'rmse', 'r2'}
evaluate_approximator(fa, X, Y) -> same dict, or None if fa is not trained
"""
from __future__ import annotations
import numpy as np
from sklearn.metrics import mean_squared_error, r2_score


def fit_metrics(y_true, y_pred) -> dict:
    y_true = np.asarray(y_true, dtype=float).reshape(len(y_true), -1)
    y_pred = np.asarray(y_pred, dtype=float).reshape(len(y_pred), -1)
    mse = float(mean_squared_error(y_true, y_pred))
    # r2 is undefined for fewer than two samples
    r2 = float(r2_score(y_true, y_pred)) if y_true.shape[0] > 1 else float('nan')
    return {'mse': mse, 'rmse': float(np.sqrt(mse)), 'r2': r2}


def evaluate_approximator(fa, X: np.ndarray, Y: np.ndarray):
    """Score fa.predict(X) against Y.

    Requirements on fa:
      - fa.predict(X) returns a Prediction with .ok and .outputs
    """
    prediction = fa.predict(X)
    if not prediction.ok:
        return None
    return fit_metrics(Y, prediction.outputs)


__all__ = ["fit_metrics", "evaluate_approximator"]
