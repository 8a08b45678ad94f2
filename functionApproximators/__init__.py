"""Package initializer for functionApproximators.

Exposes the random-feature ridge regression approximator (FunctionApproximatorRRRFF)
together with its parameter objects and building blocks.
"""

from .FA_rrrff import FunctionApproximatorRRRFF, ApproximatorState, CallStatus, Prediction
from .parameters import MetaParametersRRRFF, ModelParametersRRRFF
from .least_squares import LeastSquaresError, least_squares, linear_prediction
from .rff import make_rng, draw_cosine_features, cosine_activations

__all__ = [
    "FunctionApproximatorRRRFF", "ApproximatorState", "CallStatus", "Prediction",
    "MetaParametersRRRFF", "ModelParametersRRRFF",
    "LeastSquaresError", "least_squares", "linear_prediction",
    "make_rng", "draw_cosine_features", "cosine_activations",
]
