"""Meta-parameters (configuration) and model parameters (trained state) for RRRFF."""
from __future__ import annotations
import numpy as np
from .rff import cosine_activations


def _frozen_copy(arr, dtype=float):
    out = np.array(arr, dtype=dtype, copy=True)
    out.setflags(write=False)
    return out


class MetaParametersRRRFF:
    """Read-only configuration of a random-feature ridge regression approximator.

    Parameters
    ----------
    expected_input_dim : int
        Number of input columns the approximator accepts.
    number_of_basis_functions : int
        Number of random cosine features.
    regularization : float
        Ridge penalty (>= 0). 0 means ordinary least squares.
    gamma : float
        Kernel bandwidth (> 0); periods are drawn with standard deviation sqrt(2*gamma).
    """

    def __init__(self,
                 expected_input_dim: int,
                 number_of_basis_functions: int,
                 regularization: float,
                 gamma: float):
        if int(expected_input_dim) != expected_input_dim or expected_input_dim < 1:
            raise ValueError(f"expected_input_dim must be a positive integer; got {expected_input_dim}")
        if int(number_of_basis_functions) != number_of_basis_functions or number_of_basis_functions < 1:
            raise ValueError(f"number_of_basis_functions must be a positive integer; got {number_of_basis_functions}")
        if not regularization >= 0:
            raise ValueError(f"regularization must be >= 0; got {regularization}")
        if not gamma > 0:
            raise ValueError(f"gamma must be > 0; got {gamma}")
        self._expected_input_dim = int(expected_input_dim)
        self._number_of_basis_functions = int(number_of_basis_functions)
        self._regularization = float(regularization)
        self._gamma = float(gamma)

    @property
    def expected_input_dim(self) -> int:
        return self._expected_input_dim

    @property
    def number_of_basis_functions(self) -> int:
        return self._number_of_basis_functions

    @property
    def regularization(self) -> float:
        return self._regularization

    @property
    def gamma(self) -> float:
        return self._gamma

    @classmethod
    def from_dict(cls, config: dict) -> 'MetaParametersRRRFF':
        """Build from a configuration dict; unknown keys are rejected."""
        allowed = {'expected_input_dim', 'number_of_basis_functions', 'regularization', 'gamma'}
        unknown = set(config) - allowed
        if unknown:
            raise ValueError(f"Unknown meta-parameter(s): {sorted(unknown)}")
        return cls(**config)

    def to_dict(self) -> dict:
        return {
            'expected_input_dim': self.expected_input_dim,
            'number_of_basis_functions': self.number_of_basis_functions,
            'regularization': self.regularization,
            'gamma': self.gamma,
        }

    def __eq__(self, other):
        if not isinstance(other, MetaParametersRRRFF):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self):
        return ("MetaParametersRRRFF(expected_input_dim=%d, number_of_basis_functions=%d, "
                "regularization=%g, gamma=%g)" % (self.expected_input_dim, self.number_of_basis_functions,
                                                  self.regularization, self.gamma))


class ModelParametersRRRFF:
    """Immutable trained state: weights (B, K), periods (B, D), phases (B,)."""

    def __init__(self, weights, periods, phases):
        weights = np.asarray(weights, dtype=float)
        if weights.ndim == 1:
            weights = weights.reshape(-1, 1)
        periods = np.asarray(periods, dtype=float)
        phases = np.asarray(phases, dtype=float).ravel()
        if periods.ndim != 2:
            raise ValueError(f"periods must be 2D (n_basis, input_dim); got shape {periods.shape}")
        n_basis = periods.shape[0]
        if phases.shape[0] != n_basis:
            raise ValueError(f"expected {n_basis} phases; got {phases.shape[0]}")
        if weights.ndim != 2 or weights.shape[0] != n_basis:
            raise ValueError(f"weights must have {n_basis} rows; got shape {weights.shape}")
        self._weights = _frozen_copy(weights)
        self._periods = _frozen_copy(periods)
        self._phases = _frozen_copy(phases)

    @property
    def weights(self) -> np.ndarray:
        return self._weights

    @property
    def periods(self) -> np.ndarray:
        return self._periods

    @property
    def phases(self) -> np.ndarray:
        return self._phases

    @property
    def expected_input_dim(self) -> int:
        return self._periods.shape[1]

    @property
    def number_of_basis_functions(self) -> int:
        return self._periods.shape[0]

    @property
    def n_outputs(self) -> int:
        return self._weights.shape[1]

    def cosine_activations(self, inputs) -> np.ndarray:
        return cosine_activations(inputs, self._periods, self._phases)

    def __repr__(self):
        return "ModelParametersRRRFF(n_basis=%d, input_dim=%d, n_outputs=%d)" % (
            self.number_of_basis_functions, self.expected_input_dim, self.n_outputs)


__all__ = ["MetaParametersRRRFF", "ModelParametersRRRFF"]
