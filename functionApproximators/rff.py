"""Random cosine features (numpy-only core).

Used by FunctionApproximatorRRRFF (FA_rrrff.py) and the grid evaluator (grid.py).

draw_cosine_features(n_basis, input_dim, gamma, rng) -> (periods, phases)
cosine_activations(inputs, periods, phases) -> (n_samples, n_basis)

Periods are drawn from N(0, sqrt(2*gamma)), phases from U[0, 2*pi).
Periods are always drawn before phases, so a seeded source reproduces both.
"""
import numpy as np
from sklearn.utils import check_random_state


def make_rng(random_state=None):
    """Return a RandomState owned by the caller.

    None gives a fresh generator seeded from OS entropy (never numpy's global one),
    an int gives a seeded generator, a RandomState is passed through unchanged.
    """
    if random_state is None:
        return np.random.RandomState()
    return check_random_state(random_state)


def draw_cosine_features(number_of_basis_functions, input_dim, gamma, rng):
    if number_of_basis_functions < 1:
        raise ValueError(f"number_of_basis_functions must be positive; got {number_of_basis_functions}")
    if input_dim < 1:
        raise ValueError(f"input_dim must be positive; got {input_dim}")
    if not gamma > 0:
        raise ValueError(f"gamma must be > 0; got {gamma}")
    periods = rng.normal(0.0, np.sqrt(2.0 * gamma), (number_of_basis_functions, input_dim))
    phases = rng.uniform(0.0, 2 * np.pi, number_of_basis_functions)
    return periods, phases


def cosine_activations(inputs, periods, phases):
    """Activation of each cosine basis function for each input row.

    Entry (i, b) is cos(periods[b] . inputs[i] + phases[b]). An empty input batch
    yields a (0, n_basis) matrix.
    """
    inputs = np.asarray(inputs, dtype=float)
    if inputs.ndim == 1:
        inputs = inputs.reshape(-1, 1)
    periods = np.asarray(periods, dtype=float)
    phases = np.asarray(phases, dtype=float)
    if inputs.shape[1] != periods.shape[1]:
        raise ValueError(f"inputs have {inputs.shape[1]} columns but periods expect {periods.shape[1]}")
    if phases.shape != (periods.shape[0],):
        raise ValueError(f"phases must have shape ({periods.shape[0]},); got {phases.shape}")
    linear_proj = inputs @ periods.T + phases
    return np.cos(linear_proj)


__all__ = ["make_rng", "draw_cosine_features", "cosine_activations"]
