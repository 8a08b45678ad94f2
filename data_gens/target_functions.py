import numpy as np


def generate_target_1d(n_samples=30, noise_level=0.0, random_state=42):
    """Damped chirp 3*exp(-x)*sin(2x^2) on [0, 2].

    Frequency grows with x while the amplitude decays, so a fixed bandwidth fits
    one end better than the other.
    """
    rng = np.random.RandomState(random_state)
    X = np.linspace(0.0, 2.0, n_samples).reshape(-1, 1)
    Y = 3 * np.exp(-X) * np.sin(2 * np.square(X))
    Y += rng.normal(0, noise_level, Y.shape)
    return X, Y


def generate_target_2d(n_samples=400, noise_level=0.0, random_state=42):
    """2.5*x1*exp(-x1^2 - x2^2) sampled on a square grid over [-2, 2]^2.

    n_samples is rounded down to the nearest square number (at least 2x2).
    """
    rng = np.random.RandomState(random_state)
    n_per_dim = max(2, int(np.sqrt(n_samples)))
    axis = np.linspace(-2.0, 2.0, n_per_dim)
    x1, x2 = np.meshgrid(axis, axis, indexing='ij')
    X = np.column_stack([x1.ravel(), x2.ravel()])
    Y = 2.5 * X[:, 0:1] * np.exp(-np.square(X[:, 0:1]) - np.square(X[:, 1:2]))
    Y += rng.normal(0, noise_level, Y.shape)
    return X, Y


def generate_multi_output(n_samples=300, noise_level=0.0, random_state=42):
    """Two smooth outputs of a 2D input drawn uniformly from [-1.5, 1.5]^2."""
    rng = np.random.RandomState(random_state)
    X = rng.uniform(-1.5, 1.5, (n_samples, 2))
    Y = np.zeros((n_samples, 2))
    Y[:, 0] = np.sin(X[:, 0]) * np.cos(X[:, 1])
    Y[:, 1] = np.exp(-0.5 * np.sum(X ** 2, axis=1))
    Y += rng.normal(0, noise_level, Y.shape)
    return X, Y
