import numpy as np


def generate_sine_data(n_samples=50, noise_level=0.0, random_state=42):
    """1D sine wave sampled on an evenly spaced grid over [0, 2*pi].

    The smooth single-frequency target that a few dozen random cosine features
    should interpolate almost exactly when noise_level is 0.
    """
    rng = np.random.RandomState(random_state)
    X = np.linspace(0.0, 2 * np.pi, n_samples).reshape(-1, 1)
    Y = np.sin(X) + rng.normal(0, noise_level, X.shape)
    return X, Y
