"""Plain-text matrix persistence for diagnostic artifacts.

Usage:
  from functionApproximators.matrix_io import save_matrix, load_matrix
  save_matrix("out/grid", "inputs_grid", X, overwrite=False)  # -> out/grid/inputs_grid.txt
  X = load_matrix("out/grid", "inputs_grid")

Design:
- One matrix per file, numpy.savetxt format, '.txt' suffix added when missing.
- Existing files are only replaced with overwrite=True.
- Failures are reported through the return value and the log, never raised.
"""
from __future__ import annotations
import os
import logging
import numpy as np

logger = logging.getLogger(__name__)

GRID_ARTIFACT_NAMES = (
    "n_samples_per_dim",
    "inputs_grid",
    "activations_grid",
    "activations_weighted_grid",
    "predictions_grid",
)


def _matrix_path(directory: str, name: str) -> str:
    filename = name if name.endswith('.txt') else f"{name}.txt"
    return os.path.join(directory, filename)


def save_matrix(directory: str, name: str, matrix, overwrite: bool = False) -> bool:
    """Save matrix to <directory>/<name>.txt. Returns False if refused or failed."""
    path = _matrix_path(directory, name)
    if os.path.exists(path) and not overwrite:
        logger.warning("Not overwriting existing file %s (use overwrite=True)", path)
        return False
    arr = np.asarray(matrix)
    if arr.ndim == 0:
        arr = arr.reshape(1, 1)
    try:
        os.makedirs(directory, exist_ok=True)
        np.savetxt(path, arr)
    except OSError as e:
        logger.error("Saving %s failed: %s", path, e)
        return False
    logger.debug("Saved %s with shape %s", path, arr.shape)
    return True


def load_matrix(directory: str, name: str) -> np.ndarray:
    path = _matrix_path(directory, name)
    if not os.path.exists(path):
        raise FileNotFoundError(f"Matrix file not found at {path}")
    return np.loadtxt(path, ndmin=2)


def load_grid_data(directory: str) -> dict:
    """Load every grid artifact present in directory; missing ones are skipped."""
    data = {}
    for name in GRID_ARTIFACT_NAMES:
        if os.path.exists(_matrix_path(directory, name)):
            data[name] = load_matrix(directory, name)
    if not data:
        raise FileNotFoundError(f"No grid data found in {directory}")
    return data


__all__ = ["GRID_ARTIFACT_NAMES", "save_matrix", "load_matrix", "load_grid_data"]
