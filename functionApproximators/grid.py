"""Grid diagnostics: evaluate a trained RRRFF model on a regular input grid.

generate_inputs_grid(mins, maxs, n_samples_per_dim) -> (n_grid, n_dims)
evaluate_grid(model_parameters, ...) -> dict of the artifacts in GRID_ARTIFACT_NAMES
save_grid_data(model_parameters, ..., save_directory, overwrite, saver) -> bool
"""
from __future__ import annotations
import logging
import numpy as np
from .matrix_io import GRID_ARTIFACT_NAMES, save_matrix

logger = logging.getLogger(__name__)


def generate_inputs_grid(mins, maxs, n_samples_per_dim):
    """Full factorial grid spanning [mins, maxs]; the first dimension varies slowest.

    n_samples_per_dim may be an int (same resolution in every dimension) or one
    count per dimension.
    """
    mins = np.atleast_1d(np.asarray(mins, dtype=float))
    maxs = np.atleast_1d(np.asarray(maxs, dtype=float))
    if mins.shape != maxs.shape or mins.ndim != 1:
        raise ValueError(f"mins {mins.shape} and maxs {maxs.shape} must be vectors of equal length")
    n_dims = mins.shape[0]
    n_samples = np.atleast_1d(np.asarray(n_samples_per_dim, dtype=int))
    if n_samples.shape[0] == 1 and n_dims > 1:
        n_samples = np.full(n_dims, n_samples[0])
    if n_samples.shape != (n_dims,):
        raise ValueError(f"n_samples_per_dim must have {n_dims} entries; got {n_samples.shape[0]}")
    if np.any(n_samples < 1):
        raise ValueError(f"n_samples_per_dim must be positive; got {n_samples.tolist()}")

    axes = [np.linspace(lo, hi, n) for lo, hi, n in zip(mins, maxs, n_samples)]
    mesh = np.meshgrid(*axes, indexing='ij')
    return np.column_stack([m.ravel() for m in mesh])


def evaluate_grid(model_parameters, mins, maxs, n_samples_per_dim) -> dict:
    """Activations, weighted activations and predictions of a model over a grid.

    Column b of the weighted activations is activation b scaled by weight b; the
    row sum is the prediction. With several outputs the per-output weighted
    blocks are placed side by side and predictions has one column per output.
    """
    inputs_grid = generate_inputs_grid(mins, maxs, n_samples_per_dim)
    n_samples = np.atleast_1d(np.asarray(n_samples_per_dim, dtype=int))
    if n_samples.shape[0] == 1 and inputs_grid.shape[1] > 1:
        n_samples = np.full(inputs_grid.shape[1], n_samples[0])

    activations_grid = model_parameters.cosine_activations(inputs_grid)
    weights = model_parameters.weights
    weighted_blocks = [activations_grid * weights[:, k] for k in range(weights.shape[1])]
    predictions_grid = np.column_stack([block.sum(axis=1) for block in weighted_blocks])

    return {
        "n_samples_per_dim": n_samples,
        "inputs_grid": inputs_grid,
        "activations_grid": activations_grid,
        "activations_weighted_grid": np.hstack(weighted_blocks),
        "predictions_grid": predictions_grid,
    }


def save_grid_data(model_parameters, mins, maxs, n_samples_per_dim, save_directory,
                   overwrite=False, saver=save_matrix) -> bool:
    """Evaluate the grid and hand every artifact to saver(directory, name, matrix, overwrite).

    Without a save_directory nothing is computed and True is returned. A failing
    artifact is logged and the remaining ones are still saved; the result is True
    only if every artifact was saved.
    """
    if not save_directory:
        return True

    grid_data = evaluate_grid(model_parameters, mins, maxs, n_samples_per_dim)
    all_saved = True
    for name in GRID_ARTIFACT_NAMES:
        if not saver(save_directory, name, grid_data[name], overwrite):
            logger.warning("Grid artifact '%s' was not saved to %s", name, save_directory)
            all_saved = False
    if all_saved:
        logger.info("Saved grid data (%d points) to %s", grid_data["inputs_grid"].shape[0], save_directory)
    return all_saved


__all__ = ["GRID_ARTIFACT_NAMES", "generate_inputs_grid", "evaluate_grid", "save_grid_data"]
