"""Visualization of grid diagnostics produced by functionApproximators.grid.

Functions here only write files via fig_utils.save_fig.
"""
import numpy as np
import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
import seaborn as sns
from fig_utils import save_fig

sns.set_palette("husl")


def plot_grid_predictions(grid_data, inputs=None, targets=None, name='grid_predictions'):
    """Plot the predicted surface of a trained model (1D or 2D inputs only).

    1D: weighted basis functions (thin), their sum (thick) and the training data.
    2D: filled contour of the prediction with the training inputs on top.
    Returns the written paths, or [] if the input dimension cannot be drawn.
    """
    inputs_grid = grid_data['inputs_grid']
    predictions = grid_data['predictions_grid'][:, 0]
    n_dims = inputs_grid.shape[1]
    if n_dims == 1:
        fig, ax = plt.subplots(1, 1, figsize=(7, 4))
        x = inputs_grid[:, 0]
        weighted = grid_data.get('activations_weighted_grid')
        if weighted is not None:
            n_basis = grid_data['activations_grid'].shape[1]
            ax.plot(x, weighted[:, :n_basis], linewidth=0.6, alpha=0.5)
        ax.plot(x, predictions, color='black', linewidth=2.5, label='prediction')
        if inputs is not None and targets is not None:
            targets = np.asarray(targets).reshape(len(targets), -1)
            ax.scatter(np.ravel(inputs), targets[:, 0], s=14, color='#d62728', zorder=3, label='targets')
        ax.set_xlabel('input', fontsize=10); ax.set_ylabel('output', fontsize=10)
        ax.legend(fontsize=9)
    elif n_dims == 2:
        n0, n1 = [int(n) for n in np.ravel(grid_data['n_samples_per_dim'])[:2]]
        x0 = inputs_grid[:, 0].reshape(n0, n1)
        x1 = inputs_grid[:, 1].reshape(n0, n1)
        fig, ax = plt.subplots(1, 1, figsize=(6, 5))
        cs = ax.contourf(x0, x1, predictions.reshape(n0, n1), levels=30, cmap='viridis')
        cbar = plt.colorbar(cs, ax=ax, shrink=0.85); cbar.ax.tick_params(labelsize=8)
        if inputs is not None:
            inputs = np.asarray(inputs)
            ax.scatter(inputs[:, 0], inputs[:, 1], s=6, color='white', alpha=0.7)
        ax.set_xlabel('input 0', fontsize=10); ax.set_ylabel('input 1', fontsize=10)
    else:
        return []
    ax.set_title(f'{name.replace("_", " ")}', fontsize=11)
    plt.tight_layout()
    paths = save_fig(f'{name}.png')
    plt.close(fig)
    return paths


__all__ = ["plot_grid_predictions"]
