"""Train an RRRFF function approximator on a synthetic target and inspect the fit.

Example:
  python demo.py --dataset sine --n-basis 20 --gamma 1.0 --regularization 1e-6 \
      --grid-dir out/sine --plot
"""
import sys
import os
import logging
from sklearn.model_selection import train_test_split

sys.path.append(os.path.dirname(os.path.abspath(__file__)))
from functionApproximators import FunctionApproximatorRRRFF, MetaParametersRRRFF, LeastSquaresError
from functionApproximators.matrix_io import load_grid_data
from data_gens import get_generator
from model_utils import evaluate_approximator

# ================= Constants / Global Configuration =================
DEFAULT_CONFIGS = {
    'sine':         {'n_samples': 60,  'number_of_basis_functions': 20,  'gamma': 1.0,  'regularization': 1e-6},
    'target_1d':    {'n_samples': 60,  'number_of_basis_functions': 30,  'gamma': 5.0,  'regularization': 1e-6},
    'target_2d':    {'n_samples': 625, 'number_of_basis_functions': 100, 'gamma': 1.0,  'regularization': 1e-4},
    'multi_output': {'n_samples': 400, 'number_of_basis_functions': 80,  'gamma': 0.5,  'regularization': 1e-4},
}
TEST_FRACTION = 0.2

logger = logging.getLogger(__name__)


def configure_logging(quiet: bool = False, verbose: bool = False):
    if quiet:
        level = logging.WARNING
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO
    logging.basicConfig(level=level, format='[%(levelname)s] %(message)s')
    logger.debug("Logging configured. quiet=%s verbose=%s", quiet, verbose)


def get_config(dataset: str, **overrides):
    """Default configuration for dataset, with non-None overrides applied."""
    config = dict(DEFAULT_CONFIGS.get(dataset, DEFAULT_CONFIGS['sine']))
    config.update({k: v for k, v in overrides.items() if v is not None})
    return config


def main(dataset='sine', n_samples=None, number_of_basis_functions=None, gamma=None,
         regularization=None, seed=0, grid_dir=None, grid_samples=50, overwrite=False, plot=False):
    config = get_config(dataset, n_samples=n_samples, number_of_basis_functions=number_of_basis_functions,
                        gamma=gamma, regularization=regularization)
    gen = get_generator(dataset)
    X, Y = gen(n_samples=config['n_samples'], random_state=seed)
    X_train, X_test, Y_train, Y_test = train_test_split(X, Y, test_size=TEST_FRACTION, random_state=seed)
    logger.info("Dataset %s: %d training / %d held-out samples, input dim %d, output dim %d",
                dataset, X_train.shape[0], X_test.shape[0], X.shape[1], Y.shape[1])

    meta = MetaParametersRRRFF(expected_input_dim=X.shape[1],
                               number_of_basis_functions=config['number_of_basis_functions'],
                               regularization=config['regularization'],
                               gamma=config['gamma'])
    fa = FunctionApproximatorRRRFF(meta, random_state=seed)
    fa.train(X_train, Y_train)

    results = {
        'train': evaluate_approximator(fa, X_train, Y_train),
        'test': evaluate_approximator(fa, X_test, Y_test),
    }
    for split, metrics in results.items():
        logger.info("%-5s RMSE=%.4e  R2=%.4f", split, metrics['rmse'], metrics['r2'])

    if grid_dir:
        mins, maxs = X.min(axis=0), X.max(axis=0)
        if not fa.save_grid_data(mins, maxs, grid_samples, grid_dir, overwrite=overwrite):
            logger.warning("Some grid artifacts were not written to %s", grid_dir)
        elif plot:
            from fig_utils import set_figure_dir
            from visualization import plot_grid_predictions
            set_figure_dir(dataset, root=grid_dir)
            plot_grid_predictions(load_grid_data(grid_dir), X_train, Y_train, name=f'{dataset}_grid_predictions')
    return results, fa


if __name__ == "__main__":
    import argparse
    parser = argparse.ArgumentParser(description="Random-feature ridge regression (RRRFF) demo")
    parser.add_argument("--dataset", type=str, default="sine",
                        help="Dataset generator name: sine, target_1d, target_2d, multi_output")
    parser.add_argument("--n-samples", type=int, default=None, help="Number of generated samples")
    parser.add_argument("--n-basis", type=int, default=None, help="Number of random cosine basis functions")
    parser.add_argument("--gamma", type=float, default=None, help="Kernel bandwidth (> 0)")
    parser.add_argument("--regularization", type=float, default=None, help="Ridge penalty (>= 0)")
    parser.add_argument("--seed", type=int, default=0, help="Seed for data split and random features")
    parser.add_argument("--grid-dir", type=str, default=None,
                        help="Directory for grid diagnostics (skipped when not given)")
    parser.add_argument("--grid-samples", type=int, default=50,
                        help="Grid samples per input dimension")
    parser.add_argument("--overwrite", action="store_true", default=False,
                        help="Replace existing grid diagnostics")
    parser.add_argument("--plot", action="store_true", default=False,
                        help="Plot grid predictions (requires --grid-dir)")
    parser.add_argument("--fig-formats", type=str, default="png",
                        help="Comma separated figure formats to save (default: png). Example: png,svg,pdf")
    parser.add_argument("--verbose", action="store_true", default=False, help="Verbose debug output")
    parser.add_argument("--quiet", action="store_true", default=False, help="Suppress most logs (overrides --verbose)")
    args = parser.parse_args()
    configure_logging(quiet=args.quiet, verbose=args.verbose)

    from fig_utils import set_fig_formats
    set_fig_formats([f for f in args.fig_formats.split(',') if f.strip()])

    try:
        main(dataset=args.dataset, n_samples=args.n_samples, number_of_basis_functions=args.n_basis,
             gamma=args.gamma, regularization=args.regularization, seed=args.seed,
             grid_dir=args.grid_dir, grid_samples=args.grid_samples, overwrite=args.overwrite, plot=args.plot)
    except (ValueError, LeastSquaresError) as e:
        logger.error("Training failed: %s", e)
        sys.exit(1)
