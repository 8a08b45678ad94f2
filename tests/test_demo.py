import numpy as np
import pytest
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))
from data_gens import get_generator
from model_utils import fit_metrics, evaluate_approximator
from functionApproximators import FunctionApproximatorRRRFF, MetaParametersRRRFF
import demo


@pytest.mark.parametrize("name,input_dim,output_dim", [
    ("sine", 1, 1), ("target_1d", 1, 1), ("target_2d", 2, 1), ("multi_output", 2, 2),
])
def test_generators_shapes(name, input_dim, output_dim):
    X, Y = get_generator(name)()
    assert X.ndim == 2 and X.shape[1] == input_dim
    assert Y.shape == (X.shape[0], output_dim)


def test_unknown_generator():
    with pytest.raises(ValueError):
        get_generator("nope")


def test_fit_metrics():
    y = np.array([[1.0], [2.0], [3.0]])
    m = fit_metrics(y, y)
    assert m['mse'] == 0.0 and m['rmse'] == 0.0 and m['r2'] == 1.0
    m = fit_metrics(y, y + 1.0)
    assert m['mse'] == pytest.approx(1.0)


def test_evaluate_untrained_returns_none():
    fa = FunctionApproximatorRRRFF(MetaParametersRRRFF(1, 5, 0.1, 1.0))
    assert evaluate_approximator(fa, np.zeros((3, 1)), np.zeros((3, 1))) is None


def test_get_config_overrides():
    config = demo.get_config('sine', gamma=3.0, regularization=None)
    assert config['gamma'] == 3.0
    assert config['regularization'] == demo.DEFAULT_CONFIGS['sine']['regularization']


def test_demo_sine_with_grid_and_plot(tmp_path):
    grid_dir = str(tmp_path / "sine")
    results, fa = demo.main(dataset='sine', seed=0, grid_dir=grid_dir, grid_samples=40, plot=True)
    assert results['train']['rmse'] < 0.05
    assert results['test']['rmse'] < 0.1
    assert os.path.exists(os.path.join(grid_dir, "predictions_grid.txt"))
    pngs = [f for _, _, files in os.walk(grid_dir) for f in files if f.endswith('.png')]
    assert pngs


def test_demo_multi_output_without_grid():
    results, fa = demo.main(dataset='multi_output', seed=1)
    assert fa.model_parameters.n_outputs == 2
    assert np.isfinite(results['test']['rmse'])
