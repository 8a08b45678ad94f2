import numpy as np
import pytest
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))
from functionApproximators.matrix_io import save_matrix, load_matrix, load_grid_data


def test_save_and_load_matrix(tmp_path):
    M = np.arange(6.0).reshape(2, 3)
    assert save_matrix(str(tmp_path / "nested"), "m", M) is True
    assert (tmp_path / "nested" / "m.txt").exists()
    np.testing.assert_allclose(load_matrix(str(tmp_path / "nested"), "m"), M)


def test_vector_loads_as_column_matrix(tmp_path):
    save_matrix(str(tmp_path), "v", np.array([1.0, 2.0, 3.0]))
    assert load_matrix(str(tmp_path), "v").shape == (3, 1)


def test_overwrite_policy(tmp_path, caplog):
    d = str(tmp_path)
    assert save_matrix(d, "m", np.zeros((2, 2))) is True
    assert save_matrix(d, "m", np.ones((2, 2))) is False
    assert "overwrite" in caplog.text
    np.testing.assert_allclose(load_matrix(d, "m"), 0.0)
    assert save_matrix(d, "m", np.ones((2, 2)), overwrite=True) is True
    np.testing.assert_allclose(load_matrix(d, "m"), 1.0)


def test_missing_files(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_matrix(str(tmp_path), "nothing")
    with pytest.raises(FileNotFoundError):
        load_grid_data(str(tmp_path))
