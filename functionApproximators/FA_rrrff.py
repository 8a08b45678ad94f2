"""Random-feature ridge regression function approximator (RRRFF).

Training draws random cosine features, projects the inputs through them and fits
the feature weights in closed form with regularized least squares. Prediction
reuses the stored features and weights.
"""
from __future__ import annotations
import logging
from enum import Enum
from typing import NamedTuple, Optional
import numpy as np

from .rff import make_rng, draw_cosine_features, cosine_activations
from .least_squares import least_squares
from .parameters import MetaParametersRRRFF, ModelParametersRRRFF
from . import grid

logger = logging.getLogger(__name__)


class ApproximatorState(Enum):
    UNTRAINED = "untrained"
    TRAINED = "trained"


class CallStatus(Enum):
    OK = "ok"
    ALREADY_TRAINED = "already_trained"
    NOT_TRAINED = "not_trained"


class Prediction(NamedTuple):
    status: CallStatus
    outputs: Optional[np.ndarray]

    @property
    def ok(self) -> bool:
        return self.status is CallStatus.OK


def _as_matrix(arr, name):
    arr = np.asarray(arr, dtype=float)
    if arr.ndim == 1:
        arr = arr.reshape(-1, 1)
    if arr.ndim != 2:
        raise ValueError(f"{name} must be a 2D matrix; got shape {arr.shape}")
    return arr


class FunctionApproximatorRRRFF:
    """Function approximator with random cosine features and ridge regression.

    The trained/untrained state is the presence of model parameters; there is no
    separate flag. Calling ``train`` on a trained instance or ``predict`` on an
    untrained one logs a warning and returns a status instead of raising.
    Instances are not thread-safe.
    """

    def __init__(self,
                 meta_parameters: MetaParametersRRRFF,
                 model_parameters: Optional[ModelParametersRRRFF] = None,
                 random_state=None):
        if model_parameters is not None and \
                model_parameters.expected_input_dim != meta_parameters.expected_input_dim:
            raise ValueError(
                f"model parameters expect input dim {model_parameters.expected_input_dim}, "
                f"meta-parameters expect {meta_parameters.expected_input_dim}")
        self._meta_parameters = meta_parameters
        self._model_parameters = model_parameters
        self._rng = make_rng(random_state)

    # -------------------------------- state --------------------------------
    @property
    def meta_parameters(self) -> MetaParametersRRRFF:
        return self._meta_parameters

    @property
    def model_parameters(self) -> Optional[ModelParametersRRRFF]:
        return self._model_parameters

    @property
    def state(self) -> ApproximatorState:
        if self._model_parameters is None:
            return ApproximatorState.UNTRAINED
        return ApproximatorState.TRAINED

    @property
    def is_trained(self) -> bool:
        return self.state is ApproximatorState.TRAINED

    @property
    def expected_input_dim(self) -> int:
        return self._meta_parameters.expected_input_dim

    def clone(self) -> 'FunctionApproximatorRRRFF':
        # Model parameters are immutable, so the clone can share them.
        return FunctionApproximatorRRRFF(self._meta_parameters, self._model_parameters)

    # -------------------------------- training --------------------------------
    def _check_training_data(self, inputs, targets):
        inputs = _as_matrix(inputs, "inputs")
        targets = _as_matrix(targets, "targets")
        if inputs.shape[0] != targets.shape[0]:
            raise ValueError(f"inputs ({inputs.shape[0]} rows) and targets ({targets.shape[0]} rows) "
                             "must have the same number of samples")
        if inputs.shape[1] != self.expected_input_dim:
            raise ValueError(f"inputs have {inputs.shape[1]} columns; expected {self.expected_input_dim}")
        return inputs, targets

    def _fit(self, inputs, targets, random_state) -> ModelParametersRRRFF:
        meta = self._meta_parameters
        rng = self._rng if random_state is None else make_rng(random_state)
        periods, phases = draw_cosine_features(meta.number_of_basis_functions, inputs.shape[1], meta.gamma, rng)
        proj_inputs = cosine_activations(inputs, periods, phases)
        weights = least_squares(proj_inputs, targets, use_offset=False, regularization=meta.regularization)
        logger.debug("Fitted %d cosine features on %d samples (gamma=%g, regularization=%g)",
                     meta.number_of_basis_functions, inputs.shape[0], meta.gamma, meta.regularization)
        return ModelParametersRRRFF(weights, periods, phases)

    def train(self, inputs, targets, random_state=None) -> CallStatus:
        """Fit the model once. A trained instance is left untouched; use ``retrain``."""
        if self.is_trained:
            logger.warning("FunctionApproximatorRRRFF.train may only be called once; doing nothing. "
                           "Call retrain() to fit the model again.")
            return CallStatus.ALREADY_TRAINED
        inputs, targets = self._check_training_data(inputs, targets)
        self._model_parameters = self._fit(inputs, targets, random_state)
        return CallStatus.OK

    def retrain(self, inputs, targets, random_state=None) -> CallStatus:
        """Discard the current model (if any) and fit a new one with fresh random features."""
        inputs, targets = self._check_training_data(inputs, targets)
        # Old model stays in place if fitting raises.
        self._model_parameters = self._fit(inputs, targets, random_state)
        return CallStatus.OK

    # -------------------------------- prediction --------------------------------
    def predict(self, inputs) -> Prediction:
        if not self.is_trained:
            logger.warning("FunctionApproximatorRRRFF.predict called before training; no outputs computed.")
            return Prediction(CallStatus.NOT_TRAINED, None)
        inputs = _as_matrix(inputs, "inputs")
        if inputs.shape[1] != self.expected_input_dim:
            raise ValueError(f"inputs have {inputs.shape[1]} columns; expected {self.expected_input_dim}")
        model = self._model_parameters
        proj_inputs = model.cosine_activations(inputs)
        return Prediction(CallStatus.OK, proj_inputs @ model.weights)

    def save_grid_data(self, mins, maxs, n_samples_per_dim, save_directory, overwrite=False) -> bool:
        if not save_directory:
            return True
        if not self.is_trained:
            logger.warning("FunctionApproximatorRRRFF.save_grid_data called before training; nothing saved.")
            return False
        return grid.save_grid_data(self._model_parameters, mins, maxs, n_samples_per_dim,
                                   save_directory, overwrite=overwrite)

    def __repr__(self):
        return f"FunctionApproximatorRRRFF({self._meta_parameters!r}, state={self.state.value})"


__all__ = ["FunctionApproximatorRRRFF", "ApproximatorState", "CallStatus", "Prediction"]
