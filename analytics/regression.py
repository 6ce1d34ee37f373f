"""Single-feature linear regression trained by full-batch gradient descent."""

from __future__ import annotations

import logging
import math
from typing import Iterable

import numpy as np

from analytics.normalization import as_float_array
from core.errors import InvalidInputError
from core.models import DEFAULT_EPOCHS, DEFAULT_LEARNING_RATE, LinearModel, TrainingRun

__all__ = [
    "fit_linear_model",
    "initial_parameters",
    "mean_squared_error",
    "predict",
]

logger = logging.getLogger(__name__)

# Glorot-uniform bound for a dense layer with one input and one output unit.
_KERNEL_LIMIT = math.sqrt(6.0 / (1 + 1))


def predict(model: LinearModel, x: Iterable[float] | float) -> np.ndarray:
    """Apply ``weight * x + bias`` element-wise."""

    return model.weight * np.asarray(x, dtype=float) + model.bias


def mean_squared_error(model: LinearModel, x: Iterable[float], y: Iterable[float]) -> float:
    x_arr, y_arr = _paired_arrays(x, y)
    residuals = predict(model, x_arr) - y_arr
    return float(np.mean(residuals**2))


def initial_parameters(seed: int | None = None) -> tuple[float, float]:
    """Return the starting ``(weight, bias)`` for a fresh model.

    The kernel is drawn from a Glorot-uniform distribution and the bias starts
    at zero. Passing ``seed`` makes the draw reproducible.
    """

    rng = np.random.default_rng(seed)
    weight = float(rng.uniform(-_KERNEL_LIMIT, _KERNEL_LIMIT))
    return weight, 0.0


def fit_linear_model(
    x: Iterable[float],
    y: Iterable[float],
    *,
    learning_rate: float = DEFAULT_LEARNING_RATE,
    epochs: int = DEFAULT_EPOCHS,
    seed: int | None = None,
    initial_weight: float | None = None,
    initial_bias: float | None = None,
) -> TrainingRun:
    """Fit ``y ≈ weight * x + bias`` minimising mean squared error.

    Every epoch computes the gradient over the whole batch and takes one step
    of size ``learning_rate``. Training always runs for exactly ``epochs``
    passes; there is no convergence check.

    The returned ``loss_history`` holds ``epochs + 1`` values: the loss of the
    initial parameters followed by the loss after each pass.
    """

    x_arr, y_arr = _paired_arrays(x, y)
    if not learning_rate > 0 or not math.isfinite(learning_rate):
        raise InvalidInputError(f"learning_rate must be a positive finite number, got {learning_rate!r}")
    if int(epochs) != epochs or epochs < 1:
        raise InvalidInputError(f"epochs must be a positive integer, got {epochs!r}")

    seeded_weight, seeded_bias = initial_parameters(seed)
    weight = seeded_weight if initial_weight is None else float(initial_weight)
    bias = seeded_bias if initial_bias is None else float(initial_bias)

    residuals = weight * x_arr + bias - y_arr
    losses = [float(np.mean(residuals**2))]
    with np.errstate(over="ignore", invalid="ignore"):
        for _ in range(int(epochs)):
            grad_weight = 2.0 * float(np.mean(residuals * x_arr))
            grad_bias = 2.0 * float(np.mean(residuals))
            weight -= learning_rate * grad_weight
            bias -= learning_rate * grad_bias
            residuals = weight * x_arr + bias - y_arr
            losses.append(float(np.mean(residuals**2)))

    if not math.isfinite(losses[-1]):
        logger.warning(
            "Training diverged after %d epochs with learning_rate=%s; loss is %s",
            epochs,
            learning_rate,
            losses[-1],
        )

    logger.debug(
        "Trained linear model for %d epochs (lr=%s): weight=%.6f bias=%.6f loss %.6f -> %.6f",
        epochs,
        learning_rate,
        weight,
        bias,
        losses[0],
        losses[-1],
    )
    return TrainingRun(model=LinearModel(weight=weight, bias=bias), loss_history=tuple(losses))


def _paired_arrays(x: Iterable[float], y: Iterable[float]) -> tuple[np.ndarray, np.ndarray]:
    x_arr = as_float_array(x, "x")
    y_arr = as_float_array(y, "y")
    if x_arr.shape != y_arr.shape:
        raise InvalidInputError(f"x and y must have the same length ({x_arr.size} != {y_arr.size})")
    return x_arr, y_arr
