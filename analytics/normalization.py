"""Min-max scaling helpers for the savings and expenditure series."""

from __future__ import annotations

import logging
from typing import Iterable

import numpy as np

from core.errors import InvalidInputError
from core.models import ConstantSeriesPolicy, NormalizedSeries

__all__ = ["as_float_array", "denormalize", "normalize"]

logger = logging.getLogger(__name__)


def as_float_array(values: Iterable[float], name: str = "values") -> np.ndarray:
    """Return ``values`` as a 1-D float array, rejecting empty or non-finite input."""

    array = np.asarray(list(values), dtype=float)
    if array.ndim != 1:
        raise InvalidInputError(f"{name} must be one-dimensional, got shape {array.shape}")
    if array.size == 0:
        raise InvalidInputError(f"{name} must contain at least one value")
    if not np.all(np.isfinite(array)):
        raise InvalidInputError(f"{name} contains missing or non-finite values")
    return array


def normalize(
    values: Iterable[float],
    policy: ConstantSeriesPolicy = "raise",
    name: str = "values",
) -> NormalizedSeries:
    """Scale ``values`` into [0, 1] using the series minimum and maximum.

    A constant series has no range to scale by. With ``policy="raise"`` an
    :class:`InvalidInputError` is raised; with ``policy="zeros"`` every value
    maps to ``0.0`` so that :func:`denormalize` returns the constant again.
    """

    array = as_float_array(values, name)
    low = float(array.min())
    high = float(array.max())

    if high == low:
        if policy == "zeros":
            logger.warning("%s is constant at %s; normalizing to zeros", name, low)
            return NormalizedSeries(values=tuple(0.0 for _ in array), min=low, max=high)
        if policy == "raise":
            raise InvalidInputError(f"{name} is constant ({low}); cannot normalize a series with zero range")
        raise InvalidInputError(f"Unknown constant series policy: {policy!r}")

    scaled = (array - low) / (high - low)
    return NormalizedSeries(values=tuple(float(v) for v in scaled), min=low, max=high)


def denormalize(normalized: Iterable[float] | float, series: NormalizedSeries) -> np.ndarray:
    """Map scaled values back to the original units of ``series``."""

    array = np.asarray(normalized, dtype=float)
    return array * series.span + series.min
