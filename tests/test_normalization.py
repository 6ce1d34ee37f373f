"""Tests for min-max normalization and its inverse."""

from __future__ import annotations

import math

import numpy as np
import pytest

from analytics.normalization import as_float_array, denormalize, normalize
from core.errors import InvalidInputError


@pytest.mark.parametrize(
    "values",
    [
        [1.0, 2.0, 3.0],
        [250.5, -10.0, 0.0, 1e6],
        [0.001, 0.002],
        [3.0, 1.0, 2.0, 1.0, 3.0],
    ],
)
def test_normalize_round_trips_through_denormalize(values):
    series = normalize(values)

    restored = denormalize(series.values, series)

    assert restored == pytest.approx(values, rel=1e-9, abs=1e-6)


def test_normalized_values_stay_in_unit_interval():
    values = np.random.default_rng(11).normal(1000, 250, size=200)

    series = normalize(values)

    assert min(series.values) == 0.0
    assert max(series.values) == 1.0
    assert all(0.0 <= value <= 1.0 for value in series.values)
    assert series.min == pytest.approx(values.min())
    assert series.max == pytest.approx(values.max())


def test_normalize_preserves_length_and_order():
    series = normalize([30.0, 10.0, 20.0])

    assert series.values == pytest.approx((1.0, 0.0, 0.5))


def test_constant_series_raises_by_default():
    with pytest.raises(InvalidInputError, match="constant"):
        normalize([5.0, 5.0, 5.0])


def test_constant_series_zeros_policy_is_deterministic():
    first = normalize([5.0, 5.0, 5.0], policy="zeros")
    second = normalize([5.0, 5.0, 5.0], policy="zeros")

    assert first == second
    assert first.values == (0.0, 0.0, 0.0)
    assert denormalize(first.values, first) == pytest.approx([5.0, 5.0, 5.0])


def test_single_value_is_a_constant_series():
    with pytest.raises(InvalidInputError):
        normalize([42.0])


def test_unknown_policy_is_rejected():
    with pytest.raises(InvalidInputError, match="policy"):
        normalize([1.0, 1.0], policy="clamp")  # type: ignore[arg-type]


@pytest.mark.parametrize("values", [[], [1.0, math.nan], [math.inf, 2.0]])
def test_empty_or_non_finite_input_is_rejected(values):
    with pytest.raises(InvalidInputError):
        as_float_array(values)


def test_denormalize_accepts_scalars():
    series = normalize([200.0, 600.0])

    assert float(denormalize(0.5, series)) == pytest.approx(400.0)
