"""Prediction and denormalization for the expenditure forecast."""

from __future__ import annotations

from typing import Tuple

from analytics.normalization import denormalize
from analytics.regression import predict
from core.models import LinearModel, NormalizedSeries

__all__ = ["build_forecast", "forecast_next"]


def build_forecast(
    model: LinearModel,
    savings: NormalizedSeries,
    expenditure: NormalizedSeries,
) -> Tuple[tuple[float, ...], float]:
    """Return historical predictions and the one-step-ahead forecast.

    Prediction ``i`` depends only on normalized savings value ``i``. Results
    are mapped back to expenditure units using the expenditure bounds.
    """

    predicted = denormalize(predict(model, savings.values), expenditure)
    return tuple(float(value) for value in predicted), forecast_next(model, savings, expenditure)


def forecast_next(model: LinearModel, savings: NormalizedSeries, expenditure: NormalizedSeries) -> float:
    """Forecast expenditure from the most recent savings value."""

    latest = savings.values[-1]
    return float(denormalize(predict(model, latest), expenditure))
