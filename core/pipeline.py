"""End-to-end savings → expenditure forecast pipeline."""

from __future__ import annotations

import logging
import math
from typing import Iterable, Optional

import pandas as pd

from analytics.forecasting import build_forecast
from analytics.normalization import normalize
from analytics.regression import fit_linear_model
from core.data_loader import records_to_frame
from core.errors import InvalidInputError
from core.formatting import format_date_labels
from core.models import ForecastResult, PipelineConfig, Record

__all__ = ["run_forecast_pipeline"]

logger = logging.getLogger(__name__)


def run_forecast_pipeline(
    records: pd.DataFrame | Iterable[Record],
    config: Optional[PipelineConfig] = None,
) -> ForecastResult:
    """Normalize, train, predict and denormalize in a single blocking call.

    Raises :class:`core.errors.InvalidInputError` when the records cannot be
    fitted (empty, non-finite values, a constant series under the
    ``"raise"`` policy, or a learning rate large enough to diverge).
    """

    config = config or PipelineConfig()
    frame = records_to_frame(records)
    logger.info(
        "Running forecast pipeline on %d records (lr=%s, epochs=%d, seed=%s)",
        len(frame),
        config.learning_rate,
        config.epochs,
        config.seed,
    )

    savings = normalize(frame["savings"], config.constant_series_policy, name="savings")
    expenditure = normalize(frame["expenditure"], config.constant_series_policy, name="expenditure")

    run = fit_linear_model(
        savings.values,
        expenditure.values,
        learning_rate=config.learning_rate,
        epochs=config.epochs,
        seed=config.seed,
    )
    predicted, future_forecast = build_forecast(run.model, savings, expenditure)

    diverged = not math.isfinite(run.loss_history[-1]) or not math.isfinite(future_forecast)
    if diverged or not all(math.isfinite(value) for value in predicted):
        raise InvalidInputError(
            f"Training diverged with learning_rate={config.learning_rate}; "
            "the loss or predictions are not finite. Lower the learning rate."
        )

    dates = tuple(pd.Timestamp(value) for value in frame["date"])
    result = ForecastResult(
        dates=dates,
        labels=format_date_labels(dates, config.date_format),
        actual=tuple(float(value) for value in frame["expenditure"]),
        predicted=predicted,
        future_forecast=future_forecast,
        model=run.model,
        loss_history=run.loss_history,
    )
    logger.info("Forecasted next expenditure: %.2f", future_forecast)
    return result
