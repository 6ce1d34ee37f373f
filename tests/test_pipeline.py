"""End-to-end tests for the savings → expenditure forecast pipeline."""

from __future__ import annotations

import sys
from pathlib import Path

import numpy as np
import pandas as pd
import pytest

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from core.errors import InvalidInputError
from core.models import PipelineConfig
from core.pipeline import run_forecast_pipeline
from data.synth import generate_savings_series

CONVERGED = PipelineConfig(learning_rate=0.5, epochs=2000, seed=0)


@pytest.fixture()
def linear_records() -> list[dict[str, object]]:
    return [
        {"date": "2024-01-31", "savings": 100.0, "expenditure": 200.0},
        {"date": "2024-02-29", "savings": 200.0, "expenditure": 400.0},
        {"date": "2024-03-31", "savings": 300.0, "expenditure": 600.0},
    ]


@pytest.fixture()
def synthetic_frame() -> pd.DataFrame:
    return generate_savings_series(start_date="2022-01-01", months=18, seed=5)


def test_linear_records_are_tracked_and_forecast(linear_records):
    result = run_forecast_pipeline(linear_records, CONVERGED)

    assert result.actual == (200.0, 400.0, 600.0)
    assert result.predicted == pytest.approx(result.actual, abs=1.0)
    assert result.future_forecast == pytest.approx(600.0, abs=1.0)
    assert result.model.weight == pytest.approx(1.0, abs=0.01)
    assert result.model.bias == pytest.approx(0.0, abs=0.01)


def test_predictions_align_with_records(synthetic_frame):
    result = run_forecast_pipeline(synthetic_frame, PipelineConfig(seed=9))

    assert len(result.predicted) == len(synthetic_frame)
    assert len(result.labels) == len(synthetic_frame)

    savings = synthetic_frame["savings"].to_numpy()
    expenditure = synthetic_frame["expenditure"].to_numpy()
    x = (savings - savings.min()) / (savings.max() - savings.min())
    expected = (result.model.weight * x + result.model.bias) * (
        expenditure.max() - expenditure.min()
    ) + expenditure.min()

    assert result.predicted == pytest.approx(tuple(expected))
    assert result.future_forecast == pytest.approx(expected[-1])


def test_default_config_is_reproducible_for_fixed_seed(synthetic_frame):
    first = run_forecast_pipeline(synthetic_frame, PipelineConfig(seed=21))
    second = run_forecast_pipeline(synthetic_frame, PipelineConfig(seed=21))

    assert first == second
    assert len(first.loss_history) == PipelineConfig().epochs + 1
    assert np.all(np.isfinite(first.predicted))
    assert np.isfinite(first.future_forecast)


def test_labels_follow_date_format(linear_records):
    config = PipelineConfig(learning_rate=0.5, epochs=10, seed=0, date_format="%Y-%m")

    result = run_forecast_pipeline(linear_records, config)

    assert result.labels == ("2024-01", "2024-02", "2024-03")
    assert result.dates[0] == pd.Timestamp("2024-01-31")


def test_record_order_is_preserved():
    records = [
        {"date": "2024-03-31", "savings": 300.0, "expenditure": 610.0},
        {"date": "2024-01-31", "savings": 100.0, "expenditure": 190.0},
        {"date": "2024-02-29", "savings": 200.0, "expenditure": 405.0},
    ]

    result = run_forecast_pipeline(records, CONVERGED)

    assert result.actual == (610.0, 190.0, 405.0)
    # the forecast is driven by the last record in input order
    assert result.future_forecast == pytest.approx(result.predicted[-1])


def test_constant_expenditure_raises_by_default(linear_records):
    for record in linear_records:
        record["expenditure"] = 500.0

    with pytest.raises(InvalidInputError, match="expenditure"):
        run_forecast_pipeline(linear_records, CONVERGED)


def test_constant_expenditure_zeros_policy_predicts_the_constant(linear_records):
    for record in linear_records:
        record["expenditure"] = 500.0
    config = PipelineConfig(learning_rate=0.5, epochs=50, seed=0, constant_series_policy="zeros")

    result = run_forecast_pipeline(linear_records, config)

    assert result.predicted == pytest.approx((500.0, 500.0, 500.0))
    assert result.future_forecast == pytest.approx(500.0)


def test_empty_records_fail_fast():
    with pytest.raises(InvalidInputError):
        run_forecast_pipeline([], CONVERGED)


def test_non_finite_values_fail_fast(linear_records):
    linear_records[1]["savings"] = float("nan")

    with pytest.raises(InvalidInputError, match="savings"):
        run_forecast_pipeline(linear_records, CONVERGED)


def test_result_frame_has_chart_columns(linear_records):
    frame = run_forecast_pipeline(linear_records, CONVERGED).to_frame()

    assert list(frame.columns) == ["Date", "Label", "Actual", "Predicted"]
    assert len(frame) == 3


def test_divergent_training_is_reported(synthetic_frame):
    config = PipelineConfig(learning_rate=50.0, epochs=100, seed=0)

    with pytest.raises(InvalidInputError, match="diverged"):
        run_forecast_pipeline(synthetic_frame, config)
