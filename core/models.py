"""Shared data model definitions for the forecast dashboard."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, TypedDict

import pandas as pd

ConstantSeriesPolicy = Literal["raise", "zeros"]

DEFAULT_LEARNING_RATE = 0.001
DEFAULT_EPOCHS = 100
DEFAULT_DATE_FORMAT = "%d/%m/%Y"


class Record(TypedDict):
    date: pd.Timestamp
    savings: float
    expenditure: float


@dataclass(frozen=True)
class NormalizedSeries:
    """Min-max scaled values together with the bounds used to scale them."""

    values: tuple[float, ...]
    min: float
    max: float

    @property
    def span(self) -> float:
        return self.max - self.min


@dataclass(frozen=True)
class LinearModel:
    weight: float
    bias: float


@dataclass(frozen=True)
class TrainingRun:
    model: LinearModel
    loss_history: tuple[float, ...]


@dataclass(frozen=True)
class PipelineConfig:
    learning_rate: float = DEFAULT_LEARNING_RATE
    epochs: int = DEFAULT_EPOCHS
    seed: int | None = None
    constant_series_policy: ConstantSeriesPolicy = "raise"
    date_format: str = DEFAULT_DATE_FORMAT


@dataclass(frozen=True)
class ForecastResult:
    """Denormalized pipeline outputs ready for the chart renderer."""

    dates: tuple[pd.Timestamp, ...]
    labels: tuple[str, ...]
    actual: tuple[float, ...]
    predicted: tuple[float, ...]
    future_forecast: float
    model: LinearModel
    loss_history: tuple[float, ...] = field(default_factory=tuple)

    @property
    def final_loss(self) -> float | None:
        return self.loss_history[-1] if self.loss_history else None

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(
            {
                "Date": list(self.dates),
                "Label": list(self.labels),
                "Actual": list(self.actual),
                "Predicted": list(self.predicted),
            }
        )


__all__ = [
    "ConstantSeriesPolicy",
    "DEFAULT_DATE_FORMAT",
    "DEFAULT_EPOCHS",
    "DEFAULT_LEARNING_RATE",
    "ForecastResult",
    "LinearModel",
    "NormalizedSeries",
    "PipelineConfig",
    "Record",
    "TrainingRun",
]
