"""Visualization utilities for the forecast dashboard."""

from .charts import build_forecast_chart, build_loss_chart
from .theme import theme_tokens

__all__ = [
    "build_forecast_chart",
    "build_loss_chart",
    "theme_tokens",
]
