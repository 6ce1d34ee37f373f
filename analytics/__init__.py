"""Numerical helpers behind the expenditure forecast."""

from analytics.forecasting import build_forecast, forecast_next
from analytics.normalization import as_float_array, denormalize, normalize
from analytics.regression import fit_linear_model, initial_parameters, mean_squared_error, predict

__all__ = [
    "as_float_array",
    "build_forecast",
    "denormalize",
    "fit_linear_model",
    "forecast_next",
    "initial_parameters",
    "mean_squared_error",
    "normalize",
    "predict",
]
