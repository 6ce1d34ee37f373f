"""Core domain package for the savings and expenditure forecast dashboard.

The pipeline lives in :mod:`core.pipeline`; it is not re-exported here
because it depends on :mod:`analytics`, which itself imports core models.
"""

from .data_loader import load_records, records_to_frame, validate_records
from .errors import InvalidInputError
from .models import ForecastResult, LinearModel, NormalizedSeries, PipelineConfig, Record, TrainingRun

__all__ = [
    "ForecastResult",
    "InvalidInputError",
    "LinearModel",
    "NormalizedSeries",
    "PipelineConfig",
    "Record",
    "TrainingRun",
    "load_records",
    "records_to_frame",
    "validate_records",
]
