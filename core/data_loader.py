"""Data loading utilities for the savings and expenditure dataset."""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Final, Iterable, Mapping

import numpy as np
import pandas as pd

from core.errors import InvalidInputError
from core.models import Record

__all__ = ["COLUMN_ALIASES", "load_records", "records_to_frame", "validate_records"]

logger = logging.getLogger(__name__)

_CACHE_SIZE: Final[int] = 8

REQUIRED_COLUMNS: Final[tuple[str, ...]] = ("date", "savings", "expenditure")

COLUMN_ALIASES: Final[dict[str, str]] = {
    "Date": "date",
    "Savings_Account_Balance": "savings",
    "Current_Account_Expenditure": "expenditure",
}


def load_records(path: str | Path) -> pd.DataFrame:
    """Return validated records from a JSON or CSV file, in file order.

    Parsed frames are cached per path; callers receive a copy so the cached
    frame is never mutated.
    """

    return _load_cached(str(path)).copy()


@lru_cache(maxsize=_CACHE_SIZE)
def _load_cached(path_str: str) -> pd.DataFrame:
    path = Path(path_str)
    if not path.exists():
        raise FileNotFoundError(f"Dataset file not found: {path}")

    suffix = path.suffix.lower()
    if suffix == ".json":
        try:
            raw = pd.read_json(path, orient="records", convert_dates=False, dtype=False)
        except ValueError as exc:
            raise InvalidInputError(f"Could not parse JSON dataset {path}: {exc}") from exc
    elif suffix == ".csv":
        raw = pd.read_csv(path)
    else:
        raise InvalidInputError(f"Unsupported dataset format '{suffix}' for {path}; expected .json or .csv")

    frame = validate_records(raw)
    logger.info("Loaded %d records from %s", len(frame), path)
    return frame


def records_to_frame(records: pd.DataFrame | Iterable[Record | Mapping[str, object]]) -> pd.DataFrame:
    """Coerce in-memory records into a validated frame."""

    if isinstance(records, pd.DataFrame):
        return validate_records(records)
    return validate_records(pd.DataFrame.from_records(list(records)))


def validate_records(raw: pd.DataFrame) -> pd.DataFrame:
    """Rename known aliases, check required columns and reject bad values.

    Row order is preserved; it defines the x-axis and the record used for
    the one-step-ahead forecast.
    """

    df = raw.rename(columns=COLUMN_ALIASES)
    duplicated = sorted({column for column in df.columns[df.columns.duplicated()] if column in REQUIRED_COLUMNS})
    if duplicated:
        raise InvalidInputError(f"Dataset has duplicate columns for: {', '.join(duplicated)}")

    missing = [column for column in REQUIRED_COLUMNS if column not in df.columns]
    if missing:
        raise InvalidInputError(f"Dataset is missing required columns: {', '.join(missing)}")

    df = df.loc[:, list(REQUIRED_COLUMNS)].reset_index(drop=True)
    if df.empty:
        raise InvalidInputError("Dataset contains no records.")

    try:
        df["date"] = pd.to_datetime(df["date"])
    except (ValueError, TypeError) as exc:
        raise InvalidInputError(f"Could not parse record dates: {exc}") from exc
    if df["date"].isna().any():
        raise InvalidInputError("Dataset contains records without a date.")

    for column in ("savings", "expenditure"):
        values = pd.to_numeric(df[column], errors="coerce").astype(float)
        bad_rows = ~np.isfinite(values.to_numpy())
        if bad_rows.any():
            first_bad = int(np.flatnonzero(bad_rows)[0])
            raise InvalidInputError(
                f"Column '{column}' has missing or non-numeric values (first at row {first_bad})."
            )
        df[column] = values

    return df
