"""Formatting helpers for forecast labels and values."""

from __future__ import annotations

from typing import Iterable

import pandas as pd

from core.models import DEFAULT_DATE_FORMAT

__all__ = ["format_amount", "format_date_labels"]


def format_date_labels(dates: Iterable[pd.Timestamp], date_format: str = DEFAULT_DATE_FORMAT) -> tuple[str, ...]:
    return tuple(pd.Timestamp(value).strftime(date_format) for value in dates)


def format_amount(value: float | None, currency_symbol: str | None = "£") -> str:
    if value is None or pd.isna(value):
        return "n/a"
    prefix = currency_symbol or ""
    sign = "-" if value < 0 else ""
    return f"{sign}{prefix}{abs(value):,.2f}"
