"""Synthetic savings and current account generator for the forecast dashboard.

Produces a monthly series where the savings balance drifts upward and current
account expenditure loosely follows it, which is the relationship the
dashboard's linear model tries to recover.
"""

from __future__ import annotations

import calendar
import json
from datetime import date, datetime
from pathlib import Path
from typing import List, Optional

import numpy as np
import pandas as pd

from core.data_loader import COLUMN_ALIASES

_EXPORT_COLUMNS = {canonical: native for native, canonical in COLUMN_ALIASES.items()}


def generate_savings_series(
    start_date: date | datetime | str = date(2022, 1, 1),
    months: int = 24,
    *,
    opening_balance: float = 5000.0,
    monthly_saving: float = 320.0,
    base_expenditure: float = 1400.0,
    expenditure_ratio: float = 0.08,
    noise: float = 0.04,
    seed: Optional[int] = None,
) -> pd.DataFrame:
    """Generate ``months`` month-end records of savings and expenditure.

    Expenditure is ``base_expenditure + expenditure_ratio * savings`` with
    multiplicative Gaussian noise of relative size ``noise``.
    """

    if months <= 0:
        raise ValueError("months must be a positive integer")

    rng = np.random.default_rng(seed)
    start = _normalize_date(start_date)

    records: List[dict] = []
    balance = opening_balance
    for offset in range(months):
        month_end = _month_end(start, offset)
        balance += monthly_saving * (1 + rng.normal(0, noise * 3))
        expenditure = (base_expenditure + expenditure_ratio * balance) * (1 + rng.normal(0, noise))
        records.append(
            {
                "date": month_end.isoformat(),
                "savings": round(balance, 2),
                "expenditure": round(max(expenditure, 0.0), 2),
            }
        )

    df = pd.DataFrame.from_records(records, columns=["date", "savings", "expenditure"])
    df["date"] = pd.to_datetime(df["date"])
    return df


def write_records_json(
    path: str | Path,
    *,
    seed: Optional[int] = None,
    **kwargs,
) -> pd.DataFrame:
    """Generate synthetic data and persist it to ``path`` using the dataset's native keys.

    Additional keyword arguments are forwarded to
    :func:`generate_savings_series`.
    """

    df = generate_savings_series(seed=seed, **kwargs)
    export = df.assign(date=df["date"].dt.strftime("%Y-%m-%d")).rename(columns=_EXPORT_COLUMNS)
    Path(path).write_text(json.dumps(export.to_dict(orient="records"), indent=2) + "\n", encoding="utf-8")
    return df


def _normalize_date(value: date | datetime | str) -> date:
    if isinstance(value, date) and not isinstance(value, datetime):
        return value
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, str):
        parsed = datetime.fromisoformat(value)
        return parsed.date()
    raise TypeError(f"Unsupported date value: {value!r}")


def _month_end(anchor: date, months: int) -> date:
    month = anchor.month - 1 + months
    year = anchor.year + month // 12
    month = month % 12 + 1
    return date(year, month, calendar.monthrange(year, month)[1])


if __name__ == "__main__":
    target = Path(__file__).resolve().parent / "savings_and_current_account_data.json"
    write_records_json(target, seed=7)
    print(f"Wrote {target}")
