"""Centralised configuration handling for the forecast dashboard."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any, Mapping

import streamlit as st
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.errors import InvalidInputError
from core.models import (
    DEFAULT_DATE_FORMAT,
    DEFAULT_EPOCHS,
    DEFAULT_LEARNING_RATE,
    ConstantSeriesPolicy,
    PipelineConfig,
)

DEFAULT_DATA_PATH = Path(__file__).resolve().parent.parent / "data" / "savings_and_current_account_data.json"


def _streamlit_section(name: str) -> Mapping[str, Any] | None:
    """Return a mapping from Streamlit secrets for the given section."""

    try:
        if hasattr(st, "secrets") and name in st.secrets:
            section = st.secrets[name]
            if isinstance(section, Mapping):
                return section
            return dict(section)
    except Exception:  # pragma: no cover - accessing secrets may fail in tests
        return None
    return None


class Settings(BaseSettings):
    """Application settings sourced from env vars and Streamlit secrets."""

    data_path: Path = DEFAULT_DATA_PATH
    learning_rate: float = Field(default=DEFAULT_LEARNING_RATE, gt=0)
    epochs: int = Field(default=DEFAULT_EPOCHS, ge=1)
    seed: int | None = None
    constant_series_policy: ConstantSeriesPolicy = "raise"
    date_format: str = DEFAULT_DATE_FORMAT
    currency_symbol: str = "£"
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_prefix="FORECAST_", extra="ignore")

    def pipeline_config(self) -> PipelineConfig:
        return PipelineConfig(
            learning_rate=self.learning_rate,
            epochs=self.epochs,
            seed=self.seed,
            constant_series_policy=self.constant_series_policy,
            date_format=self.date_format,
        )


@lru_cache
def get_settings() -> Settings:
    """Load and cache application settings."""

    overrides: dict[str, Any] = {}
    secrets_section = _streamlit_section("forecast")
    if secrets_section:
        overrides = {key: secrets_section.get(key) for key in Settings.model_fields if key in secrets_section}

    return Settings(**{k: v for k, v in overrides.items() if v is not None})


def load_settings() -> Settings:
    """Return cached settings, reporting invalid values as :class:`InvalidInputError`."""

    try:
        return get_settings()
    except ValidationError as exc:
        fields = ", ".join(".".join(str(part) for part in error["loc"]) for error in exc.errors())
        raise InvalidInputError(f"Invalid forecast settings: {fields or exc}") from exc
