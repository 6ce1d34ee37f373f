"""Tests for settings resolution from env vars and Streamlit secrets."""

from __future__ import annotations

import logging

import pytest
import streamlit as st
from pydantic import ValidationError

from config import configure_logging, get_settings, load_settings
from config.settings import DEFAULT_DATA_PATH, Settings
from core.errors import InvalidInputError
from core.models import PipelineConfig


@pytest.fixture(autouse=True)
def clear_streamlit_secrets(monkeypatch):
    """Provide an empty secrets mapping so tests don't rely on Streamlit runtime."""

    monkeypatch.setattr(st, "secrets", {}, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_defaults_match_pipeline_defaults():
    settings = get_settings()

    assert settings.data_path == DEFAULT_DATA_PATH
    assert settings.pipeline_config() == PipelineConfig()


def test_env_vars_override_defaults(monkeypatch):
    monkeypatch.setenv("FORECAST_LEARNING_RATE", "0.05")
    monkeypatch.setenv("FORECAST_EPOCHS", "250")
    monkeypatch.setenv("FORECAST_SEED", "7")
    monkeypatch.setenv("FORECAST_CONSTANT_SERIES_POLICY", "zeros")

    config = get_settings().pipeline_config()

    assert config.learning_rate == pytest.approx(0.05)
    assert config.epochs == 250
    assert config.seed == 7
    assert config.constant_series_policy == "zeros"


def test_streamlit_secrets_override_defaults(monkeypatch):
    monkeypatch.setattr(
        st,
        "secrets",
        {"forecast": {"epochs": 500, "currency_symbol": "$", "unrelated": "x"}},
        raising=False,
    )

    settings = get_settings()

    assert settings.epochs == 500
    assert settings.currency_symbol == "$"


@pytest.mark.parametrize("field, value", [("learning_rate", 0.0), ("epochs", 0), ("constant_series_policy", "nan")])
def test_invalid_settings_are_rejected(field, value):
    with pytest.raises(ValidationError):
        Settings(**{field: value})


def test_configure_logging_sets_root_level():
    root = logging.getLogger()
    previous = root.level
    try:
        configure_logging("debug")
        assert root.level == logging.DEBUG
        configure_logging("not-a-level")
        assert root.level == logging.INFO
    finally:
        root.setLevel(previous)


@pytest.mark.parametrize("name, value", [("FORECAST_EPOCHS", "0"), ("FORECAST_SEED", "")])
def test_load_settings_reports_invalid_values(monkeypatch, name, value):
    monkeypatch.setenv(name, value)

    with pytest.raises(InvalidInputError, match="Invalid forecast settings"):
        load_settings()
