"""Savings and expenditure forecast dashboard."""

from __future__ import annotations

import logging
from pathlib import Path

import streamlit as st

from app.layout import inject_css
from app.pages import render_dashboard_error, render_dashboard_page
from config import configure_logging, load_settings
from core import InvalidInputError, PipelineConfig, load_records
from core.models import ForecastResult
from core.pipeline import run_forecast_pipeline

logger = logging.getLogger(__name__)


@st.cache_data(show_spinner=False)
def _load_forecast(data_path: str, config: PipelineConfig) -> ForecastResult:
    """Load records and run the pipeline once per dataset and configuration."""

    records = load_records(Path(data_path))
    return run_forecast_pipeline(records, config)


def main() -> None:
    """Application entrypoint for the forecast dashboard."""

    st.set_page_config(
        page_title="Savings and Expenditure Dashboard",
        page_icon="📈",
        layout="wide",
        initial_sidebar_state="collapsed",
    )
    inject_css()
    try:
        settings = load_settings()
    except InvalidInputError as exc:
        logger.error("Could not load settings: %s", exc)
        render_dashboard_error(str(exc))
        return
    configure_logging(settings.log_level)

    with st.spinner("Training expenditure model…"):
        try:
            result = _load_forecast(str(settings.data_path), settings.pipeline_config())
        except (InvalidInputError, FileNotFoundError) as exc:
            logger.error("Forecast pipeline failed: %s", exc)
            render_dashboard_error(str(exc))
            return

    render_dashboard_page(result, currency_symbol=settings.currency_symbol)


if __name__ == "__main__":
    main()
