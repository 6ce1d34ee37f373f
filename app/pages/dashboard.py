"""Savings and expenditure dashboard page."""

from __future__ import annotations

import streamlit as st

from app.layout import card, render_title
from core.formatting import format_amount
from core.models import ForecastResult
from visualization import build_forecast_chart, build_loss_chart

PAGE_TITLE = "Savings and Expenditure Dashboard"


def _render_analysis_card(result: ForecastResult, currency_symbol: str) -> None:
    chart = build_forecast_chart(result, currency_symbol=currency_symbol)
    st.plotly_chart(chart, use_container_width=True, key="forecast-chart")
    st.caption(f"{len(result.labels)} records · predictions from a linear fit on savings balance")


def _render_forecast_card(result: ForecastResult, currency_symbol: str) -> None:
    st.markdown(
        "<p class='fc-forecast'>Forecasted Next Month Expenditure: "
        f"<strong>{format_amount(result.future_forecast, currency_symbol)}</strong></p>",
        unsafe_allow_html=True,
    )
    st.caption(f"Based on the latest savings balance recorded on {result.labels[-1]}.")


def _render_model_card(result: ForecastResult) -> None:
    metric_cols = st.columns((1, 1, 1))
    metric_cols[0].metric("Weight", f"{result.model.weight:.4f}")
    metric_cols[1].metric("Bias", f"{result.model.bias:.4f}")
    final_loss = result.final_loss
    metric_cols[2].metric("Final loss (MSE)", "n/a" if final_loss is None else f"{final_loss:.5f}")
    with st.expander("Training loss by epoch"):
        st.plotly_chart(build_loss_chart(result.loss_history), use_container_width=True, key="loss-chart")


def render_page(result: ForecastResult, currency_symbol: str = "£") -> None:
    """Render the dashboard for a completed forecast."""

    render_title(PAGE_TITLE)

    with card("Expenditure Analysis"):
        _render_analysis_card(result, currency_symbol)

    with card("Forecasted Expenditure", suffix="Next month"):
        _render_forecast_card(result, currency_symbol)

    with card("Model details", suffix="Linear fit"):
        _render_model_card(result)


def render_error(message: str) -> None:
    """Show a failed pipeline run instead of an empty chart."""

    render_title(PAGE_TITLE)
    with card("Expenditure Analysis", suffix="Unavailable"):
        st.error(f"Could not build the expenditure forecast: {message}")


__all__ = ["PAGE_TITLE", "render_error", "render_page"]
