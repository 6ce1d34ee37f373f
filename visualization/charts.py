"""Plotly chart builders for the forecast dashboard."""

from __future__ import annotations

import math
from typing import Sequence

import plotly.graph_objects as go

from core.models import ForecastResult

from .theme import theme_tokens

TOKENS = theme_tokens()

CHART_TITLE = "Savings and Expenditure Over Time"
ACTUAL_LABEL = "Actual Expenditure"
PREDICTED_LABEL = "Predicted Expenditure"

__all__ = [
    "ACTUAL_LABEL",
    "CHART_TITLE",
    "PREDICTED_LABEL",
    "build_forecast_chart",
    "build_loss_chart",
]


def _empty_plotly_figure(message: str) -> go.Figure:
    fig = go.Figure()
    fig.update_layout(
        annotations=[
            dict(
                text=message,
                x=0.5,
                y=0.5,
                xref="paper",
                yref="paper",
                showarrow=False,
                font=dict(color=TOKENS.neutral_grey, size=14, family=TOKENS.label_font),
            )
        ],
        xaxis=dict(visible=False),
        yaxis=dict(visible=False),
        margin=dict(l=0, r=0, t=20, b=0),
        plot_bgcolor="rgba(0,0,0,0)",
        paper_bgcolor="rgba(0,0,0,0)",
    )
    return fig


def build_forecast_chart(
    result: ForecastResult | None,
    currency_symbol: str | None = "£",
) -> go.Figure:
    """Plot actual against predicted expenditure, one point per record.

    Points are positioned by record index so records sharing a date label
    stay distinct; labels are only used as tick text and in the hover.
    Values are plotted exactly as the pipeline produced them.
    """

    if result is None or not result.labels:
        return _empty_plotly_figure("No expenditure data to display.")

    currency_prefix = currency_symbol or ""
    hover_template = f"%{{customdata}}: {currency_prefix}%{{y:,.2f}}"
    labels = list(result.labels)
    positions = list(range(len(labels)))
    tick_step = max(1, math.ceil(len(labels) / TOKENS.max_x_ticks))
    tick_positions = positions[::tick_step]

    fig = go.Figure()
    fig.add_trace(
        go.Scatter(
            x=positions,
            customdata=labels,
            y=list(result.actual),
            mode="lines+markers",
            name=ACTUAL_LABEL,
            line=dict(color=TOKENS.actual_color, width=2.5, shape="spline", smoothing=TOKENS.line_smoothing),
            marker=dict(size=6, color=TOKENS.actual_color, line=dict(color=TOKENS.neutral_white, width=1)),
            hovertemplate=hover_template,
        )
    )
    fig.add_trace(
        go.Scatter(
            x=positions,
            customdata=labels,
            y=list(result.predicted),
            mode="lines+markers",
            name=PREDICTED_LABEL,
            line=dict(
                color=TOKENS.predicted_color,
                width=2.5,
                dash="dash",
                shape="spline",
                smoothing=TOKENS.line_smoothing,
            ),
            marker=dict(size=5, color=TOKENS.predicted_color, line=dict(color=TOKENS.neutral_white, width=1)),
            hovertemplate=hover_template,
        )
    )

    fig.update_layout(
        title=dict(text=CHART_TITLE, font=dict(size=TOKENS.title_size, family=TOKENS.label_font)),
        xaxis_title="Date",
        yaxis_title="Expenditure",
        margin=dict(l=0, r=0, t=60, b=0),
        hovermode="x unified",
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1.0),
        xaxis=dict(
            tickmode="array",
            tickvals=tick_positions,
            ticktext=[labels[index] for index in tick_positions],
            showgrid=False,
        ),
        yaxis=dict(rangemode="tozero", showgrid=True, gridcolor=TOKENS.neutral_background, zeroline=False),
        font=dict(color=TOKENS.label_color, size=TOKENS.label_size, family=TOKENS.label_font),
        plot_bgcolor="rgba(0,0,0,0)",
        paper_bgcolor="rgba(0,0,0,0)",
    )
    return fig


def build_loss_chart(loss_history: Sequence[float]) -> go.Figure:
    """Plot training loss per epoch; epoch 0 is the untrained model."""

    if not loss_history:
        return _empty_plotly_figure("No training history available.")

    fig = go.Figure()
    fig.add_trace(
        go.Scatter(
            x=list(range(len(loss_history))),
            y=list(loss_history),
            mode="lines",
            name="Training loss",
            line=dict(color=TOKENS.loss_color, width=2),
            hovertemplate="Epoch %{x}<br>MSE %{y:.6f}<extra></extra>",
        )
    )
    fig.update_layout(
        xaxis_title="Epoch",
        yaxis_title="Mean squared error",
        margin=dict(l=0, r=0, t=20, b=0),
        showlegend=False,
        xaxis=dict(showgrid=False),
        yaxis=dict(rangemode="tozero", showgrid=True, gridcolor=TOKENS.neutral_background, zeroline=False),
        font=dict(color=TOKENS.label_color, size=TOKENS.label_size, family=TOKENS.label_font),
        plot_bgcolor="rgba(0,0,0,0)",
        paper_bgcolor="rgba(0,0,0,0)",
    )
    return fig
