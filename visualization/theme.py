"""Shared Plotly theme tokens for the forecast dashboard."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ThemeTokens:
    label_color: str = "#475569"
    label_font: str = "Inter"
    label_size: int = 12
    title_size: int = 16
    actual_color: str = "#3B82F6"
    predicted_color: str = "#EF4444"
    loss_color: str = "#9333EA"
    line_smoothing: float = 0.3
    max_x_ticks: int = 10
    neutral_grey: str = "#94A3B8"
    neutral_white: str = "#FFFFFF"
    neutral_background: str = "rgba(148, 163, 184, 0.25)"


_TOKENS = ThemeTokens()


def theme_tokens() -> ThemeTokens:
    """Return the shared visualization tokens."""

    return _TOKENS
