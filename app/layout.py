"""Shared layout primitives for the forecast dashboard."""

from __future__ import annotations

from contextlib import contextmanager

import streamlit as st


def inject_css() -> None:
    """Inject global CSS tokens and card styling into the Streamlit app."""

    st.markdown(
        """
        <style>
          :root {
            --gap: 16px;
            --radius: 12px;
            --card-bg: #FFFFFF;
            --border: #E6EAF2;
            --shadow: 0 1px 2px rgba(16, 24, 40, 0.05), 0 1px 3px rgba(16, 24, 40, 0.06);
          }

          body, [data-testid="stAppViewContainer"] > .main {
            background: #F3F4F6;
          }

          .block-container {
            max-width: 1200px;
            padding-top: 2.5rem;
            padding-bottom: 4rem;
          }

          .fc-title {
            text-align: center;
            font-size: 1.9rem;
            font-weight: 700;
            color: #111827;
            margin-bottom: 1.5rem;
          }

          .fc-card-anchor {
            display: none;
          }

          [data-testid="stVerticalBlock"]:has(> .fc-card-anchor) {
            background: var(--card-bg);
            border: 1px solid var(--border);
            border-radius: var(--radius);
            box-shadow: var(--shadow);
            padding: 16px;
            margin-bottom: var(--gap);
            display: flex;
            flex-direction: column;
            gap: 12px;
          }

          .fc-card__head {
            display: flex;
            align-items: center;
            justify-content: space-between;
            gap: 12px;
            font-weight: 600;
            color: #111827;
            margin-bottom: 4px;
            flex-wrap: wrap;
          }

          .fc-card__title {
            font-size: 1.3rem;
          }

          .fc-chip {
            font-size: 12px;
            padding: 2px 8px;
            border-radius: 999px;
            border: 1px solid #D6DEFF;
            background: #F0F4FF;
            color: #3346FF;
            white-space: nowrap;
          }

          .fc-forecast {
            font-size: 1.1rem;
            color: #1F2937;
          }

          .fc-forecast strong {
            color: #EF4444;
          }

          @media (min-width: 1200px) {
            [data-testid="stVerticalBlock"]:has(> .fc-card-anchor) {
              padding: 24px;
            }
            :root {
              --gap: 24px;
            }
          }
        </style>
        """,
        unsafe_allow_html=True,
    )


@contextmanager
def card(title: str, suffix: str | None = None):
    """Render content inside a reusable dashboard card."""

    chip_html = f'<span class="fc-chip">{suffix}</span>' if suffix else ""
    container = st.container()
    with container:
        st.markdown('<div class="fc-card-anchor"></div>', unsafe_allow_html=True)
        st.markdown(
            f'<div class="fc-card__head"><span class="fc-card__title">{title}</span>'
            f'{chip_html}</div>',
            unsafe_allow_html=True,
        )
        yield


def render_title(text: str) -> None:
    st.markdown(f"<div class='fc-title'>{text}</div>", unsafe_allow_html=True)


__all__ = [
    "card",
    "inject_css",
    "render_title",
]
