"""Page modules for the forecast Streamlit application."""

from .dashboard import render_error as render_dashboard_error
from .dashboard import render_page as render_dashboard_page

__all__ = [
    "render_dashboard_error",
    "render_dashboard_page",
]
