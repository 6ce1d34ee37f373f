"""Streamlit application package for the forecast dashboard."""

from .main import main

__all__ = ["main"]
