"""Application configuration utilities."""

from .logging_config import configure_logging
from .settings import DEFAULT_DATA_PATH, Settings, get_settings, load_settings

__all__ = [
    "DEFAULT_DATA_PATH",
    "Settings",
    "configure_logging",
    "get_settings",
    "load_settings",
]
