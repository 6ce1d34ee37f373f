"""Error types raised by the forecast pipeline."""

from __future__ import annotations

__all__ = ["InvalidInputError"]


class InvalidInputError(ValueError):
    """Raised when records or pipeline parameters cannot produce a forecast."""
