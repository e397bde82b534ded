"""Utility helpers for bytes-lit."""

from .logging import configure_logging

__all__ = ["configure_logging"]
