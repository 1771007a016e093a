"""Shared helpers for the Open-Meteo query client."""

from __future__ import annotations

from .logging_config import configure_logging

__all__ = ["configure_logging"]
