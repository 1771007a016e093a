"""Configuration management for the Open-Meteo query client."""

from __future__ import annotations

from .settings import Settings, get_settings, reset_settings

__all__ = ["Settings", "get_settings", "reset_settings"]
