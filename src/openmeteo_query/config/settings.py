"""Centralized configuration using Pydantic Settings.

Endpoints, timeouts and the optional geocoding API key are loaded from
``OPENMETEO_*`` environment variables or a ``.env`` file. Every field has a
working default, so an empty environment yields a usable configuration.

Example:
    >>> from openmeteo_query.config import get_settings
    >>> print(get_settings().forecast_url)
"""

from __future__ import annotations

import logging
import threading
from typing import Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..constants import (
    DEFAULT_MAX_WORKERS,
    DEFAULT_TIMEOUT_SECONDS,
    FORECAST_ENDPOINT,
    GEOCODE_ENDPOINT,
)

LOGGER = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Client configuration.

    Example .env file:
        OPENMETEO_FORECAST_URL=https://api.open-meteo.com/v1/forecast
        OPENMETEO_GEOCODE_API_KEY=your_api_key
        OPENMETEO_TIMEOUT_SECONDS=15
    """

    model_config = SettingsConfigDict(
        env_prefix="OPENMETEO_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    forecast_url: str = Field(
        default=FORECAST_ENDPOINT,
        description="Forecast endpoint URL",
    )
    geocode_url: str = Field(
        default=GEOCODE_ENDPOINT,
        description="Place-name search endpoint URL",
    )
    geocode_api_key: Optional[str] = Field(
        default=None,
        description="API key for the geocoding service, sent as 'api_key' when set",
    )
    timeout_seconds: float = Field(
        default=DEFAULT_TIMEOUT_SECONDS,
        gt=0,
        description="Per-request timeout in seconds",
    )
    max_workers: int = Field(
        default=DEFAULT_MAX_WORKERS,
        ge=1,
        description="Thread pool size used when executing several queries at once",
    )

    @field_validator("forecast_url", "geocode_url")
    @classmethod
    def validate_endpoint_url(cls, v: str) -> str:
        """Ensure endpoint starts with http:// or https://."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("Endpoint URL must start with http:// or https://")
        return v.rstrip("/")


# Lazy initialization - only create settings when accessed
_settings: Optional[Settings] = None
_settings_lock = threading.Lock()


def get_settings() -> Settings:
    """Get or create the Settings singleton (thread-safe).

    Returns:
        Settings instance loaded from environment variables/.env file.

    Raises:
        ValidationError: If a configured value is invalid.
    """
    global _settings

    if _settings is not None:
        return _settings

    with _settings_lock:
        # Double-check after acquiring lock
        if _settings is None:
            LOGGER.debug("Initializing Settings from environment variables and .env file")
            try:
                _settings = Settings()
            except ValidationError as e:
                LOGGER.error("Configuration validation failed: %s", e)
                raise

    return _settings


def reset_settings() -> None:
    """Drop the cached Settings so the next access reloads the environment."""
    global _settings
    with _settings_lock:
        _settings = None


__all__ = ["Settings", "get_settings", "reset_settings"]
