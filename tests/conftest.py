"""Shared pytest fixtures for the Open-Meteo query client tests."""

from __future__ import annotations

import json
from typing import Any, Dict, Generator, List, Optional

import pytest

from openmeteo_query.config import Settings, reset_settings
from openmeteo_query.http import HTTPResponse

ENV_VARS = [
    "OPENMETEO_FORECAST_URL",
    "OPENMETEO_GEOCODE_URL",
    "OPENMETEO_GEOCODE_API_KEY",
    "OPENMETEO_TIMEOUT_SECONDS",
    "OPENMETEO_MAX_WORKERS",
]


class MockHTTPClient:
    """Fake transport returning queued responses in order and recording calls."""

    def __init__(self, responses: Optional[List[Any]] = None):
        self.responses = list(responses or [])
        self.calls: List[Dict[str, Any]] = []

    def get(
        self,
        url: str,
        params: Optional[Dict[str, str]],
        timeout: float,
    ) -> HTTPResponse:
        self.calls.append({"url": url, "params": params, "timeout": timeout})
        if not self.responses:
            raise AssertionError(f"Unexpected request to {url}")
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


def json_response(payload: Any, status_code: int = 200) -> HTTPResponse:
    """Build an HTTPResponse with a JSON-encoded body."""
    return HTTPResponse(status_code=status_code, text=json.dumps(payload))


MINIMAL_FORECAST: Dict[str, Any] = {
    "latitude": 51.0,
    "longitude": 0.0,
    "generationtime_ms": 0.21,
    "utc_offset_seconds": 0,
    "timezone": "GMT",
    "timezone_abbreviation": "GMT",
    "elevation": 31.0,
}


@pytest.fixture
def clean_env(monkeypatch) -> Generator[None, None, None]:
    """Remove all OPENMETEO_* env vars and the cached settings."""
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def settings(clean_env) -> Settings:
    """Default settings, ignoring any .env file in the working directory."""
    return Settings(_env_file=None)


@pytest.fixture
def minimal_forecast() -> Dict[str, Any]:
    """Smallest success body the forecast service returns."""
    return dict(MINIMAL_FORECAST)


@pytest.fixture
def mock_http_client():
    """Factory for MockHTTPClient instances."""
    return MockHTTPClient


@pytest.fixture(name="json_response")
def json_response_fixture():
    """Factory for JSON HTTPResponse objects."""
    return json_response
