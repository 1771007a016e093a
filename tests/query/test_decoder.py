"""Unit tests for forecast response decoding."""

from __future__ import annotations

import json
import logging

import pytest

from openmeteo_query.decoder import decode_response
from openmeteo_query.models import (
    MalformedResponseError,
    RemoteRejectedError,
    WeatherResult,
)


class TestDecodeSuccess:
    """Bodies matching the forecast schema."""

    def test_minimal_body(self, minimal_forecast) -> None:
        """Required fields only: every optional block is absent."""
        result = decode_response(json.dumps(minimal_forecast))
        assert isinstance(result, WeatherResult)
        assert result.latitude == pytest.approx(51.0)
        assert result.timezone == "GMT"
        assert result.current_weather is None
        assert result.hourly_units is None
        assert result.hourly is None
        assert result.daily_units is None
        assert result.daily is None

    def test_hourly_block_keeps_missing_entries(self, minimal_forecast) -> None:
        """Per-hour gaps decode as None rather than failing."""
        body = dict(
            minimal_forecast,
            hourly_units={"time": "iso8601", "temperature_2m": "°C"},
            hourly={
                "time": ["2023-09-01T00:00", "2023-09-01T01:00", "2023-09-01T02:00"],
                "temperature_2m": [14.1, None, 13.2],
                "weathercode": [3, 2, None],
            },
        )
        result = decode_response(json.dumps(body))
        assert result.hourly is not None
        assert result.hourly.temperature_2m == [14.1, None, 13.2]
        assert result.hourly.weathercode == [3, 2, None]
        assert result.hourly_units["temperature_2m"] == "°C"
        assert result.daily is None

    def test_daily_block(self, minimal_forecast) -> None:
        """Daily aggregates decode including sunrise/sunset strings."""
        body = dict(
            minimal_forecast,
            daily_units={"temperature_2m_max": "°C"},
            daily={
                "time": ["2023-09-01"],
                "temperature_2m_max": [21.5],
                "sunrise": ["2023-09-01T06:14"],
                "sunset": ["2023-09-01T19:48"],
            },
        )
        result = decode_response(json.dumps(body))
        assert result.daily.sunrise == ["2023-09-01T06:14"]
        assert result.daily.temperature_2m_max == [21.5]

    def test_result_is_immutable(self, minimal_forecast) -> None:
        """Decoded records are frozen values."""
        result = decode_response(json.dumps(minimal_forecast))
        with pytest.raises(Exception):
            result.latitude = 0.0  # type: ignore[misc]


class TestDecodeRejection:
    """Bodies matching the service error schema."""

    def test_reason_is_surfaced_verbatim(self) -> None:
        """The service's reason becomes the error message."""
        reason = "Parameter 'start_date' is out of allowed range"
        with pytest.raises(RemoteRejectedError) as exc_info:
            decode_response(json.dumps({"error": True, "reason": reason}), status_code=400)
        assert exc_info.value.reason == reason
        assert str(exc_info.value) == reason
        assert exc_info.value.status_code == 400

    def test_rejection_is_logged_as_warning(self, caplog) -> None:
        """Rejections are logged at WARNING."""
        with caplog.at_level(logging.WARNING, logger="openmeteo_query.decoder"):
            with pytest.raises(RemoteRejectedError):
                decode_response('{"error": true, "reason": "nope"}')
        assert "nope" in caplog.text


class TestDecodeMalformed:
    """Bodies matching neither schema."""

    @pytest.mark.parametrize(
        "body",
        [
            "",
            "not json",
            "[]",
            '{"latitude": 51.0}',
            '{"error": true}',
            '{"latitude": "north", "longitude": 0, "generationtime_ms": 1,'
            ' "utc_offset_seconds": 0, "timezone": "GMT", "timezone_abbreviation": "GMT"}',
        ],
        ids=["empty", "not-json", "array", "partial", "error-without-reason", "bad-type"],
    )
    def test_raises_malformed(self, body: str) -> None:
        """Contract breaks never decode to a default value."""
        with pytest.raises(MalformedResponseError) as exc_info:
            decode_response(body, status_code=200)
        assert exc_info.value.body == body
        assert exc_info.value.status_code == 200

    def test_malformed_is_logged_as_error(self, caplog) -> None:
        """Contract breaks are logged at ERROR."""
        with caplog.at_level(logging.ERROR, logger="openmeteo_query.decoder"):
            with pytest.raises(MalformedResponseError):
                decode_response("<html>oops</html>")
        assert "neither" in caplog.text

    def test_long_bodies_are_truncated_in_message(self) -> None:
        """The message carries an excerpt; the full body stays on the error."""
        body = "x" * 1000
        with pytest.raises(MalformedResponseError) as exc_info:
            decode_response(body)
        assert len(str(exc_info.value)) < 300
        assert exc_info.value.body == body
