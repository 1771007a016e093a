"""Turn raw forecast response bodies into a WeatherResult or a typed error."""
from __future__ import annotations
import logging
from typing import Optional
from pydantic import ValidationError
from .models import (
    MalformedResponseError,
    RemoteRejectedError,
    ServiceError,
    WeatherResult,
)

LOGGER = logging.getLogger(__name__)

# Longest body excerpt carried in log lines and error messages
BODY_EXCERPT_CHARS = 200


def _excerpt(text: str) -> str:
    if len(text) <= BODY_EXCERPT_CHARS:
        return text
    return text[:BODY_EXCERPT_CHARS] + "..."


def decode_response(text: str, *, status_code: Optional[int] = None) -> WeatherResult:
    """
    Decode a forecast response body.

    The body is validated against the success schema first. If that fails,
    it is validated against the service error schema and the service's
    reason is raised. A body matching neither is a contract break.

    Args:
        text: Raw response body.
        status_code: HTTP status of the response, carried on raised errors.

    Returns:
        The decoded WeatherResult.

    Raises:
        RemoteRejectedError: The body is a service error payload.
        MalformedResponseError: The body matches neither schema.
    """
    try:
        return WeatherResult.model_validate_json(text)
    except ValidationError as exc:
        success_error = exc

    try:
        rejection = ServiceError.model_validate_json(text)
    except ValidationError:
        LOGGER.error(
            "Response (status %s) matched neither the forecast nor the error schema: %s",
            status_code,
            _excerpt(text),
        )
        raise MalformedResponseError(
            f"Unexpected response body from weather service: {_excerpt(text)}",
            body=text,
            status_code=status_code,
        ) from success_error

    LOGGER.warning("Weather service rejected request: %s", rejection.reason)
    raise RemoteRejectedError(rejection.reason, status_code=status_code)


__all__ = ["decode_response"]
