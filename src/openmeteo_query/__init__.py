"""Open-Meteo forecast query builder and response decoder.

Example:
    >>> from openmeteo_query import QueryBuilder, TimeZone
    >>> result = (
    ...     QueryBuilder.new()
    ...     .set_coordinates(51.5, -0.12)
    ...     .set_time_zone(TimeZone.EUROPE_LONDON)
    ...     .enable_daily_variables()
    ...     .execute()
    ... )
"""
from __future__ import annotations
from .builder import QueryBuilder, execute_many
from .config import Settings, get_settings, reset_settings
from .constants import (
    DAILY_VARIABLES,
    FORECAST_ENDPOINT,
    FORECAST_MAX_DAYS,
    GEOCODE_ENDPOINT,
    HOURLY_VARIABLES,
)
from .decoder import decode_response
from .frames import daily_frame, hourly_frame
from .geocoding import Geocoder
from .http import HTTPClient, HTTPResponse, RequestsHTTPClient
from .models import (
    AlreadySetError,
    CurrentWeather,
    Daily,
    GeoCandidate,
    GeocodeParseError,
    GeocodingError,
    Hourly,
    LocationNotSetError,
    LookupFailedError,
    MalformedResponseError,
    NoMatchError,
    OpenMeteoError,
    QueryConfigError,
    RemoteRejectedError,
    ServiceError,
    TimeZoneNotSetError,
    TransportError,
    TransportTimeoutError,
    WeatherResult,
)
from .timezones import TimeZone
from .utils.logging_config import configure_logging

__version__ = "0.1.0"

__all__ = [
    # Builder
    "QueryBuilder",
    "execute_many",
    "TimeZone",
    # Collaborators
    "Geocoder",
    "HTTPClient",
    "HTTPResponse",
    "RequestsHTTPClient",
    "decode_response",
    # Records
    "GeoCandidate",
    "CurrentWeather",
    "Hourly",
    "Daily",
    "WeatherResult",
    "ServiceError",
    "hourly_frame",
    "daily_frame",
    # Exceptions
    "OpenMeteoError",
    "QueryConfigError",
    "AlreadySetError",
    "LocationNotSetError",
    "TimeZoneNotSetError",
    "GeocodingError",
    "LookupFailedError",
    "NoMatchError",
    "GeocodeParseError",
    "TransportError",
    "TransportTimeoutError",
    "RemoteRejectedError",
    "MalformedResponseError",
    # Configuration
    "Settings",
    "get_settings",
    "reset_settings",
    "configure_logging",
    # Constants
    "FORECAST_ENDPOINT",
    "GEOCODE_ENDPOINT",
    "FORECAST_MAX_DAYS",
    "HOURLY_VARIABLES",
    "DAILY_VARIABLES",
]
