"""Immutable builder for Open-Meteo forecast queries."""
from __future__ import annotations
import datetime as dt
import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field, replace
from typing import Iterable, List, Optional, Tuple, Union
from .config import Settings, get_settings
from .constants import (
    DAILY_VARIABLES,
    DEFAULT_TIMEOUT_SECONDS,
    FORECAST_ENDPOINT,
    HOURLY_VARIABLES,
)
from .decoder import decode_response
from .geocoding import Geocoder
from .http import HTTPClient, HTTPResponse, RequestsHTTPClient
from .models import (
    AlreadySetError,
    LocationNotSetError,
    OpenMeteoError,
    TimeZoneNotSetError,
    WeatherResult,
)
from .timezones import TimeZone, coerce_time_zone

LOGGER = logging.getLogger(__name__)

DateLike = Union[str, dt.date]
QueryOutcome = Union[WeatherResult, OpenMeteoError]


def _format_date(value: DateLike) -> str:
    if isinstance(value, dt.date):
        return value.isoformat()
    return value


@dataclass(frozen=True)
class QueryBuilder:
    """
    Step-by-step assembly of a forecast request.

    Every step returns a new builder and leaves the receiver untouched, so a
    partially configured builder can be branched. Options that may be set
    only once raise AlreadySetError on a second attempt; options that need a
    location raise LocationNotSetError until coordinates are fixed.

    Example:
        >>> result = (
        ...     QueryBuilder.new()
        ...     .resolve_location("London")
        ...     .set_forecast_days(10)
        ...     .enable_current_conditions()
        ...     .set_time_zone(TimeZone.EUROPE_LONDON)
        ...     .enable_hourly_variables()
        ...     .enable_daily_variables()
        ...     .execute()
        ... )
    """

    base_url: str = FORECAST_ENDPOINT
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    params: Tuple[Tuple[str, str], ...] = ()
    location_set: bool = False
    time_zone_set: bool = False
    start_date_set: bool = False
    end_date_set: bool = False
    timeout: float = field(default=DEFAULT_TIMEOUT_SECONDS, compare=False)
    http_client: Optional[HTTPClient] = field(default=None, compare=False, repr=False)
    geocoder: Optional[Geocoder] = field(default=None, compare=False, repr=False)

    @classmethod
    def new(
        cls,
        *,
        settings: Optional[Settings] = None,
        http_client: Optional[HTTPClient] = None,
        geocoder: Optional[Geocoder] = None,
    ) -> "QueryBuilder":
        """Create an empty builder configured from ``settings``."""
        settings = settings or get_settings()
        if geocoder is None:
            geocoder = Geocoder(
                settings.geocode_url,
                api_key=settings.geocode_api_key,
                http_client=http_client,
                timeout=settings.timeout_seconds,
            )
        return cls(
            base_url=settings.forecast_url,
            timeout=settings.timeout_seconds,
            http_client=http_client,
            geocoder=geocoder,
        )

    @property
    def url(self) -> str:
        """Request URL: base endpoint plus ``key=value`` pairs joined by ``&``."""
        parts: List[Tuple[str, str]] = []
        if self.location_set:
            parts.append(("latitude", str(self.latitude)))
            parts.append(("longitude", str(self.longitude)))
        parts.extend(self.params)
        query = "&".join(f"{key}={value}" for key, value in parts)
        return f"{self.base_url}?{query}"

    def _append(self, key: str, value: str, **flags: bool) -> "QueryBuilder":
        return replace(self, params=self.params + ((key, value),), **flags)

    def _check_location(self) -> None:
        if not self.location_set:
            raise LocationNotSetError()

    # Location

    def set_coordinates(self, lat: float, lon: float) -> "QueryBuilder":
        """Fix the query location in decimal degrees."""
        if self.location_set:
            raise AlreadySetError("Location")
        return replace(
            self,
            latitude=float(lat),
            longitude=float(lon),
            location_set=True,
        )

    def resolve_location(self, place_name: str) -> "QueryBuilder":
        """
        Fix the query location by looking up a place name.

        The first geocoding candidate wins.

        Raises:
            AlreadySetError: Location is already fixed (checked before lookup).
            LookupFailedError: Transport failure or non-200 from the geocoder.
            NoMatchError: No candidates for ``place_name``.
            GeocodeParseError: Geocoder body could not be read as coordinates.
        """
        if self.location_set:
            raise AlreadySetError("Location")
        geocoder = self.geocoder or Geocoder(http_client=self.http_client, timeout=self.timeout)
        best = geocoder.first_match(place_name)
        return self.set_coordinates(best.lat, best.lon)

    # Date range

    def set_start_date(self, start_date: DateLike) -> "QueryBuilder":
        """Set the first day of the range (``YYYY-MM-DD``, checked by the service)."""
        if self.start_date_set:
            raise AlreadySetError("Start date")
        self._check_location()
        return self._append("start_date", _format_date(start_date), start_date_set=True)

    def set_end_date(self, end_date: DateLike) -> "QueryBuilder":
        """Set the last day of the range.

        A start date is not required here; the service rejects an end date
        without one when the request is executed.
        """
        if self.end_date_set:
            raise AlreadySetError("End date")
        self._check_location()
        return self._append("end_date", _format_date(end_date), end_date_set=True)

    # Location-dependent options

    def enable_current_conditions(self) -> "QueryBuilder":
        self._check_location()
        return self._append("current_weather", "true")

    def set_past_days(self, past_days: int) -> "QueryBuilder":
        self._check_location()
        return self._append("past_days", str(int(past_days)))

    def set_forecast_days(self, forecast_days: int) -> "QueryBuilder":
        # The horizon limit is enforced by the service
        self._check_location()
        return self._append("forecast_days", str(int(forecast_days)))

    # Variable catalogs

    def enable_hourly_variables(self) -> "QueryBuilder":
        """Request every hourly variable. Does not require a location."""
        return self._append("hourly", ",".join(HOURLY_VARIABLES))

    def enable_daily_variables(self) -> "QueryBuilder":
        """Request every daily variable. Requires a time zone."""
        if not self.time_zone_set:
            raise TimeZoneNotSetError()
        return self._append("daily", ",".join(DAILY_VARIABLES))

    def set_time_zone(self, time_zone: Union[TimeZone, str]) -> "QueryBuilder":
        """Set the zone used for timestamps and daily aggregation."""
        if self.time_zone_set:
            raise AlreadySetError("Time zone")
        zone = coerce_time_zone(time_zone)
        return self._append("timezone", zone.query_value, time_zone_set=True)

    # Request

    def _get(self, url: str) -> HTTPResponse:
        if self.http_client is not None:
            return self.http_client.get(url, None, self.timeout)
        with RequestsHTTPClient() as client:
            return client.get(url, None, self.timeout)

    def execute(self) -> WeatherResult:
        """
        Send the query and decode the response.

        Returns:
            The decoded WeatherResult.

        Raises:
            LocationNotSetError: No coordinates were set.
            TransportError: The request failed before a body was received.
            RemoteRejectedError: The service declined the request.
            MalformedResponseError: The body matched neither response schema.
        """
        if not self.location_set:
            raise LocationNotSetError("Location is not set; a forecast request needs coordinates.")
        url = self.url
        LOGGER.debug("Requesting forecast: %s", url)
        response = self._get(url)
        return decode_response(response.text, status_code=response.status_code)


def execute_many(
    builders: Iterable[QueryBuilder],
    *,
    max_workers: Optional[int] = None,
) -> List[QueryOutcome]:
    """
    Execute independent query chains concurrently.

    Args:
        builders: Configured builders to execute.
        max_workers: Thread pool size (default: ``Settings.max_workers``).

    Returns:
        One entry per builder in input order: the WeatherResult, or the
        OpenMeteoError raised by that builder's ``execute``.
    """
    pending = list(builders)
    if not pending:
        return []

    workers = max(1, max_workers or get_settings().max_workers)
    outcomes: List[Optional[QueryOutcome]] = [None] * len(pending)

    with ThreadPoolExecutor(max_workers=min(workers, len(pending))) as executor:
        futures = {executor.submit(builder.execute): index for index, builder in enumerate(pending)}
        for future in as_completed(futures):
            index = futures[future]
            try:
                outcomes[index] = future.result()
            except OpenMeteoError as exc:
                LOGGER.error("Query %d (%s) failed: %s", index, pending[index].url, exc)
                outcomes[index] = exc

    return outcomes  # type: ignore[return-value]


__all__ = ["QueryBuilder", "execute_many"]
