"""Response records and custom exceptions for the Open-Meteo query client."""
from __future__ import annotations
from typing import Dict, List, Optional
from pydantic import BaseModel, Field

FloatSeries = List[Optional[float]]
IntSeries = List[Optional[int]]
UnitLabels = Dict[str, str]


class GeoCandidate(BaseModel):
    """One candidate location returned by the geocoding service.

    Attributes:
        lat: Latitude in decimal degrees (sent as a string by the service).
        lon: Longitude in decimal degrees (sent as a string by the service).
        display_name: Human-readable label for the match, when provided.
    """

    lat: float
    lon: float
    display_name: Optional[str] = None

    model_config = {"frozen": True, "extra": "ignore"}


class CurrentWeather(BaseModel):
    """Current conditions block (``current_weather=true``)."""

    temperature: float
    windspeed: Optional[float] = None
    winddirection: Optional[float] = None
    weathercode: Optional[int] = None
    is_day: Optional[int] = None
    time: Optional[str] = None

    model_config = {"frozen": True, "extra": "ignore"}


class Hourly(BaseModel):
    """Hourly readings as parallel sequences, one slot per hour in ``time``.

    Entries are ``None`` where the service has no data for that hour.
    """

    time: List[str]
    temperature_2m: FloatSeries = Field(default_factory=list)
    relativehumidity_2m: FloatSeries = Field(default_factory=list)
    dewpoint_2m: FloatSeries = Field(default_factory=list)
    apparent_temperature: FloatSeries = Field(default_factory=list)
    precipitation_probability: FloatSeries = Field(default_factory=list)
    precipitation: FloatSeries = Field(default_factory=list)
    rain: FloatSeries = Field(default_factory=list)
    showers: FloatSeries = Field(default_factory=list)
    snowfall: FloatSeries = Field(default_factory=list)
    snow_depth: FloatSeries = Field(default_factory=list)
    weathercode: IntSeries = Field(default_factory=list)
    pressure_msl: FloatSeries = Field(default_factory=list)
    surface_pressure: FloatSeries = Field(default_factory=list)
    cloudcover: FloatSeries = Field(default_factory=list)
    cloudcover_low: FloatSeries = Field(default_factory=list)
    cloudcover_mid: FloatSeries = Field(default_factory=list)
    cloudcover_high: FloatSeries = Field(default_factory=list)
    visibility: FloatSeries = Field(default_factory=list)
    evapotranspiration: FloatSeries = Field(default_factory=list)
    et0_fao_evapotranspiration: FloatSeries = Field(default_factory=list)
    vapor_pressure_deficit: FloatSeries = Field(default_factory=list)
    windspeed_10m: FloatSeries = Field(default_factory=list)
    windspeed_80m: FloatSeries = Field(default_factory=list)
    windspeed_120m: FloatSeries = Field(default_factory=list)
    windspeed_180m: FloatSeries = Field(default_factory=list)
    winddirection_10m: FloatSeries = Field(default_factory=list)
    winddirection_80m: FloatSeries = Field(default_factory=list)
    winddirection_120m: FloatSeries = Field(default_factory=list)
    winddirection_180m: FloatSeries = Field(default_factory=list)
    windgusts_10m: FloatSeries = Field(default_factory=list)
    temperature_80m: FloatSeries = Field(default_factory=list)
    temperature_120m: FloatSeries = Field(default_factory=list)
    temperature_180m: FloatSeries = Field(default_factory=list)
    soil_temperature_0cm: FloatSeries = Field(default_factory=list)
    soil_temperature_6cm: FloatSeries = Field(default_factory=list)
    soil_temperature_18cm: FloatSeries = Field(default_factory=list)
    soil_temperature_54cm: FloatSeries = Field(default_factory=list)
    soil_moisture_0_1cm: FloatSeries = Field(default_factory=list)
    soil_moisture_1_3cm: FloatSeries = Field(default_factory=list)
    soil_moisture_3_9cm: FloatSeries = Field(default_factory=list)
    soil_moisture_9_27cm: FloatSeries = Field(default_factory=list)
    soil_moisture_27_81cm: FloatSeries = Field(default_factory=list)

    model_config = {"frozen": True, "extra": "ignore"}


class Daily(BaseModel):
    """Daily aggregates, one slot per day in ``time``."""

    time: List[str]
    weathercode: IntSeries = Field(default_factory=list)
    temperature_2m_max: FloatSeries = Field(default_factory=list)
    temperature_2m_min: FloatSeries = Field(default_factory=list)
    apparent_temperature_max: FloatSeries = Field(default_factory=list)
    apparent_temperature_min: FloatSeries = Field(default_factory=list)
    sunrise: List[Optional[str]] = Field(default_factory=list)
    sunset: List[Optional[str]] = Field(default_factory=list)
    uv_index_max: FloatSeries = Field(default_factory=list)
    uv_index_clear_sky_max: FloatSeries = Field(default_factory=list)
    precipitation_sum: FloatSeries = Field(default_factory=list)
    rain_sum: FloatSeries = Field(default_factory=list)
    showers_sum: FloatSeries = Field(default_factory=list)
    snowfall_sum: FloatSeries = Field(default_factory=list)
    precipitation_hours: FloatSeries = Field(default_factory=list)
    precipitation_probability_max: FloatSeries = Field(default_factory=list)
    windspeed_10m_max: FloatSeries = Field(default_factory=list)
    windgusts_10m_max: FloatSeries = Field(default_factory=list)
    winddirection_10m_dominant: FloatSeries = Field(default_factory=list)
    shortwave_radiation_sum: FloatSeries = Field(default_factory=list)
    et0_fao_evapotranspiration: FloatSeries = Field(default_factory=list)

    model_config = {"frozen": True, "extra": "ignore"}


class WeatherResult(BaseModel):
    """Successful forecast response.

    The optional blocks are present only when the matching option was
    requested on the query builder.

    Attributes:
        latitude: Grid-cell latitude the service answered for.
        longitude: Grid-cell longitude the service answered for.
        generationtime_ms: Server-side generation time.
        utc_offset_seconds: Offset of the response time zone.
        timezone: Time zone identifier of the response.
        timezone_abbreviation: Short time zone label.
        elevation: Grid-cell elevation in metres.
        current_weather: Current conditions block.
        hourly_units: Unit label per hourly field.
        hourly: Hourly readings.
        daily_units: Unit label per daily field.
        daily: Daily aggregates.
    """

    latitude: float
    longitude: float
    generationtime_ms: float
    utc_offset_seconds: int
    timezone: str
    timezone_abbreviation: str
    elevation: Optional[float] = None
    current_weather: Optional[CurrentWeather] = None
    hourly_units: Optional[UnitLabels] = None
    hourly: Optional[Hourly] = None
    daily_units: Optional[UnitLabels] = None
    daily: Optional[Daily] = None

    model_config = {"frozen": True, "extra": "ignore"}


class ServiceError(BaseModel):
    """Error payload returned by the weather service for a rejected request."""

    error: bool = True
    reason: str

    model_config = {"frozen": True, "extra": "ignore"}


class OpenMeteoError(Exception):
    """Base exception for all Open-Meteo query client errors."""
    pass


class QueryConfigError(OpenMeteoError):
    """Illegal builder step, detected before any network call."""
    pass


class AlreadySetError(QueryConfigError):
    """An option that may be set once per chain was set a second time."""

    def __init__(self, option: str) -> None:
        super().__init__(f"{option} is already set")
        self.option = option


class LocationNotSetError(QueryConfigError):
    """A location-dependent option was used before the location was fixed."""

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(
            message
            or "Location is not set. Use set_coordinates() or resolve_location() first."
        )


class TimeZoneNotSetError(QueryConfigError):
    """Daily variables were requested before a time zone was set."""

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(
            message or "Set a time zone with set_time_zone() before enabling daily variables."
        )


class GeocodingError(OpenMeteoError):
    """Base exception for place-name lookup failures."""
    pass


class LookupFailedError(GeocodingError):
    """Geocoding request failed in transport or returned a non-200 status."""

    def __init__(self, message: str, *, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class NoMatchError(GeocodingError):
    """Geocoding returned no candidates for the place name."""

    def __init__(self, place_name: str) -> None:
        super().__init__(f"No coordinates found for '{place_name}'")
        self.place_name = place_name


class GeocodeParseError(GeocodingError):
    """Geocoding response could not be interpreted as coordinates."""
    pass


class TransportError(OpenMeteoError):
    """The HTTP transport failed before a response body was received."""

    def __init__(self, message: str, *, url: Optional[str] = None) -> None:
        super().__init__(message)
        self.url = url


class TransportTimeoutError(TransportError):
    """The HTTP transport gave up waiting for the remote service."""
    pass


class RemoteRejectedError(OpenMeteoError):
    """The weather service understood the request and declined it."""

    def __init__(self, reason: str, *, status_code: Optional[int] = None) -> None:
        super().__init__(reason)
        self.reason = reason
        self.status_code = status_code


class MalformedResponseError(OpenMeteoError):
    """Response body matched neither the success nor the error schema."""

    def __init__(
        self,
        message: str,
        *,
        body: Optional[str] = None,
        status_code: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.body = body
        self.status_code = status_code


__all__ = [
    "GeoCandidate",
    "CurrentWeather",
    "Hourly",
    "Daily",
    "WeatherResult",
    "ServiceError",
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
]
