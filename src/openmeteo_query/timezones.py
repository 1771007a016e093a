"""Time zones accepted by the forecast service."""
from __future__ import annotations
from enum import Enum
from typing import Union
from urllib.parse import quote


class TimeZone(str, Enum):
    """Closed set of supported zones, each bound to one literal identifier.

    ``GMT`` is the service default and ``AUTO`` lets the service infer the
    zone from the coordinates.
    """

    AMERICA_ANCHORAGE = "America/Anchorage"
    AMERICA_LOS_ANGELES = "America/Los_Angeles"
    AMERICA_DENVER = "America/Denver"
    AMERICA_CHICAGO = "America/Chicago"
    AMERICA_NEW_YORK = "America/New_York"
    AMERICA_SAO_PAULO = "America/Sao_Paulo"
    GMT = "GMT"
    AUTO = "auto"
    EUROPE_LONDON = "Europe/London"
    EUROPE_BERLIN = "Europe/Berlin"
    EUROPE_MOSCOW = "Europe/Moscow"
    AFRICA_CAIRO = "Africa/Cairo"
    ASIA_BANGKOK = "Asia/Bangkok"
    ASIA_SINGAPORE = "Asia/Singapore"
    ASIA_TOKYO = "Asia/Tokyo"
    AUSTRALIA_SYDNEY = "Australia/Sydney"
    PACIFIC_AUCKLAND = "Pacific/Auckland"

    @property
    def query_value(self) -> str:
        """Identifier as it appears in a query string (``/`` -> ``%2F``)."""
        return quote(self.value, safe="")


def coerce_time_zone(zone: Union[TimeZone, str]) -> TimeZone:
    """Return ``zone`` as a TimeZone member.

    Raises:
        ValueError: If ``zone`` is not one of the supported identifiers.
    """
    if isinstance(zone, TimeZone):
        return zone
    try:
        return TimeZone(zone)
    except ValueError:
        supported = ", ".join(member.value for member in TimeZone)
        raise ValueError(f"Unsupported time zone: {zone!r} (expected one of: {supported})") from None


__all__ = ["TimeZone", "coerce_time_zone"]
