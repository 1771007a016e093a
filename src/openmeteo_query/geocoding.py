"""Place-name lookup against the geocoding service."""
from __future__ import annotations
import logging
from typing import Dict, List, Optional
from pydantic import TypeAdapter, ValidationError
from .constants import DEFAULT_TIMEOUT_SECONDS, GEOCODE_ENDPOINT
from .http import HTTPClient, HTTPResponse, RequestsHTTPClient
from .models import (
    GeoCandidate,
    GeocodeParseError,
    LookupFailedError,
    NoMatchError,
    TransportError,
)

LOGGER = logging.getLogger(__name__)

_CANDIDATES = TypeAdapter(List[GeoCandidate])


def parse_candidates(text: str) -> List[GeoCandidate]:
    """Parse a geocoding response body into candidates.

    Raises:
        GeocodeParseError: If the body is not a JSON array of objects with
            float-convertible ``lat`` and ``lon``.
    """
    try:
        return _CANDIDATES.validate_json(text)
    except ValidationError as exc:
        raise GeocodeParseError(
            "Couldn't parse coordinates from the geocoding response, "
            "try set_coordinates() instead"
        ) from exc


class Geocoder:
    """Resolves free-text place names to coordinates."""

    def __init__(
        self,
        url: str = GEOCODE_ENDPOINT,
        *,
        api_key: Optional[str] = None,
        http_client: Optional[HTTPClient] = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self._url = url
        self._api_key = api_key
        self._http_client = http_client
        self._timeout = timeout

    @property
    def url(self) -> str:
        return self._url

    def _build_params(self, place_name: str) -> Dict[str, str]:
        params = {"q": place_name}
        if self._api_key:
            params["api_key"] = self._api_key
        return params

    def _get(self, params: Dict[str, str]) -> HTTPResponse:
        if self._http_client is not None:
            return self._http_client.get(self._url, params, self._timeout)
        with RequestsHTTPClient() as client:
            return client.get(self._url, params, self._timeout)

    def lookup(self, place_name: str) -> List[GeoCandidate]:
        """
        Look up candidate locations for a place name.

        Args:
            place_name: Free-text place name, e.g. "London".

        Returns:
            Non-empty list of candidates, best match first.

        Raises:
            LookupFailedError: Transport failure or non-200 status.
            NoMatchError: The service returned no candidates.
            GeocodeParseError: The body could not be read as coordinates.
        """
        try:
            response = self._get(self._build_params(place_name))
        except TransportError as exc:
            raise LookupFailedError(
                f"Error getting coordinates for '{place_name}' from geolocation: {exc}"
            ) from exc

        if response.status_code != 200:
            raise LookupFailedError(
                f"Error getting coordinates for '{place_name}' from geolocation "
                f"(HTTP {response.status_code})",
                status_code=response.status_code,
            )

        candidates = parse_candidates(response.text)
        if not candidates:
            raise NoMatchError(place_name)
        return candidates

    def first_match(self, place_name: str) -> GeoCandidate:
        """Return the best candidate for a place name (see ``lookup``)."""
        best = self.lookup(place_name)[0]
        LOGGER.info(
            "Resolved '%s' to (%s, %s) %s",
            place_name,
            best.lat,
            best.lon,
            best.display_name or "",
        )
        return best


__all__ = ["Geocoder", "parse_candidates"]
