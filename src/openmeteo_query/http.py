"""HTTP transport used by the geocoder and the query builder."""
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Protocol
import requests
from .models import TransportError, TransportTimeoutError

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class HTTPResponse:
    """Status code and raw body of a completed request."""
    status_code: int
    text: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


# HTTP Client Protocol
class HTTPClient(Protocol):
    def get(
        self,
        url: str,
        params: Optional[Dict[str, str]],
        timeout: float,
    ) -> HTTPResponse:
        ...


class RequestsHTTPClient:
    def __init__(self) -> None:
        self._session: Optional[requests.Session] = None

    def _get_session(self) -> requests.Session:
        if self._session is None:
            self._session = requests.Session()
        return self._session

    def close(self) -> None:
        if self._session is not None:
            self._session.close()
            self._session = None

    def __enter__(self) -> "RequestsHTTPClient":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()

    def get(
        self,
        url: str,
        params: Optional[Dict[str, str]],
        timeout: float,
    ) -> HTTPResponse:
        session = self._get_session()
        response: Optional[requests.Response] = None

        try:
            LOGGER.debug("GET %s params=%s", url, params)
            response = session.get(url, params=params, timeout=timeout)
            return HTTPResponse(status_code=response.status_code, text=response.text)

        except requests.exceptions.Timeout as exc:
            raise TransportTimeoutError(
                f"Request timed out after {timeout} seconds while connecting to {url}",
                url=url,
            ) from exc
        except requests.exceptions.ConnectionError as exc:
            raise TransportError(
                f"Failed to establish connection to {url}: {exc}", url=url
            ) from exc
        except requests.exceptions.RequestException as exc:
            raise TransportError(f"Request to {url} failed: {exc}", url=url) from exc
        finally:
            # Release the connection back to the pool
            if response is not None:
                response.close()


__all__ = ["HTTPResponse", "HTTPClient", "RequestsHTTPClient"]
