"""
Low-level async HTTP client for the Yahoo! JAPAN Map API.

Handles connection reuse, timeouts, and error normalisation. Every failure
surfaces as UpstreamError.
"""

import logging
import math
from typing import Any

import httpx

from ..constants import ErrorMessages, YahooApiConfig
from ..errors import UpstreamError

logger = logging.getLogger(__name__)


class YahooMapClient:
    """Async HTTP client for the Yahoo Map web APIs."""

    def __init__(
        self,
        base_url: str = YahooApiConfig.BASE_URL,
        user_agent: str = YahooApiConfig.USER_AGENT,
        timeout: float = YahooApiConfig.TIMEOUT_SECONDS,
    ):
        self._base_url = base_url.rstrip("/")
        self._user_agent = user_agent
        self._timeout = timeout
        self._client: httpx.AsyncClient | None = None

    @property
    def base_url(self) -> str:
        return self._base_url

    async def _get_client(self) -> httpx.AsyncClient:
        """Lazily create httpx client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                headers={"User-Agent": self._user_agent},
                timeout=self._timeout,
            )
        return self._client

    async def request(self, path: str, params: dict[str, Any]) -> dict[str, Any]:
        """GET path with params and return the decoded JSON body.

        Raises:
            UpstreamError: On network failure, non-2xx status, or a non-JSON body
        """
        client = await self._get_client()
        url = f"{self._base_url}{path}"
        try:
            response = await client.get(url, params=params)
        except httpx.HTTPError as e:
            raise UpstreamError(0, ErrorMessages.NETWORK_ERROR.format(url, e)) from e

        if not 200 <= response.status_code < 300:
            raise UpstreamError(
                response.status_code,
                ErrorMessages.API_ERROR.format(response.status_code, url),
                details=response.text[:200],
            )

        try:
            data = response.json()
        except ValueError as e:
            raise UpstreamError(
                response.status_code, ErrorMessages.INVALID_JSON.format(url, e)
            ) from e
        if not isinstance(data, dict):
            raise UpstreamError(
                response.status_code,
                ErrorMessages.INVALID_JSON.format(url, "expected a JSON object"),
            )
        return data

    async def close(self) -> None:
        """Close the httpx client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None


def parse_coordinates(coord: str | None) -> tuple[float | None, float | None]:
    """Parse a Yahoo "lng,lat" coordinate string.

    Returns:
        (lat, lng); either is None when missing or not a finite number
    """
    if not coord:
        return None, None
    parts = coord.split(",")
    if len(parts) != 2:
        return None, None
    return _finite(parts[1]), _finite(parts[0])


def _finite(value: str) -> float | None:
    try:
        number = float(value)
    except ValueError:
        return None
    return number if math.isfinite(number) else None


def genre_name(prop: dict[str, Any]) -> str | None:
    """First genre name of a Feature.Property; Genre may be an object or a list."""
    genre = prop.get("Genre")
    if isinstance(genre, list):
        genre = genre[0] if genre else None
    if isinstance(genre, dict):
        return genre.get("Name")
    return None
