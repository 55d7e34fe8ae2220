"""
Yahoo Map repository: runs built queries and flattens the responses.
"""

import logging
from typing import Any, Protocol

from ..constants import YahooApiConfig
from ..models.responses import (
    GeocodeItem,
    GeocodeResult,
    LocalSearchItem,
    LocalSearchResult,
    ReverseGeocodeItem,
    ReverseGeocodeResult,
)
from .queries import GeocodeQuery, LocalSearchQuery, ReverseGeocodeQuery
from .yahoo import YahooMapClient, genre_name, parse_coordinates

logger = logging.getLogger(__name__)


class MapRepository(Protocol):
    """Upstream capability the tools depend on."""

    async def local_search(self, query: LocalSearchQuery) -> LocalSearchResult: ...

    async def geocode(self, query: GeocodeQuery) -> GeocodeResult: ...

    async def reverse_geocode(self, query: ReverseGeocodeQuery) -> ReverseGeocodeResult: ...


class YahooMapRepository:
    """MapRepository backed by the Yahoo! JAPAN Map API."""

    def __init__(self, client: YahooMapClient | None = None):
        self._client = client or YahooMapClient()

    async def local_search(self, query: LocalSearchQuery) -> LocalSearchResult:
        raw = await self._client.request(YahooApiConfig.LOCAL_SEARCH_PATH, query.to_params())
        return self._flatten_local(raw)

    async def geocode(self, query: GeocodeQuery) -> GeocodeResult:
        raw = await self._client.request(YahooApiConfig.GEOCODE_PATH, query.to_params())
        return self._flatten_geocode(raw)

    async def reverse_geocode(self, query: ReverseGeocodeQuery) -> ReverseGeocodeResult:
        raw = await self._client.request(YahooApiConfig.REVERSE_GEOCODE_PATH, query.to_params())
        return self._flatten_reverse(raw)

    async def close(self) -> None:
        await self._client.close()

    # --- Parsing helpers ---

    @staticmethod
    def _features(raw: dict[str, Any]) -> list[dict[str, Any]]:
        features = raw.get("Feature") or []
        return [f for f in features if isinstance(f, dict)]

    @classmethod
    def _flatten_local(cls, raw: dict[str, Any]) -> LocalSearchResult:
        items = []
        for f in cls._features(raw):
            prop = f.get("Property") or {}
            lat, lng = parse_coordinates((f.get("Geometry") or {}).get("Coordinates"))
            items.append(
                LocalSearchItem(
                    id=f.get("Name"),
                    name=f.get("Name"),
                    address=prop.get("Address"),
                    lat=lat,
                    lng=lng,
                    category=genre_name(prop),
                    tel=prop.get("Tel1"),
                )
            )
        logger.debug("Local search returned %d feature(s)", len(items))
        return LocalSearchResult(items=items, raw=raw)

    @classmethod
    def _flatten_geocode(cls, raw: dict[str, Any]) -> GeocodeResult:
        items = []
        for f in cls._features(raw):
            prop = f.get("Property") or {}
            lat, lng = parse_coordinates((f.get("Geometry") or {}).get("Coordinates"))
            items.append(
                GeocodeItem(
                    name=f.get("Name"),
                    address=prop.get("Address") or f.get("Name") or "",
                    lat=lat,
                    lng=lng,
                )
            )
        return GeocodeResult(items=items, raw=raw)

    @classmethod
    def _flatten_reverse(cls, raw: dict[str, Any]) -> ReverseGeocodeResult:
        items = [
            ReverseGeocodeItem(
                name=f.get("Name"),
                address=(f.get("Property") or {}).get("Address") or f.get("Name"),
            )
            for f in cls._features(raw)
        ]
        return ReverseGeocodeResult(items=items, raw=raw)
