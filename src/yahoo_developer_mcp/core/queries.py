"""
Upstream query construction.

Turns validated tool input into the parameters the Yahoo Map API expects,
resolving the paging cursor for local search when a session id is present.
"""

import hashlib
import json
import logging
from dataclasses import asdict, dataclass

from ..constants import ErrorMessages, PagingConfig, YahooApiConfig
from ..errors import ValidationError
from ..models.inputs import GeocodeInput, LocalSearchInput, ReverseGeocodeInput
from .pagination import PaginationStore, PagingKey

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UpstreamQuery:
    appid: str
    output: str

    def to_params(self) -> dict[str, str | int | float]:
        """Query-string parameters, skipping unset values."""
        return {k: v for k, v in asdict(self).items() if v is not None}


@dataclass(frozen=True)
class LocalSearchQuery(UpstreamQuery):
    query: str | None = None
    lat: float | None = None
    lon: float | None = None
    start: int = 1
    results: int = PagingConfig.DEFAULT_PAGE_SIZE


@dataclass(frozen=True)
class GeocodeQuery(UpstreamQuery):
    query: str = ""


@dataclass(frozen=True)
class ReverseGeocodeQuery(UpstreamQuery):
    lat: float = 0.0
    lon: float = 0.0


def fingerprint(query: str | None, lat: float | None, lng: float | None) -> str:
    """Deterministic identity of a logical search. Paging controls are excluded."""
    raw = json.dumps({"q": query, "lat": lat, "lng": lng}, sort_keys=True)
    return hashlib.md5(raw.encode(), usedforsecurity=False).hexdigest()  # noqa: S324


def page_size_for(results: int | None) -> int:
    return results if results and results > 0 else PagingConfig.DEFAULT_PAGE_SIZE


def build_local_search_query(
    params: LocalSearchInput,
    app_id: str,
    store: PaginationStore,
) -> tuple[LocalSearchQuery, int | None]:
    """Build the upstream local search query and resolve the page cursor.

    Args:
        params: Validated localSearch arguments
        app_id: Yahoo application id forwarded as ``appid``
        store: Pagination store consulted only when params.session_id is set

    Returns:
        Tuple of (query, next_offset); next_offset is None without a session

    Raises:
        ValidationError: If neither a query nor both coordinates are given
    """
    if not params.has_target:
        raise ValidationError(ErrorMessages.LOCAL_SEARCH_TARGET)

    page_size = page_size_for(params.results)
    offset = params.offset or 0
    next_offset: int | None = None

    if params.session_id:
        key = PagingKey(params.session_id, fingerprint(params.query, params.lat, params.lng))
        window = store.get_and_advance(
            key, page_size, reset=bool(params.reset), explicit_offset=params.offset
        )
        offset = window.offset
        next_offset = window.next_offset

    logger.debug(
        "Local search query: query=%r lat=%s lng=%s offset=%d size=%d",
        params.query,
        params.lat,
        params.lng,
        offset,
        page_size,
    )
    query = LocalSearchQuery(
        appid=app_id,
        output=YahooApiConfig.OUTPUT_FORMAT,
        query=params.query,
        lat=params.lat,
        lon=params.lng,
        start=offset + 1,
        results=page_size,
    )
    return query, next_offset


def build_geocode_query(params: GeocodeInput, app_id: str) -> GeocodeQuery:
    if not params.query:
        raise ValidationError(ErrorMessages.GEOCODE_QUERY)
    return GeocodeQuery(appid=app_id, output=YahooApiConfig.OUTPUT_FORMAT, query=params.query)


def build_reverse_geocode_query(params: ReverseGeocodeInput, app_id: str) -> ReverseGeocodeQuery:
    if params.lat is None or params.lng is None:
        raise ValidationError(ErrorMessages.REVERSE_COORDINATES)
    return ReverseGeocodeQuery(
        appid=app_id,
        output=YahooApiConfig.OUTPUT_FORMAT,
        lat=params.lat,
        lon=params.lng,
    )
