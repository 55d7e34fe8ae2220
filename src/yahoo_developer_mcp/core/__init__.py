"""Core paging, query building, and Yahoo API access."""

from .pagination import PageWindow, PaginationStore, PagingKey, PagingState
from .queries import (
    GeocodeQuery,
    LocalSearchQuery,
    ReverseGeocodeQuery,
    build_geocode_query,
    build_local_search_query,
    build_reverse_geocode_query,
    fingerprint,
)
from .repository import MapRepository, YahooMapRepository
from .yahoo import YahooMapClient

__all__ = [
    "GeocodeQuery",
    "LocalSearchQuery",
    "MapRepository",
    "PageWindow",
    "PaginationStore",
    "PagingKey",
    "PagingState",
    "ReverseGeocodeQuery",
    "YahooMapClient",
    "YahooMapRepository",
    "build_geocode_query",
    "build_local_search_query",
    "build_reverse_geocode_query",
    "fingerprint",
]
