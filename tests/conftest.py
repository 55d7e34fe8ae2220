"""Shared test fixtures for yahoo-developer-mcp."""

import pytest
from unittest.mock import AsyncMock, MagicMock

from yahoo_developer_mcp.config import AppConfig
from yahoo_developer_mcp.context import AppContext
from yahoo_developer_mcp.core.pagination import PaginationStore
from yahoo_developer_mcp.models.responses import (
    GeocodeItem,
    GeocodeResult,
    LocalSearchItem,
    LocalSearchResult,
    ReverseGeocodeItem,
    ReverseGeocodeResult,
)

APP_ID = "test-app-id"
AUTH_HEADER = f"Bearer {APP_ID}"


# Sample Yahoo Map API responses
SAMPLE_LOCAL_SEARCH_RESPONSE = {
    "ResultInfo": {"Count": 2, "Total": 42, "Start": 1, "Status": 200},
    "Feature": [
        {
            "Id": "20150703003",
            "Name": "ラーメン一番",
            "Geometry": {"Type": "point", "Coordinates": "139.7671248,35.6812362"},
            "Property": {
                "Address": "東京都千代田区丸の内1-9-1",
                "Tel1": "03-1234-5678",
                "Genre": [{"Code": "0101001", "Name": "ラーメン"}],
            },
        },
        {
            "Id": "20150703004",
            "Name": "麺屋二番",
            "Geometry": {"Type": "point", "Coordinates": "139.7000000,35.6000000"},
            "Property": {"Address": "東京都渋谷区", "Genre": {"Name": "つけ麺"}},
        },
    ],
}

SAMPLE_GEOCODE_RESPONSE = {
    "ResultInfo": {"Count": 1, "Total": 1, "Start": 1, "Status": 200},
    "Feature": [
        {
            "Name": "東京都港区六本木",
            "Geometry": {"Type": "point", "Coordinates": "139.73134,35.66281"},
            "Property": {"Address": "東京都港区六本木"},
        }
    ],
}

SAMPLE_REVERSE_RESPONSE = {
    "ResultInfo": {"Count": 1, "Total": 1, "Start": 1, "Status": 200},
    "Feature": [
        {
            "Name": "東京都千代田区丸の内1丁目",
            "Geometry": {"Type": "point", "Coordinates": "139.7671248,35.6812362"},
            "Property": {"Address": "東京都千代田区丸の内1丁目"},
        }
    ],
}


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store(clock):
    """PaginationStore driven by the fake clock."""
    return PaginationStore(ttl_seconds=300, clock=clock)


@pytest.fixture
def local_search_result():
    return LocalSearchResult(
        items=[
            LocalSearchItem(
                id="ラーメン一番",
                name="ラーメン一番",
                address="東京都千代田区丸の内1-9-1",
                lat=35.6812362,
                lng=139.7671248,
                category="ラーメン",
                tel="03-1234-5678",
            )
        ],
        raw=SAMPLE_LOCAL_SEARCH_RESPONSE,
    )


@pytest.fixture
def mock_repository(local_search_result):
    """Mock MapRepository with canned flattened results."""
    repository = AsyncMock()
    repository.local_search = AsyncMock(return_value=local_search_result)
    repository.geocode = AsyncMock(
        return_value=GeocodeResult(
            items=[
                GeocodeItem(
                    name="東京都港区六本木",
                    address="東京都港区六本木",
                    lat=35.66281,
                    lng=139.73134,
                )
            ],
            raw=SAMPLE_GEOCODE_RESPONSE,
        )
    )
    repository.reverse_geocode = AsyncMock(
        return_value=ReverseGeocodeResult(
            items=[
                ReverseGeocodeItem(
                    name="東京都千代田区丸の内1丁目", address="東京都千代田区丸の内1丁目"
                )
            ],
            raw=SAMPLE_REVERSE_RESPONSE,
        )
    )
    repository.close = AsyncMock()
    return repository


@pytest.fixture
def app_config():
    return AppConfig(yahoo_app_id=APP_ID)


@pytest.fixture
def context(app_config, mock_repository, store):
    """AppContext wired with the mock repository and fake-clock store."""
    return AppContext.create(app_config, repository=mock_repository, store=store)


@pytest.fixture
def mock_mcp():
    """Mock ChukMCPServer."""
    mcp = MagicMock()
    mcp.tool = MagicMock(return_value=lambda fn: fn)
    return mcp
