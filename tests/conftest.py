"""Shared fixtures for the open-meteo-mcp test suite."""

from unittest.mock import AsyncMock

import httpx
import pytest

from utils.location_store import LocationStore

TOKYO_GEOCODING = {
    "results": [
        {
            "name": "Tokyo",
            "latitude": 35.6895,
            "longitude": 139.69171,
            "country": "Japan",
            "admin1": "Tokyo",
        },
        {
            "name": "Tokyo",
            "latitude": 39.13,
            "longitude": -84.09,
            "country": "United States",
            "admin1": "Ohio",
        },
    ]
}

THREE_DAY_FORECAST = {
    "latitude": 35.7,
    "longitude": 139.6875,
    "timezone": "Asia/Tokyo",
    "daily": {
        "time": ["2025-04-01", "2025-04-02", "2025-04-03"],
        "weather_code": [0, 61, 9999],
        "temperature_2m_max": [18.2, 15.0, 12.4],
        "temperature_2m_min": [9.1, 10.3, 6.8],
        "precipitation_sum": [0.0, 7.4, 1.2],
        "wind_speed_10m_max": [11.5, 22.3, 14.0],
    },
}


def make_response(json_data, status_code=200):
    return httpx.Response(
        status_code=status_code, json=json_data, request=httpx.Request("GET", "https://test")
    )


def mock_client(*responses) -> httpx.AsyncClient:
    """Mock httpx.AsyncClient whose get() returns the given responses in order."""
    mock = AsyncMock(spec=httpx.AsyncClient)
    mock.get.side_effect = list(responses)
    return mock


@pytest.fixture
def locations_file(tmp_path):
    return tmp_path / "config" / "locations.json"


@pytest.fixture
def store(locations_file):
    return LocationStore(locations_file)
