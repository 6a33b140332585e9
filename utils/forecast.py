#!/usr/bin/env python3
"""
Open-Meteo forecast client.
Fetches the daily forecast for a coordinate pair and renders it as text.
"""

import logging

import httpx
from pydantic import ValidationError

from config import Config
from utils.errors import ProviderError
from utils.http_client import get_http_client, read_json
from utils.models import DailyForecast

logger = logging.getLogger(__name__)

# Forecast field -> Open-Meteo daily column
DAILY_COLUMNS = {
    "date": "time",
    "weather_code": "weather_code",
    "temperature_max": "temperature_2m_max",
    "temperature_min": "temperature_2m_min",
    "precipitation_sum": "precipitation_sum",
    "wind_speed_max": "wind_speed_10m_max",
}


async def fetch_forecast(latitude, longitude, client: httpx.AsyncClient = None):
    """Get the 7-day daily forecast in the location's own time zone."""
    client = client or get_http_client()
    params = {
        "latitude": latitude,
        "longitude": longitude,
        "daily": Config.FORECAST_DAILY_FIELDS,
        "timezone": "auto",
        "forecast_days": Config.FORECAST_DAYS,
    }

    try:
        r = await client.get(Config.FORECAST_URL, params=params)
    except httpx.HTTPError as e:
        raise ProviderError(
            f"Failed to fetch weather data: {e.__class__.__name__}"
        ) from e
    if not r.is_success:
        raise ProviderError(
            f"Failed to fetch weather data: {r.status_code} {r.reason_phrase}",
            r.status_code,
        )

    data = read_json(r, "Failed to fetch weather data")
    daily = data.get("daily") or {}
    if not isinstance(daily, dict):
        raise ProviderError(
            "Failed to fetch weather data: unexpected response shape", r.status_code
        )
    return parse_daily_forecast(daily)


def parse_daily_forecast(raw):
    """Zip Open-Meteo daily columns into rows, skipping days with missing or malformed values."""
    times = raw.get("time")
    if not isinstance(times, list):
        return []

    forecasts = []
    for i in range(len(times)):
        row = {field: _get_at(raw, column, i) for field, column in DAILY_COLUMNS.items()}
        if any(value is None for value in row.values()):
            continue
        try:
            forecasts.append(DailyForecast(**row))
        except ValidationError:
            logger.warning("Skipping malformed forecast day at index %d", i)
    return forecasts


def format_forecast(location_name, forecasts):
    """Render forecast days as a report that names the location but not its coordinates."""
    header = f'{Config.FORECAST_DAYS}-Day Weather Forecast for "{location_name}":'
    if not forecasts:
        return f"{header}\n\nNo forecast data available."
    days = "\n\n".join(
        f"{f.date}: {f.weather_description}\n"
        f"  Temperature: {f.temperature_min}°C ~ {f.temperature_max}°C\n"
        f"  Precipitation: {f.precipitation_sum}mm\n"
        f"  Max Wind Speed: {f.wind_speed_max}km/h"
        for f in forecasts
    )
    return f"{header}\n\n{days}"


def _get_at(data, key, index):
    """Safely get value at index from a column array, returning None if missing."""
    col = data.get(key)
    if not isinstance(col, list) or index >= len(col):
        return None
    return col[index]
