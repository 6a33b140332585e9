#!/usr/bin/env python3
"""
Configuration module for the Open-Meteo MCP server.
Centralizes storage paths, provider endpoints, and server settings.
"""

import logging
import os
from pathlib import Path


class Config:
    """Configuration class for open-meteo-mcp settings."""

    SERVER_NAME = "open-meteo-mcp"
    SERVER_VERSION = "1.0.0"

    # Storage
    CONFIG_DIR = Path(
        os.getenv(
            "OPEN_METEO_MCP_CONFIG_DIR",
            str(Path.home() / ".config" / "open-meteo-mcp"),
        )
    )
    LOCATIONS_FILE = Path(
        os.getenv("OPEN_METEO_MCP_LOCATIONS_FILE", str(CONFIG_DIR / "locations.json"))
    )

    # Provider endpoints
    GEOCODING_URL = os.getenv(
        "GEOCODING_URL", "https://geocoding-api.open-meteo.com/v1/search"
    )
    FORECAST_URL = os.getenv("FORECAST_URL", "https://api.open-meteo.com/v1/forecast")
    GEOCODING_RESULT_COUNT = 5
    GEOCODING_LANGUAGE = "en"
    FORECAST_DAYS = 7
    FORECAST_DAILY_FIELDS = (
        "weather_code,temperature_2m_max,temperature_2m_min,"
        "precipitation_sum,wind_speed_10m_max"
    )

    # HTTP Settings
    HTTP_TIMEOUT = float(os.getenv("HTTP_TIMEOUT", "20.0"))
    HTTP_CONNECT_TIMEOUT = 10.0
    USER_AGENT = f"{SERVER_NAME}/{SERVER_VERSION}"

    # Server Settings
    TRANSPORT = os.getenv("MCP_TRANSPORT", "stdio")
    SERVER_HOST = os.getenv("SERVER_HOST", "localhost")
    SERVER_PORT = int(os.getenv("SERVER_PORT", "8000"))

    # Logging
    LOG_DIR = Path(os.getenv("LOG_DIR", str(CONFIG_DIR / "logs")))
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    @classmethod
    def get_log_level(cls):
        """Resolve LOG_LEVEL to a logging level, falling back to INFO."""
        level = logging.getLevelName(cls.LOG_LEVEL.upper())
        return level if isinstance(level, int) else logging.INFO
