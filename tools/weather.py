#!/usr/bin/env python3
"""
Weather tool for the Open-Meteo MCP server.
Provides the forecast for a saved location, looked up by name only.
"""

import logging
from typing import Annotated

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from tools.tool_names import ToolName
from utils.errors import LocationNotFoundError
from utils.forecast import fetch_forecast, format_forecast

logger = logging.getLogger("mcp.tools")


def register_weather_tool(app: FastMCP, store, http_client=None):
    """Register the forecast tool with the FastMCP app and return its handler."""

    @app.tool(
        name=ToolName.GET_FORECAST.value,
        description=(
            "Get 7-day weather forecast for a saved location. Only the location name "
            "is required - coordinates are retrieved locally for privacy."
        ),
    )
    async def get_forecast(
        name: Annotated[str, Field(description="The name of the saved location")],
    ):
        location = store.find(name)
        if location is None:
            raise LocationNotFoundError(
                f'Location "{name}" not found. Use list_locations to see available locations.'
            )

        forecasts = await fetch_forecast(
            location.latitude, location.longitude, client=http_client
        )
        logger.info("Fetched %d forecast day(s) for %r", len(forecasts), location.name)
        return format_forecast(location.name, forecasts)

    return {ToolName.GET_FORECAST: get_forecast}
