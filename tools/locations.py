#!/usr/bin/env python3
"""
Location management tools for the Open-Meteo MCP server.
Adds, deletes and lists saved locations. Coordinates found by search are
stored locally and never echoed back to the caller.
"""

import logging
from typing import Annotated

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from tools.tool_names import ToolName
from utils.errors import LocationNotFoundError
from utils.geocoding import search_places

logger = logging.getLogger("mcp.tools")

NO_LOCATIONS_MESSAGE = (
    "No locations saved. Use add_location_by_search to add a new location."
)


def register_location_tools(app: FastMCP, store, http_client=None):
    """Register the location tools with the FastMCP app and return their handlers."""

    @app.tool(
        name=ToolName.ADD_LOCATION_BY_SEARCH.value,
        description=(
            "Add a new location by searching for a city or place name. This is the "
            "recommended way to add locations as coordinates are handled internally "
            "and never exposed. Use this instead of add_location whenever possible."
        ),
    )
    async def add_location_by_search(
        name: Annotated[
            str,
            Field(
                description="A friendly name to save this location as (e.g., 'Home', 'Office', 'Parents House')"
            ),
        ],
        search_query: Annotated[
            str,
            Field(
                description="The city or place name to search for (e.g., 'Tokyo', 'New York', 'London')"
            ),
        ],
    ):
        candidates = await search_places(search_query, client=http_client)
        if not candidates:
            raise LocationNotFoundError(f'No locations found for "{search_query}"')

        best = candidates[0]
        store.add(name, best.latitude, best.longitude)
        logger.info("Saved %r from search match %r", name, best.display_name)
        return f'Location "{name}" added successfully (found: {best.display_name})'

    @app.tool(
        name=ToolName.ADD_LOCATION.value,
        description=(
            "Add a new location with exact latitude and longitude. Only use this if "
            "you have specific coordinates. Prefer add_location_by_search for privacy."
        ),
    )
    async def add_location(
        name: Annotated[
            str, Field(description="A friendly name for this location (e.g., 'Home', 'Office')")
        ],
        latitude: Annotated[float, Field(description="Latitude of the location (-90 to 90)")],
        longitude: Annotated[
            float, Field(description="Longitude of the location (-180 to 180)")
        ],
    ):
        store.add(name, latitude, longitude)
        return f'Location "{name}" added successfully'

    @app.tool(
        name=ToolName.DELETE_LOCATION.value,
        description="Delete a saved location by name",
    )
    async def delete_location(
        name: Annotated[str, Field(description="The name of the location to delete")],
    ):
        store.delete(name)
        return f'Location "{name}" deleted successfully'

    @app.tool(
        name=ToolName.LIST_LOCATIONS.value,
        description="List all saved location names (coordinates are not shown for privacy)",
    )
    async def list_locations():
        names = store.names()
        if not names:
            return NO_LOCATIONS_MESSAGE
        return "Saved locations:\n" + "\n".join(f"- {n}" for n in names)

    return {
        ToolName.ADD_LOCATION_BY_SEARCH: add_location_by_search,
        ToolName.ADD_LOCATION: add_location,
        ToolName.DELETE_LOCATION: delete_location,
        ToolName.LIST_LOCATIONS: list_locations,
    }
