#!/usr/bin/env python3
"""
Names of the tools exposed by the Open-Meteo MCP server.
"""

from enum import Enum


class ToolName(str, Enum):
    ADD_LOCATION_BY_SEARCH = "add_location_by_search"
    ADD_LOCATION = "add_location"
    DELETE_LOCATION = "delete_location"
    LIST_LOCATIONS = "list_locations"
    GET_FORECAST = "get_forecast"

    @classmethod
    def lookup(cls, name):
        """Return the ToolName for ``name``, or None for tools this server does not have."""
        try:
            return cls(name)
        except ValueError:
            return None
