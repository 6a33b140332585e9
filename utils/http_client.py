#!/usr/bin/env python3
"""
HTTP client utilities for the Open-Meteo MCP server.
One lazily created AsyncClient is shared by the geocoding and forecast calls.
"""

import httpx

from config import Config
from utils.errors import ProviderError

_http_client: httpx.AsyncClient = None


def create_http_client() -> httpx.AsyncClient:
    """Create a client with the configured timeouts and identifying headers.

    No retry transport: each provider call is a single attempt.
    """
    timeout = httpx.Timeout(Config.HTTP_TIMEOUT, connect=Config.HTTP_CONNECT_TIMEOUT)
    headers = {"User-Agent": Config.USER_AGENT, "Accept": "application/json"}
    return httpx.AsyncClient(timeout=timeout, headers=headers)


def get_http_client() -> httpx.AsyncClient:
    """Get the shared HTTP client instance."""
    global _http_client
    if _http_client is None or _http_client.is_closed:
        _http_client = create_http_client()
    return _http_client


async def close_http_client():
    global _http_client
    if _http_client is not None:
        await _http_client.aclose()
        _http_client = None


def read_json(response: httpx.Response, error_prefix):
    """Decode a provider response body, raising ProviderError if it is not a JSON object."""
    try:
        data = response.json()
    except ValueError as e:
        raise ProviderError(f"{error_prefix}: invalid JSON response", response.status_code) from e
    if not isinstance(data, dict):
        raise ProviderError(f"{error_prefix}: unexpected response shape", response.status_code)
    return data
