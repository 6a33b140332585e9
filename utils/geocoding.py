#!/usr/bin/env python3
"""
Open-Meteo geocoding client.
Resolves a free-text place query to ranked candidate coordinates.
"""

import logging

import httpx
from pydantic import ValidationError

from config import Config
from utils.errors import ProviderError
from utils.http_client import get_http_client, read_json
from utils.models import GeocodingCandidate

logger = logging.getLogger(__name__)


async def search_places(query, client: httpx.AsyncClient = None):
    """
    Search Open-Meteo for places matching ``query``.
    Returns up to five GeocodingCandidate objects, most relevant first, or an
    empty list when nothing matches.
    """
    client = client or get_http_client()
    params = {
        "name": query,
        "count": Config.GEOCODING_RESULT_COUNT,
        "language": Config.GEOCODING_LANGUAGE,
        "format": "json",
    }

    try:
        r = await client.get(Config.GEOCODING_URL, params=params)
    except httpx.HTTPError as e:
        raise ProviderError(f"Geocoding API error: {e.__class__.__name__}") from e
    if not r.is_success:
        raise ProviderError(
            f"Geocoding API error: {r.status_code} {r.reason_phrase}", r.status_code
        )

    results = read_json(r, "Geocoding API error").get("results") or []
    if not isinstance(results, list):
        raise ProviderError("Geocoding API error: unexpected response shape", r.status_code)

    candidates = []
    for item in results[: Config.GEOCODING_RESULT_COUNT]:
        if not isinstance(item, dict):
            continue
        if item.get("name") is None or item.get("latitude") is None or item.get("longitude") is None:
            continue
        try:
            candidates.append(
                GeocodingCandidate(
                    name=item["name"],
                    latitude=item["latitude"],
                    longitude=item["longitude"],
                    country=item.get("country"),
                    admin1=item.get("admin1"),
                )
            )
        except ValidationError:
            logger.warning("Skipping malformed geocoding result for %r", query)

    logger.info("Geocoding %r returned %d candidate(s)", query, len(candidates))
    return candidates
