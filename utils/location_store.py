#!/usr/bin/env python3
"""
Persistent storage for named locations.

The whole collection lives in a single JSON document::

    {"locations": [{"name": "Home", "latitude": 35.6, "longitude": 139.7}]}

Every call re-reads the document from disk and every mutation rewrites all of
it, so the file is the only state. Names are unique case-insensitively and
keep their insertion order.
"""

import json
import logging
import math
import os
import tempfile
from pathlib import Path

from pydantic import ValidationError

from config import Config
from utils.errors import (
    DuplicateLocationError,
    InvalidLatitudeError,
    InvalidLocationNameError,
    InvalidLongitudeError,
    LocationNotFoundError,
)
from utils.models import Location, LocationsDocument

logger = logging.getLogger(__name__)


def validate_coordinates(latitude, longitude):
    """Raise if latitude or longitude is out of range (NaN counts as out of range)."""
    if math.isnan(latitude) or not -90 <= latitude <= 90:
        raise InvalidLatitudeError()
    if math.isnan(longitude) or not -180 <= longitude <= 180:
        raise InvalidLongitudeError()


class LocationStore:
    """Read-modify-write access to the locations document."""

    def __init__(self, path=None):
        self.path = Path(path) if path is not None else Config.LOCATIONS_FILE

    def load(self) -> LocationsDocument:
        """Read the document; a missing or unreadable file is an empty collection."""
        if not self.path.exists():
            return LocationsDocument()

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
            return LocationsDocument.model_validate(data)
        except (OSError, ValueError, ValidationError) as e:
            logger.warning(
                "Ignoring unreadable locations file %s (%s); treating it as empty",
                self.path,
                e.__class__.__name__,
            )
            return LocationsDocument()

    def save(self, document: LocationsDocument):
        """Replace the document on disk atomically."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = json.dumps(document.model_dump(), indent=2)

        fd, tmp_path = tempfile.mkstemp(
            dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
            os.replace(tmp_path, self.path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise

    def list(self):
        """All saved locations in storage order."""
        return list(self.load().locations)

    def names(self):
        return [location.name for location in self.load().locations]

    def find(self, name):
        """Case-insensitive exact lookup; None when absent."""
        for location in self.load().locations:
            if location.matches(name):
                return location
        return None

    def add(self, name, latitude, longitude) -> Location:
        """Append a new location and persist the collection."""
        if not name or not name.strip():
            raise InvalidLocationNameError()

        document = self.load()
        if any(location.matches(name) for location in document.locations):
            raise DuplicateLocationError(name)
        validate_coordinates(latitude, longitude)

        location = Location(name=name, latitude=latitude, longitude=longitude)
        document.locations.append(location)
        self.save(document)
        logger.info("Added location %r (%d saved)", name, len(document.locations))
        return location

    def delete(self, name) -> Location:
        """Remove the location with a matching name and persist the collection."""
        document = self.load()
        for index, location in enumerate(document.locations):
            if location.matches(name):
                del document.locations[index]
                self.save(document)
                logger.info(
                    "Deleted location %r (%d saved)", location.name, len(document.locations)
                )
                return location
        raise LocationNotFoundError(f'Location "{name}" not found')
