#!/usr/bin/env python3
"""
Pydantic models for persisted locations and Open-Meteo API data.
"""

from typing import List, Optional

from pydantic import BaseModel, computed_field

from utils.weather_codes import describe


class Location(BaseModel):
    """A user-named coordinate pair."""

    name: str
    latitude: float
    longitude: float

    def matches(self, name):
        return self.name.lower() == name.lower()


class LocationsDocument(BaseModel):
    """The whole persisted state: saved locations in insertion order."""

    locations: List[Location] = []


class GeocodingCandidate(BaseModel):
    """One geocoding search match, ranked by provider relevance."""

    name: str
    latitude: float
    longitude: float
    country: Optional[str] = None
    admin1: Optional[str] = None

    @property
    def display_name(self):
        """Place, region and country without coordinates, e.g. "Tokyo, Tokyo, Japan"."""
        parts = [self.name, self.admin1, self.country]
        return ", ".join(part for part in parts if part)


class DailyForecast(BaseModel):
    """One day of the Open-Meteo daily forecast."""

    date: str
    weather_code: int
    temperature_max: float
    temperature_min: float
    precipitation_sum: float
    wind_speed_max: float

    @computed_field
    @property
    def weather_description(self) -> str:
        return describe(self.weather_code)
