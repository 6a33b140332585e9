#!/usr/bin/env python3
"""
Domain errors raised by the location store, the provider clients and the tool handlers.
Every subclass of WeatherToolError is reported back to the caller as a failed tool result.
"""


class WeatherToolError(Exception):
    """Base class for failures a tool reports as an error result."""


class InvalidArgumentsError(WeatherToolError):
    """Tool arguments did not match the declared input schema."""


class InvalidCoordinateError(WeatherToolError):
    """A latitude or longitude outside its valid range."""


class InvalidLatitudeError(InvalidCoordinateError):
    def __init__(self):
        super().__init__("Latitude must be between -90 and 90")


class InvalidLongitudeError(InvalidCoordinateError):
    def __init__(self):
        super().__init__("Longitude must be between -180 and 180")


class InvalidLocationNameError(WeatherToolError):
    def __init__(self):
        super().__init__("Location name must not be empty")


class DuplicateLocationError(WeatherToolError):
    def __init__(self, name):
        self.name = name
        super().__init__(f'Location "{name}" already exists')


class LocationNotFoundError(WeatherToolError):
    """No stored location, or no geocoding match, for the given name."""


class ProviderError(WeatherToolError):
    """An external weather or geocoding API call did not succeed.

    ``status`` is the HTTP status code, or None when no response was received.
    """

    def __init__(self, message, status=None):
        self.status = status
        super().__init__(message)
