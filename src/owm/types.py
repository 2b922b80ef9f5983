"""Types and constants for the OpenWeatherMap API client.

This module defines enumerations and configuration constants used
throughout the owm client.

Example:
    Using the Units enum::

        from owm import Units, WeatherHub

        with WeatherHub("YOUR_API_KEY") as hub:
            _, info = hub.current().units(Units.METRIC).by_id(6542122)
            print(f"{info.name}: {info.main.temp}°C")
"""

from enum import Enum


class Units(str, Enum):
    """Unit system requested from the API.

    When no unit system is requested the API answers in its "standard"
    units (temperatures in Kelvin, wind speed in m/s).

    Attributes:
        METRIC: Temperatures in °C, wind speed in m/s.
        IMPERIAL: Temperatures in °F, wind speed in miles/hour.

    Example:
        >>> from owm.types import Units
        >>> Units.METRIC.value
        'metric'
        >>> Units("imperial") is Units.IMPERIAL
        True
    """

    METRIC = "metric"
    IMPERIAL = "imperial"


API_BASE_URL = "http://api.openweathermap.org"
"""str: Scheme and host of the OpenWeatherMap API.

Request URLs are rendered as ``{API_BASE_URL}/data/{API_VERSION}/{endpoint}``.
"""

API_VERSION = "2.5"
"""str: Version segment of the data API path."""

DEFAULT_TIMEOUT = 30.0
"""float: Default HTTP timeout in seconds for clients created by WeatherHub."""

API_KEY_ENV_VAR = "OWM_API_KEY"
"""str: Environment variable read by WeatherHub.from_env()."""

ENDPOINT_WEATHER = "weather"
"""str: Endpoint for single-location current weather lookups."""

ENDPOINT_BOX = "box/city"
"""str: Endpoint for cities within a bounding box."""

ENDPOINT_FIND = "find"
"""str: Endpoint for cities around a center point."""
