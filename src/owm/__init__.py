"""OpenWeatherMap API client for current weather data.

This module provides a typed, synchronous client for the OpenWeatherMap
2.5 current weather API. To use the API you need an API key, which can
be obtained at https://openweathermap.org/appid.

Key features:
    - Current weather by city name, city id, ZIP code or coordinates
    - Current weather for cities in a bounding box or around a point
    - Unit system (metric, imperial) and language modifiers
    - Typed pydantic payloads where every field is optional
    - Closed set of errors: HttpError, BadRequest, Failure, JsonDecodeError
    - Optional DataFrame conversion via owm.dataframe module

Outcomes:
    Every query either returns ``(response, payload)`` or raises one of
    four errors, all subclasses of OwmError:

    - **HttpError**: the request could not be performed
    - **BadRequest**: the API rejected the request and explained why
    - **Failure**: non-success status without a readable explanation
    - **JsonDecodeError**: success status, but the body did not match
      the expected payload (likely an API change)

Example:
    Query by name::

        from owm import BadRequest, WeatherHub

        with WeatherHub("YOUR_API_KEY") as hub:
            try:
                response, info = hub.current().by_name("London", "UK")
            except BadRequest as e:
                print(f"Rejected: {e.message}")
            else:
                print(f"{info.name}: {info.main.temp} K")

    Metric units and Italian descriptions::

        from owm import Units, WeatherHub

        with WeatherHub.from_env() as hub:
            _, info = hub.current().units(Units.METRIC).lang("it").by_id(6542122)
            print(f"{info.weather[0].description}, {info.main.temp}°C")

    Cities in a bounding box::

        from owm import BoundingBox, WeatherHub

        with WeatherHub.from_env() as hub:
            bbox = BoundingBox(top=43.73, bottom=43.7, left=10.38, right=10.42)
            _, found = hub.current().by_bounds(bbox, zoom=10, cluster=False)
            for city in found.list or []:
                print(city.name)

See Also:
    - OpenWeatherMap API docs: https://openweathermap.org/current
"""

from .current import CurrentWeatherQuery
from .exceptions import BadRequest, Failure, HttpError, JsonDecodeError, OwmError
from .hub import WeatherHub
from .models import (
    BoundingBox,
    Clouds,
    Coordinates,
    ErrorResponse,
    Main,
    Precipitation,
    Sys,
    Weather,
    WeatherAggregate,
    WeatherBoxAggregate,
    WeatherInfo,
    Wind,
)
from .types import API_BASE_URL, API_KEY_ENV_VAR, API_VERSION, DEFAULT_TIMEOUT, Units
from .uri import UriBuilder

__all__ = [
    "WeatherHub",
    "CurrentWeatherQuery",
    "UriBuilder",
    "Units",
    "BoundingBox",
    "WeatherInfo",
    "WeatherAggregate",
    "WeatherBoxAggregate",
    "Coordinates",
    "Weather",
    "Main",
    "Wind",
    "Clouds",
    "Precipitation",
    "Sys",
    "ErrorResponse",
    "OwmError",
    "HttpError",
    "BadRequest",
    "Failure",
    "JsonDecodeError",
    "API_BASE_URL",
    "API_VERSION",
    "API_KEY_ENV_VAR",
    "DEFAULT_TIMEOUT",
]
