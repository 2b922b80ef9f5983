"""Queries against the current weather API.

CurrentWeatherQuery is obtained from WeatherHub.current(). It carries a
UriBuilder already seeded with the API key; one terminal method picks the
lookup mode, runs the request and returns the typed payload.

    ==============  ==========  ===================
    method          endpoint    payload
    ==============  ==========  ===================
    by_name         weather     WeatherInfo
    by_id           weather     WeatherInfo
    by_zip_code     weather     WeatherInfo
    by_coords       weather     WeatherInfo
    by_bounds       box/city    WeatherBoxAggregate
    by_circle       find        WeatherAggregate
    ==============  ==========  ===================

Example:
    Query by city name in metric units::

        from owm import Units, WeatherHub

        with WeatherHub("YOUR_API_KEY") as hub:
            response, info = hub.current().units(Units.METRIC).by_name("Pisa", "IT")
            print(f"{info.name}: {info.main.temp}°C")
"""

import math
from decimal import Decimal
from typing import TYPE_CHECKING, Optional, Tuple, Union

import httpx

from .format import ResponseFormatMixin
from .models import BoundingBox, WeatherAggregate, WeatherBoxAggregate, WeatherInfo
from .types import ENDPOINT_BOX, ENDPOINT_FIND, ENDPOINT_WEATHER
from .uri import UriBuilder

if TYPE_CHECKING:
    from .hub import WeatherHub


def _cluster_flag(cluster: bool) -> str:
    return "yes" if cluster else "no"


def _format_float(value: float) -> str:
    """Render a float as a plain decimal, never in exponent notation."""
    if not math.isfinite(value):
        return str(value)
    return format(Decimal(repr(value)), "f")


def _with_country(value: Union[str, int], country: Optional[str]) -> str:
    if country is None:
        return str(value)
    return f"{value},{country}"


class CurrentWeatherQuery(ResponseFormatMixin):
    """One-shot query builder for the current weather API.

    Each instance serves exactly one terminal call. Calling a second
    terminal method on the same instance raises RuntimeError.

    Args:
        hub: Hub used to execute the request.
        builder: URL builder, already seeded with the API key.
    """

    def __init__(self, hub: "WeatherHub", builder: UriBuilder) -> None:
        self._hub = hub
        self._builder = builder

    def by_name(
        self, city: str, country: Optional[str] = None
    ) -> Tuple[httpx.Response, WeatherInfo]:
        """Query current weather by city name and optional country code.

        Args:
            city: City name, e.g. "Pisa".
            country: ISO 3166 country code, e.g. "IT".

        Returns:
            Tuple of the HTTP response and the decoded WeatherInfo.

        Example:
            >>> response, info = hub.current().by_name("Pisa", "IT")
        """
        self._builder.set_endpoint(ENDPOINT_WEATHER)
        self._builder.set_parameter("q", _with_country(city, country))
        return self._hub.run_query(self._builder.build(), WeatherInfo)

    def by_id(self, city_id: int) -> Tuple[httpx.Response, WeatherInfo]:
        """Query current weather by city id. The API responds with an exact result.

        See http://bulk.openweathermap.org/sample/ for the list of city ids.

        Args:
            city_id: OpenWeatherMap city id, e.g. 6542122 for Pisa.

        Returns:
            Tuple of the HTTP response and the decoded WeatherInfo.
        """
        self._builder.set_endpoint(ENDPOINT_WEATHER)
        self._builder.set_parameter("id", str(city_id))
        return self._hub.run_query(self._builder.build(), WeatherInfo)

    def by_zip_code(
        self, zip_code: Union[int, str], country: Optional[str] = None
    ) -> Tuple[httpx.Response, WeatherInfo]:
        """Query current weather by ZIP code and optional country code.

        The API assumes the USA when no country is given.

        Args:
            zip_code: Postal code, e.g. 56124.
            country: ISO 3166 country code, e.g. "IT".

        Returns:
            Tuple of the HTTP response and the decoded WeatherInfo.
        """
        self._builder.set_endpoint(ENDPOINT_WEATHER)
        self._builder.set_parameter("zip", _with_country(zip_code, country))
        return self._hub.run_query(self._builder.build(), WeatherInfo)

    def by_coords(
        self, lat: float, lon: float
    ) -> Tuple[httpx.Response, WeatherInfo]:
        """Query current weather at geographic coordinates.

        Args:
            lat: Latitude in decimal degrees.
            lon: Longitude in decimal degrees.

        Returns:
            Tuple of the HTTP response and the decoded WeatherInfo.
        """
        self._builder.set_endpoint(ENDPOINT_WEATHER)
        self._builder.set_parameter("lat", _format_float(lat))
        self._builder.set_parameter("lon", _format_float(lon))
        return self._hub.run_query(self._builder.build(), WeatherInfo)

    def by_bounds(
        self, bbox: BoundingBox, zoom: int, cluster: bool
    ) -> Tuple[httpx.Response, WeatherBoxAggregate]:
        """Query current weather for cities inside a bounding box.

        The box is sent as ``left,bottom,right,top,zoom``.

        Args:
            bbox: Rectangle to search.
            zoom: Map zoom level, controls how many cities are returned.
            cluster: Whether the server should cluster nearby points.

        Returns:
            Tuple of the HTTP response and the decoded WeatherBoxAggregate.

        Example:
            >>> bbox = BoundingBox(top=43.73, bottom=43.7, left=10.38, right=10.42)
            >>> response, found = hub.current().by_bounds(bbox, 10, False)
            >>> found.cnt
            1
        """
        self._builder.set_endpoint(ENDPOINT_BOX)
        corners = (bbox.left, bbox.bottom, bbox.right, bbox.top)
        self._builder.set_parameter(
            "bbox", ",".join([*map(_format_float, corners), str(zoom)])
        )
        self._builder.set_parameter("cluster", _cluster_flag(cluster))
        return self._hub.run_query(self._builder.build(), WeatherBoxAggregate)

    def by_circle(
        self, lat: float, lon: float, count: int, cluster: bool
    ) -> Tuple[httpx.Response, WeatherAggregate]:
        """Query current weather for cities around a center point.

        Args:
            lat: Latitude of the center in decimal degrees.
            lon: Longitude of the center in decimal degrees.
            count: Number of cities expected in the result.
            cluster: Whether the server should cluster nearby points.

        Returns:
            Tuple of the HTTP response and the decoded WeatherAggregate.
        """
        self._builder.set_endpoint(ENDPOINT_FIND)
        self._builder.set_parameter("lat", _format_float(lat))
        self._builder.set_parameter("lon", _format_float(lon))
        self._builder.set_parameter("cnt", str(count))
        self._builder.set_parameter("cluster", _cluster_flag(cluster))
        return self._hub.run_query(self._builder.build(), WeatherAggregate)
