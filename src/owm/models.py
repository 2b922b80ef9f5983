"""Pydantic models for OpenWeatherMap API requests and responses.

This module defines data models for parsing and validating responses
from the OpenWeatherMap current weather API.

Key model groups:
    1. **Inputs**: BoundingBox
    2. **Building blocks**: Coordinates, Weather, Main, Wind, Clouds,
       Precipitation, Sys
    3. **Payloads**: WeatherInfo, WeatherAggregate, WeatherBoxAggregate
    4. **Error handling**: ErrorResponse

Note:
    The API may omit any field in any response, so every payload field
    is optional and defaults to None. Nothing is assumed present.

Example:
    Accessing a single-location result::

        response, info = hub.current().by_name("Pisa", "IT")
        print(f"{info.name}: {info.coord.lat}, {info.coord.lon}")
        for condition in info.weather or []:
            print(f"{condition.main}: {condition.description}")

    Iterating a multi-location result::

        response, found = hub.current().by_circle(43.71, 10.41, 10, False)
        for city in found.list or []:
            print(f"{city.name}: {city.main.temp}")
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class BoundingBox(BaseModel):
    """Rectangle used by bounding-box searches, in decimal degrees.

    No range checks are applied; the API itself rejects invalid boxes.

    Attributes:
        top: Northern latitude.
        bottom: Southern latitude.
        left: Western longitude.
        right: Eastern longitude.

    Example:
        >>> BoundingBox(top=43.73, bottom=43.7, left=10.38, right=10.42)
        BoundingBox(top=43.73, bottom=43.7, left=10.38, right=10.42)
    """

    top: float
    bottom: float
    left: float
    right: float


class Coordinates(BaseModel):
    """Geographic coordinates of a location.

    Attributes:
        lon: Longitude in decimal degrees.
        lat: Latitude in decimal degrees.
    """

    lon: Optional[float] = None
    lat: Optional[float] = None


class Weather(BaseModel):
    """A weather condition record.

    See https://openweathermap.org/weather-conditions for the codes.

    Attributes:
        id: Weather condition id.
        main: Group of weather parameters (Rain, Snow, Clouds, ...).
        description: Condition within the group. Translated when a
            language is requested.
        icon: Weather icon id.
    """

    id: Optional[int] = None
    main: Optional[str] = None
    description: Optional[str] = None
    icon: Optional[str] = None


class Main(BaseModel):
    """General atmospheric parameters.

    Temperatures are in Kelvin by default, °C with Units.METRIC and
    °F with Units.IMPERIAL.

    Attributes:
        temp: Current temperature.
        feels_like: Perceived temperature.
        pressure: Atmospheric pressure in hPa.
        humidity: Humidity in %.
        temp_min: Minimum temperature observed across the area.
        temp_max: Maximum temperature observed across the area.
        sea_level: Atmospheric pressure at sea level in hPa.
        grnd_level: Atmospheric pressure at ground level in hPa.
    """

    temp: Optional[float] = None
    feels_like: Optional[float] = None
    pressure: Optional[float] = None
    humidity: Optional[float] = None
    temp_min: Optional[float] = None
    temp_max: Optional[float] = None
    sea_level: Optional[float] = None
    grnd_level: Optional[float] = None


class Wind(BaseModel):
    """Wind information.

    Attributes:
        speed: Wind speed. m/s by default and with Units.METRIC,
            miles/hour with Units.IMPERIAL.
        deg: Meteorological wind direction in degrees.
        gust: Wind gust, same unit as speed.
    """

    speed: Optional[float] = None
    deg: Optional[float] = None
    gust: Optional[float] = None


class Clouds(BaseModel):
    """Cloud information.

    Attributes:
        all: Cloudiness in %.
    """

    all: Optional[int] = None


class Precipitation(BaseModel):
    """Rain or snow volume.

    The API uses the keys ``"1h"`` and ``"3h"``; they are exposed as
    ``one_hour`` and ``three_hours``.

    Attributes:
        one_hour: Volume for the last hour in mm.
        three_hours: Volume for the last 3 hours in mm.
    """

    model_config = ConfigDict(populate_by_name=True)

    one_hour: Optional[float] = Field(default=None, alias="1h")
    three_hours: Optional[float] = Field(default=None, alias="3h")


class Sys(BaseModel):
    """Internal API parameters and location metadata.

    Attributes:
        type: Internal parameter.
        id: Internal parameter.
        message: Internal parameter.
        country: ISO 3166 country code.
        sunrise: Sunrise time, Unix seconds, UTC.
        sunset: Sunset time, Unix seconds, UTC.
    """

    type: Optional[int] = None
    id: Optional[int] = None
    message: Optional[float] = None
    country: Optional[str] = None
    sunrise: Optional[int] = None
    sunset: Optional[int] = None


class WeatherInfo(BaseModel):
    """Current weather for a single location.

    Returned by by_name(), by_id(), by_zip_code() and by_coords(), and
    used as the list item type of the aggregate payloads.

    Attributes:
        coord: Location coordinates.
        weather: Weather condition records.
        base: Internal parameter.
        main: General atmospheric parameters.
        visibility: Visibility in meters.
        wind: Wind information.
        clouds: Cloud information.
        rain: Rain volume.
        snow: Snow volume.
        dt: Time of data calculation, Unix seconds, UTC.
        sys: Internal parameters, country, sunrise and sunset.
        timezone: Shift from UTC in seconds.
        id: City id.
        name: City name.
        cod: Internal status code.

    Example:
        >>> info = WeatherInfo.model_validate_json(
        ...     '{"name": "Pisa", "coord": {"lat": 43.71, "lon": 10.41}}'
        ... )
        >>> info.name, info.coord.lat, info.main
        ('Pisa', 43.71, None)
    """

    model_config = ConfigDict(extra="allow")

    coord: Optional[Coordinates] = None
    weather: Optional[List[Weather]] = None
    base: Optional[str] = None
    main: Optional[Main] = None
    visibility: Optional[int] = None
    wind: Optional[Wind] = None
    clouds: Optional[Clouds] = None
    rain: Optional[Precipitation] = None
    snow: Optional[Precipitation] = None
    dt: Optional[int] = None
    sys: Optional[Sys] = None
    timezone: Optional[int] = None
    id: Optional[int] = None
    name: Optional[str] = None
    cod: Optional[int] = None


class WeatherAggregate(BaseModel):
    """Result of a circle search (``find`` endpoint).

    Attributes:
        message: Search accuracy, "accurate" or "like".
        cod: Internal status code.
        count: Number of items in list.
        list: Weather for each city found.
    """

    model_config = ConfigDict(extra="allow")

    message: Optional[str] = None
    cod: Optional[int] = None
    count: Optional[int] = None
    list: Optional[List[WeatherInfo]] = None


class WeatherBoxAggregate(BaseModel):
    """Result of a bounding-box search (``box/city`` endpoint).

    Attributes:
        cod: Internal status code.
        calctime: Server-side processing time in seconds.
        cnt: Number of items in list.
        list: Weather for each city inside the box.
    """

    model_config = ConfigDict(extra="allow")

    cod: Optional[int] = None
    calctime: Optional[float] = None
    cnt: Optional[int] = None
    list: Optional[List[WeatherInfo]] = None


class ErrorResponse(BaseModel):
    """Error body sent by the API for a rejected request.

    The API sends ``cod`` either as a number or as a numeric string;
    both are accepted.

    Attributes:
        cod: HTTP-like error code.
        message: Human-readable error message.

    Example:
        >>> # This is what an error response looks like
        >>> {"cod": "404", "message": "city not found"}
    """

    cod: Optional[int] = None
    message: Optional[str] = None
