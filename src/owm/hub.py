"""Entry point for the OpenWeatherMap API.

This module provides WeatherHub, which holds the API key and the HTTP
transport, hands out pre-authenticated queries and executes them.

Key features:
    - Current weather by city name, city id, ZIP code or coordinates
    - Current weather for all cities in a bounding box or circle
    - Optional unit system and language modifiers
    - Typed pydantic payloads, every field optional
    - One request per call: no caching, no retries

Configuration:
    The API key is passed to the constructor or read from the
    OWM_API_KEY environment variable with WeatherHub.from_env(). The
    transport is an httpx.Client; pass your own to control timeouts,
    proxies or connection limits, or let the hub create one.

Example:
    Fetch current weather::

        from owm import WeatherHub

        with WeatherHub("YOUR_API_KEY") as hub:
            response, info = hub.current().by_name("London", "UK")
            print(f"{info.name}: {info.main.temp} K")
"""

import logging
import os
from typing import Any, Optional, Tuple, Type, TypeVar

import httpx
from pydantic import BaseModel

from .current import CurrentWeatherQuery
from .exceptions import HttpError
from .response import resolve_response
from .types import API_BASE_URL, API_KEY_ENV_VAR, DEFAULT_TIMEOUT
from .uri import UriBuilder

logger = logging.getLogger(__name__)

PayloadT = TypeVar("PayloadT", bound=BaseModel)


def _redact(url: str) -> str:
    """Mask the API key in a URL before logging it."""
    parsed = httpx.URL(url)
    if "appid" not in parsed.params:
        return url
    return str(parsed.copy_set_param("appid", "REDACTED"))


class WeatherHub:
    """Central hub to access all weather-related facilities.

    The hub is read-only after construction, so a single instance can
    be shared between threads as long as the transport is thread-safe
    (httpx.Client is).

    Args:
        api_key: OpenWeatherMap API key, sent as ``appid`` on every request.
        client: HTTP client to use. When omitted, the hub creates one and
            closes it in close().
        base_url: Scheme and host of the API. Defaults to API_BASE_URL.
        timeout: Timeout in seconds for the client created by the hub.
            Ignored when client is given. Defaults to 30.0.

    Attributes:
        base_url: Scheme and host of the API.

    Example:
        Using as context manager (recommended)::

            with WeatherHub("YOUR_API_KEY") as hub:
                response, info = hub.current().by_id(6542122)

        Sharing an existing client::

            with httpx.Client(timeout=5.0) as client:
                hub = WeatherHub("YOUR_API_KEY", client=client)
                response, info = hub.current().by_coords(43.71, 10.41)
    """

    def __init__(
        self,
        api_key: str,
        *,
        client: Optional[httpx.Client] = None,
        base_url: str = API_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._key = api_key
        self.base_url = base_url
        self._owns_client = client is None
        self._client = client if client is not None else httpx.Client(timeout=timeout)

    @classmethod
    def from_env(cls, **kwargs: Any) -> "WeatherHub":
        """Create a hub with the API key taken from OWM_API_KEY.

        Args:
            **kwargs: Passed through to the constructor.

        Returns:
            A new WeatherHub.

        Raises:
            ValueError: If OWM_API_KEY is unset or empty.

        Example:
            >>> hub = WeatherHub.from_env(timeout=10.0)
        """
        api_key = os.environ.get(API_KEY_ENV_VAR, "")
        if not api_key:
            raise ValueError(
                f"{API_KEY_ENV_VAR} is not set; get an API key at "
                "https://openweathermap.org/appid"
            )
        return cls(api_key, **kwargs)

    def __enter__(self) -> "WeatherHub":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the HTTP client if the hub created it. Safe to call twice."""
        if self._owns_client:
            self._client.close()

    def current(self) -> CurrentWeatherQuery:
        """Provide access to the current weather facilities.

        Returns:
            A new CurrentWeatherQuery seeded with the API key.

        Example:
            >>> response, info = hub.current().lang("it").by_name("Pisa", "IT")
        """
        builder = UriBuilder(self.base_url).set_parameter("appid", self._key)
        return CurrentWeatherQuery(self, builder)

    def run_query(
        self, url: str, payload_model: Type[PayloadT]
    ) -> Tuple[httpx.Response, PayloadT]:
        """Perform the GET request and resolve the response.

        Args:
            url: Fully built request URL.
            payload_model: Model the body must match on success.

        Returns:
            Tuple of the HTTP response and the decoded payload.

        Raises:
            HttpError: If the request could not be performed.
            BadRequest: If the API rejected the request with an error body.
            Failure: If the API answered with a non-success status and
                an unrecognized body.
            JsonDecodeError: If a success body does not match payload_model.
        """
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"GET {_redact(url)}")

        try:
            response = self._client.get(url)
        except httpx.HTTPError as e:
            logger.debug(f"Request failed: {e}")
            raise HttpError(e) from e

        return resolve_response(response, payload_model)
