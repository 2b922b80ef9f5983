"""Exceptions for the OpenWeatherMap API client.

Every terminal query call either returns ``(response, payload)`` or raises
exactly one of the four errors defined here. All of them inherit from
OwmError for easy catching.

Example:
    Catching all owm errors::

        from owm import OwmError, WeatherHub

        try:
            with WeatherHub("YOUR_API_KEY") as hub:
                response, info = hub.current().by_name("Pisa", "IT")
        except OwmError as e:
            print(f"owm error: {e}")

    Handling each outcome::

        from owm import BadRequest, Failure, HttpError, JsonDecodeError

        try:
            response, info = hub.current().by_id(6542122)
        except BadRequest as e:
            print(f"Rejected: {e.message}")
        except Failure as e:
            print(f"HTTP {e.status_code}: {e.response.text}")
        except JsonDecodeError as e:
            print(f"Unexpected payload: {e.body}")
        except HttpError as e:
            print(f"Network error: {e.error}")
"""

from typing import Optional

import httpx
from pydantic import ValidationError

from .models import ErrorResponse


class OwmError(Exception):
    """Base exception for all owm errors.

    Example:
        >>> try:
        ...     hub.current().by_id(6542122)
        ... except OwmError as e:
        ...     print(f"Query failed: {e}")
    """

    pass


class HttpError(OwmError):
    """Raised when the HTTP request could not be performed.

    Covers connection failures, DNS errors, timeouts and every other
    error raised by the transport before a response was obtained.

    Args:
        error: The underlying httpx exception.

    Attributes:
        error: The underlying httpx exception.
    """

    def __init__(self, error: httpx.HTTPError) -> None:
        self.error = error
        super().__init__(f"HTTP error: {error}")


class BadRequest(OwmError):
    """Raised when the API rejects the request with a structured error.

    Args:
        error_response: The parsed error body.
        response: The HTTP response carrying the error.

    Attributes:
        error_response: The parsed error body.
        response: The HTTP response carrying the error.

    Example:
        >>> try:
        ...     hub.current().by_name("Atlantis")
        ... except BadRequest as e:
        ...     print(e.cod, e.message)
        404 city not found
    """

    def __init__(
        self, error_response: ErrorResponse, response: httpx.Response
    ) -> None:
        self.error_response = error_response
        self.response = response
        super().__init__(
            f"Bad request ({error_response.cod}): {error_response.message}"
        )

    @property
    def message(self) -> Optional[str]:
        """Human-readable message sent by the API."""
        return self.error_response.message

    @property
    def cod(self) -> Optional[int]:
        """Error code sent by the API."""
        return self.error_response.cod


class Failure(OwmError):
    """Raised on a non-success status whose body is not a known error.

    The raw response is kept so callers can inspect status, headers
    and body themselves.

    Args:
        response: The HTTP response.

    Attributes:
        response: The HTTP response.
    """

    def __init__(self, response: httpx.Response) -> None:
        self.response = response
        super().__init__(f"Request failed with HTTP {response.status_code}")

    @property
    def status_code(self) -> int:
        """HTTP status code of the response."""
        return self.response.status_code


class JsonDecodeError(OwmError):
    """Raised when a success response does not match the expected model.

    This usually means the live API drifted away from the schema this
    client expects.

    Args:
        body: Raw response body text.
        error: The validation error raised while decoding.

    Attributes:
        body: Raw response body text.
        error: The validation error raised while decoding.
    """

    def __init__(self, body: str, error: ValidationError) -> None:
        self.body = body
        self.error = error
        super().__init__(
            f"Invalid JSON received ({error.error_count()} errors): {body[:200]}"
        )
