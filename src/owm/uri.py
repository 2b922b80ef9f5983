"""URL building for OpenWeatherMap API requests."""

import httpx

from .types import API_BASE_URL, API_VERSION


class UriBuilder:
    """Accumulates an endpoint and query parameters into a request URL.

    A builder is created fresh for each query and consumed by build().
    Parameters are unique by key (last write wins); their order in the
    rendered query string is not significant.

    Args:
        base_url: Scheme and host of the API. Defaults to API_BASE_URL.

    Attributes:
        api_version: Version segment of the data API path.
        endpoint: Path segment of the remote operation.
        parameters: Query parameters, already formatted as strings.

    Example:
        >>> builder = UriBuilder().set_endpoint("weather")
        >>> builder.set_parameter("q", "Pisa,IT").build()
        'http://api.openweathermap.org/data/2.5/weather?q=Pisa%2CIT'
    """

    api_version = API_VERSION

    def __init__(self, base_url: str = API_BASE_URL) -> None:
        self._base_url = base_url.rstrip("/")
        self._built = False
        self.endpoint = ""
        self.parameters: dict[str, str] = {}

    def _check_open(self) -> None:
        if self._built:
            raise RuntimeError("UriBuilder has already been consumed by build()")

    def set_endpoint(self, name: str) -> "UriBuilder":
        """Set the endpoint appended after ``/data/<api_version>/``.

        Args:
            name: Endpoint path, e.g. "weather" or "box/city".

        Returns:
            The builder, for chaining.
        """
        self._check_open()
        self.endpoint = name
        return self

    def set_parameter(self, key: str, value: str) -> "UriBuilder":
        """Insert or overwrite a query parameter.

        Values must already be formatted by the caller (floats with
        str(), flags as "yes"/"no").

        Args:
            key: Parameter name.
            value: Parameter value.

        Returns:
            The builder, for chaining.
        """
        self._check_open()
        self.parameters[key] = value
        return self

    def build(self) -> str:
        """Render the request URL and consume the builder.

        Returns:
            ``<base>/data/<api_version>/<endpoint>``, followed by a
            form-urlencoded query string when parameters were set.

        Raises:
            ValueError: If no endpoint was set.
            RuntimeError: If the builder was already consumed.
        """
        self._check_open()
        if not self.endpoint:
            raise ValueError("An endpoint must be set before building the URL")
        self._built = True

        base = f"{self._base_url}/data/{self.api_version}/{self.endpoint}"
        if not self.parameters:
            return base
        return f"{base}?{httpx.QueryParams(self.parameters)}"
