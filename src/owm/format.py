"""Response format modifiers shared by every query class."""

from typing import TypeVar, Union

from .types import Units
from .uri import UriBuilder

QueryT = TypeVar("QueryT", bound="ResponseFormatMixin")


class ResponseFormatMixin:
    """Adds units() and lang() to a query that owns a UriBuilder.

    Both modifiers may be called any number of times before the terminal
    query method; the last value for each parameter wins.

    Example:
        >>> hub.current().units(Units.METRIC).lang("it").by_id(6542122)
    """

    _builder: UriBuilder

    def units(self: QueryT, value: Union[Units, str]) -> QueryT:
        """Request measurements in the given unit system.

        Args:
            value: Units.METRIC or Units.IMPERIAL, or their string values.

        Returns:
            The query, for chaining.

        Raises:
            ValueError: If value is not a known unit system.
        """
        self._builder.set_parameter("units", Units(value).value)
        return self

    def lang(self: QueryT, code: str) -> QueryT:
        """Request condition descriptions in the given language.

        Only the textual ``description`` of weather condition records is
        affected, numeric fields are not.

        Args:
            code: Language code, e.g. "it" or "zh_cn".

        Returns:
            The query, for chaining.
        """
        self._builder.set_parameter("lang", code)
        return self
