"""DataFrame conversion utilities for owm payloads.

This module provides a function to convert weather payloads to pandas
DataFrames for easier analysis of multi-city results.

Requirements:
    pandas >= 2.0 must be installed. Install with:
        pip install pandas
    Or install owm with the dataframe extra:
        pip install owm[dataframe]

Functions:
    to_dataframe: Convert any payload to a pandas DataFrame

Example:
    Basic usage::

        from owm import BoundingBox, Units, WeatherHub
        from owm.dataframe import to_dataframe

        with WeatherHub("YOUR_API_KEY") as hub:
            bbox = BoundingBox(top=44.0, bottom=43.0, left=10.0, right=11.5)
            _, found = hub.current().units(Units.METRIC).by_bounds(bbox, 10, False)

            df = to_dataframe(found)
            print(df[["name", "main_temp", "wind_speed"]])
"""

from typing import Any, Union

from .models import WeatherAggregate, WeatherBoxAggregate, WeatherInfo

_TIMESTAMP_COLUMNS = ("dt", "sys_sunrise", "sys_sunset")


def _check_pandas() -> None:
    """Check if pandas is installed and raise informative error if not."""
    try:
        import pandas  # noqa: F401
    except ImportError as e:
        raise ImportError(
            "pandas is required for DataFrame conversion. "
            "Install it with: pip install pandas"
        ) from e


def _flatten(info: WeatherInfo) -> dict[str, Any]:
    """Dump a WeatherInfo into a flat row.

    Nested records become ``<record>_<field>`` columns. Only the first
    weather condition is kept, as ``weather_*`` columns.
    """
    data = info.model_dump(exclude_none=True)
    conditions = data.pop("weather", [])

    row: dict[str, Any] = {}
    for key, value in data.items():
        if isinstance(value, dict):
            for sub_key, sub_value in value.items():
                row[f"{key}_{sub_key}"] = sub_value
        else:
            row[key] = value

    if conditions:
        for sub_key, sub_value in conditions[0].items():
            row[f"weather_{sub_key}"] = sub_value
    return row


def to_dataframe(
    payload: Union[WeatherInfo, WeatherAggregate, WeatherBoxAggregate],
) -> "pd.DataFrame":
    """Convert an owm payload to a pandas DataFrame.

    Args:
        payload: Payload returned by a query. Can be:
            - WeatherInfo: from by_name(), by_id(), by_zip_code() or
              by_coords(); gives a single row
            - WeatherAggregate: from by_circle(); one row per city
            - WeatherBoxAggregate: from by_bounds(); one row per city

    Returns:
        pandas DataFrame with one column per present field, nested
        records flattened (coord_lat, main_temp, wind_speed, ...).
        The dt, sys_sunrise and sys_sunset columns are converted to
        timezone-aware UTC datetimes.

    Raises:
        ImportError: If pandas is not installed.
        ValueError: If payload type is not recognized.

    Example:
        >>> _, found = hub.current().by_circle(43.71, 10.41, 10, False)
        >>> df = to_dataframe(found)
        >>> df.columns
        Index(['coord_lon', 'coord_lat', 'main_temp', ...], dtype='object')
    """
    _check_pandas()
    import pandas as pd

    if isinstance(payload, WeatherInfo):
        items = [payload]
    elif isinstance(payload, (WeatherAggregate, WeatherBoxAggregate)):
        items = payload.list or []
    else:
        raise ValueError(
            f"Unsupported payload type: {type(payload).__name__}. "
            "Expected WeatherInfo, WeatherAggregate, or WeatherBoxAggregate."
        )

    df = pd.DataFrame([_flatten(info) for info in items])
    for column in _TIMESTAMP_COLUMNS:
        if column in df.columns:
            df[column] = pd.to_datetime(df[column], unit="s", utc=True)
    return df


__all__ = ["to_dataframe"]
