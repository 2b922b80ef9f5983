"""Basic usage examples for the owm client.

Set OWM_API_KEY before running.
"""

from owm import BadRequest, BoundingBox, OwmError, Units, WeatherHub
from owm.dataframe import to_dataframe


def by_name_example(hub: WeatherHub) -> None:
    """Get current weather by city name."""
    _, info = hub.current().units(Units.METRIC).by_name("Pisa", "IT")

    print("=== Current Weather ===")
    print(f"Location: {info.name} ({info.coord.lat}, {info.coord.lon})")
    print(f"Temperature: {info.main.temp}°C")
    print(f"Humidity: {info.main.humidity}%")
    print(f"Wind: {info.wind.speed} m/s")


def language_example(hub: WeatherHub) -> None:
    """Compare condition descriptions in two languages."""
    _, english = hub.current().by_id(6542122)
    _, italian = hub.current().lang("it").by_id(6542122)

    print("\n=== Descriptions ===")
    print(f"en: {english.weather[0].description}")
    print(f"it: {italian.weather[0].description}")


def bounding_box_example(hub: WeatherHub) -> None:
    """Get current weather for every city in a box."""
    bbox = BoundingBox(top=44.0, bottom=43.0, left=10.0, right=11.5)
    _, found = hub.current().units(Units.METRIC).by_bounds(bbox, 10, False)

    print(f"\n=== {found.cnt} cities in box ===")
    for city in found.list or []:
        print(f"{city.name}: {city.main.temp}°C")


def circle_example(hub: WeatherHub) -> None:
    """Get current weather for cities around a point."""
    _, found = hub.current().units(Units.METRIC).by_circle(43.71, 10.41, 5, False)

    print(f"\n=== {found.count} cities around Pisa ===")
    for city in found.list or []:
        print(f"{city.name}: {city.main.temp}°C")


def error_example(hub: WeatherHub) -> None:
    """Handle a structured API error."""
    print("\n=== Error Handling ===")
    try:
        hub.current().by_name("Nowhereville", "ZZ")
    except BadRequest as e:
        print(f"API said {e.cod}: {e.message}")


def dataframe_example(hub: WeatherHub) -> None:
    """Convert to pandas DataFrame."""
    print("\n=== DataFrame Example ===")
    _, found = hub.current().units(Units.METRIC).by_circle(43.71, 10.41, 10, False)
    try:
        df = to_dataframe(found)
    except ImportError:
        print("Install pandas: pip install owm[dataframe]")
        return

    print(f"Shape: {df.shape}")
    print(df[["name", "main_temp", "wind_speed"]].head())


def main() -> None:
    """Run all examples."""
    with WeatherHub.from_env() as hub:
        try:
            by_name_example(hub)
            language_example(hub)
            bounding_box_example(hub)
            circle_example(hub)
            error_example(hub)
            dataframe_example(hub)
        except OwmError as e:
            print(f"Request failed: {e}")


if __name__ == "__main__":
    main()
