import importlib.util
from pathlib import Path

import pytest
from unittest.mock import MagicMock, patch

from owm.models import (
    Coordinates,
    Main,
    Weather,
    WeatherAggregate,
    WeatherBoxAggregate,
    WeatherInfo,
    Wind,
)


def _pisa(**overrides):
    data = dict(
        id=6542122,
        name="Pisa",
        dt=1700000000,
        coord=Coordinates(lat=43.71, lon=10.41),
        main=Main(temp=18.5, humidity=60),
        wind=Wind(speed=2.1, deg=250),
        weather=[
            Weather(id=800, main="Clear", description="clear sky"),
            Weather(id=701, main="Mist", description="mist"),
        ],
    )
    data.update(overrides)
    return WeatherInfo(**data)


class TestToDataframeWeatherInfo:
    def test_single_row(self):
        pytest.importorskip("pandas")
        from owm.dataframe import to_dataframe

        df = to_dataframe(_pisa())

        assert df.shape[0] == 1
        assert df["name"].tolist() == ["Pisa"]
        assert df["coord_lat"].tolist() == [43.71]
        assert df["main_temp"].tolist() == [18.5]
        assert df["wind_speed"].tolist() == [2.1]

    def test_first_condition_only(self):
        pytest.importorskip("pandas")
        from owm.dataframe import to_dataframe

        df = to_dataframe(_pisa())

        assert df["weather_main"].tolist() == ["Clear"]
        assert df["weather_description"].tolist() == ["clear sky"]
        assert "weather" not in df.columns

    def test_absent_fields_have_no_columns(self):
        pytest.importorskip("pandas")
        from owm.dataframe import to_dataframe

        df = to_dataframe(WeatherInfo(name="Pisa"))

        assert list(df.columns) == ["name"]

    def test_converts_timestamps(self):
        pytest.importorskip("pandas")
        from owm.dataframe import to_dataframe
        import pandas as pd

        df = to_dataframe(_pisa())

        assert pd.api.types.is_datetime64_any_dtype(df["dt"])
        assert df["dt"].iloc[0] == pd.Timestamp("2023-11-14 22:13:20", tz="UTC")


class TestToDataframeAggregates:
    def test_circle_aggregate(self):
        pytest.importorskip("pandas")
        from owm.dataframe import to_dataframe

        payload = WeatherAggregate(
            message="accurate",
            cod=200,
            count=2,
            list=[_pisa(), _pisa(id=3170647, name="Cascina", main=Main(temp=17.0))],
        )

        df = to_dataframe(payload)

        assert df.shape[0] == 2
        assert df["name"].tolist() == ["Pisa", "Cascina"]
        assert df["main_temp"].tolist() == [18.5, 17.0]

    def test_box_aggregate_missing_values(self):
        pytest.importorskip("pandas")
        from owm.dataframe import to_dataframe

        payload = WeatherBoxAggregate(
            cnt=2, list=[_pisa(), WeatherInfo(name="San Giuliano Terme")]
        )

        df = to_dataframe(payload)

        assert df.shape[0] == 2
        assert df["main_temp"].isna().tolist() == [False, True]

    def test_empty_aggregate(self):
        pytest.importorskip("pandas")
        from owm.dataframe import to_dataframe

        df = to_dataframe(WeatherBoxAggregate(cnt=0))

        assert df.empty


class TestToDataframeErrors:
    def test_unsupported_type(self):
        pytest.importorskip("pandas")
        from owm.dataframe import to_dataframe

        with pytest.raises(ValueError) as exc_info:
            to_dataframe(Main(temp=1.0))
        assert "Unsupported payload type: Main" in str(exc_info.value)

    def test_missing_pandas(self):
        from owm import dataframe

        with patch.dict("sys.modules", {"pandas": None}):
            with pytest.raises(ImportError) as exc_info:
                dataframe.to_dataframe(_pisa())
        assert "pip install pandas" in str(exc_info.value)

    def test_usage_example_without_pandas(self, capsys):
        path = Path(__file__).parent.parent / "examples" / "basic_usage.py"
        spec = importlib.util.spec_from_file_location("basic_usage", path)
        example = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(example)

        hub = MagicMock()
        query = hub.current.return_value.units.return_value
        query.by_circle.return_value = (None, WeatherAggregate(list=[_pisa()]))

        with patch.dict("sys.modules", {"pandas": None}):
            example.dataframe_example(hub)

        assert "pip install owm[dataframe]" in capsys.readouterr().out
