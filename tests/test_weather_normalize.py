from datetime import datetime, timezone
from zoneinfo import ZoneInfo

from meteo.clients import meteoblue, open_meteo
from meteo.services.weather_normalize import normalize_meteoblue, normalize_open_meteo


def test_normalize_open_meteo(open_meteo_body):
    forecast = normalize_open_meteo(open_meteo.decode_response(open_meteo_body), "Europe/Berlin")

    assert len(forecast) == 2
    assert forecast.time[0] == datetime(2023, 1, 1, 12, 0, tzinfo=ZoneInfo("Europe/Berlin"))
    assert forecast.time[0].astimezone(timezone.utc) == datetime(2023, 1, 1, 11, 0, tzinfo=timezone.utc)
    assert forecast.temperature == (1.1, 2.2)
    assert forecast.precipitation_probability == (0.0, 10.0)
    assert forecast.wind_speed == (3.3, 4.4)
    assert forecast.condition == ("Clear sky", "Mainly clear")


def test_normalize_meteoblue(meteoblue_body):
    forecast = normalize_meteoblue(meteoblue.decode_response(meteoblue_body))

    assert forecast.time == (
        datetime(2021, 1, 1, 0, 0, tzinfo=timezone.utc),
        datetime(2021, 1, 1, 1, 0, tzinfo=timezone.utc),
    )
    assert forecast.temperature == (1.1, 2.2)
    assert forecast.precipitation_probability == (0.0, 0.1)
    assert forecast.wind_speed == (3.3, 4.4)
    assert forecast.condition == ("Clear, cloudless sky", "Partly cloudy")


def test_unknown_codes_normalize_to_empty_label():
    body = (
        b'{"latitude": 0, "longitude": 0, "hourly": {"time": ["2023-01-01T12:00"],'
        b' "temperature_2m": [1], "precipitation_probability": [2], "weathercode": [9999], "windspeed_10m": [3]}}'
    )
    forecast = normalize_open_meteo(open_meteo.decode_response(body), "UTC")
    assert forecast.condition == ("",)


def test_empty_series():
    body = (
        b'{"latitude": 0, "longitude": 0, "hourly": {"time": [],'
        b' "temperature_2m": [], "precipitation_probability": [], "weathercode": [], "windspeed_10m": []}}'
    )
    forecast = normalize_open_meteo(open_meteo.decode_response(body), "UTC")
    assert len(forecast) == 0
