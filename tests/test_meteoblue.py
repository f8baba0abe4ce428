from urllib.parse import parse_qsl, urlsplit

import pytest

from meteo.clients import meteoblue
from meteo.core.errors import DecodeError, InvalidCoordinate
from meteo.utils.coords import Coordinates


def test_generate_signature():
    assert meteoblue.generate_signature("hello", "world") == (
        "3cfa76ef14937c1c0ea519f8fc057a80fcd04a7420f8e8bcd0a7567c272e007b"
    )


@pytest.mark.parametrize(
    "api_key, secret, expected",
    [
        (
            "testApiKey", "testSecret",
            "https://my.meteoblue.com/packages/basic-1h?lat=37.774900&lon=-122.419400&apikey=testApiKey"
            "&expire=1924948800&forecast_days=3&temperature=C&timeformat=timestamp_utc"
            "&sig=ce1763b9edd8fc1e68ec7af70b81bf9ec8b1679b795eb189d88ec270ed22716a",
        ),
        (
            "", "",
            "https://my.meteoblue.com/packages/basic-1h?lat=37.774900&lon=-122.419400&apikey="
            "&expire=1924948800&forecast_days=3&temperature=C&timeformat=timestamp_utc"
            "&sig=dcf9f0a021f16c291f89bb0f3c9e4e561900e967b3d30fb159179f603b806eb8",
        ),
    ],
)
def test_build_url(api_key, secret, expected):
    assert meteoblue.build_url(Coordinates(37.7749, -122.4194), api_key, secret) == expected


def test_build_url_is_deterministic():
    coords = Coordinates(41.15, -8.61)
    first = meteoblue.build_url(coords, "key", "secret")
    second = meteoblue.build_url(coords, "key", "secret")
    assert first == second


def test_signature_round_trip():
    url = meteoblue.build_url(Coordinates(-33.9, 18.4), "key", "secret")
    signed, sig = url.split("&sig=")
    parts = urlsplit(signed)
    query = f"{parts.path}?{parts.query}"
    assert meteoblue.generate_signature(query, "secret") == sig
    assert dict(parse_qsl(parts.query))["lat"] == "-33.900000"


def test_build_url_invalid_coords():
    with pytest.raises(InvalidCoordinate):
        meteoblue.build_url(Coordinates(100.0, 200.0), "key", "secret")


def test_decode_response(meteoblue_body):
    data = meteoblue.decode_response(meteoblue_body)
    assert data.metadata.latitude == 0.0
    assert data.data_1h.time == [1609459200, 1609462800]
    assert data.data_1h.pictocode == [1, 7]


@pytest.mark.parametrize(
    "body",
    [
        b'{"broken json": {',
        b'{"metadata": {"latitude": 0, "longitude": 0}}',
        b'{"metadata": {"latitude": 0, "longitude": 0}, "data_1h": {"time": ["2021-01-01T00:00"],'
        b' "temperature": [1], "precipitation_probability": [0], "pictocode": [1], "windspeed": [1]}}',
        b'{"metadata": {"latitude": 0, "longitude": 0}, "data_1h": {"time": [1609459200],'
        b' "temperature": [], "precipitation_probability": [0], "pictocode": [1], "windspeed": [1]}}',
    ],
)
def test_decode_response_errors(body):
    with pytest.raises(DecodeError):
        meteoblue.decode_response(body)
