import pytest

from meteo.core.errors import InvalidCoordinate, TimezoneError
from meteo.utils.coords import Coordinates, load_zone, resolve_timezone, validate_coords


@pytest.mark.parametrize(
    "lat, lon",
    [(0.0, 0.0), (90.0, 180.0), (-90.0, -180.0), (37.7749, -122.4194), (-45.0, -90.0)],
)
def test_validate_coords_accepts_range(lat, lon):
    assert validate_coords(lat, lon) == Coordinates(lat, lon)


@pytest.mark.parametrize(
    "lat, lon",
    [(-95.0, 0.0), (90.0001, 0.0), (0.0, -185.0), (0.0, 180.5), (100.0, 200.0)],
)
def test_validate_coords_rejects_out_of_range(lat, lon):
    with pytest.raises(InvalidCoordinate):
        validate_coords(lat, lon)


def test_validate_coords_rejects_missing():
    with pytest.raises(InvalidCoordinate):
        validate_coords(None, 10.0)


def test_resolve_timezone_known_city():
    assert resolve_timezone(Coordinates(55.7522, 37.6156)) == "Europe/Moscow"
    assert resolve_timezone(Coordinates(52.52, 13.405)) == "Europe/Berlin"


def test_load_zone_unknown_name():
    with pytest.raises(TimezoneError):
        load_zone("Mars/Olympus_Mons")
