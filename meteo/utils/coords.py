# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
from __future__ import annotations
from dataclasses import dataclass
from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError
from timezonefinder import TimezoneFinder
from meteo.core.errors import InvalidCoordinate, TimezoneError

"""
Utilitário de coordenadas (lat/lon/timezone).


- `validate_coords()` garante latitude em [-90, 90] e longitude em [-180, 180] antes de qualquer rede.
- `resolve_timezone()` devolve o nome IANA do fuso das coordenadas (timezonefinder).
- `load_zone()` carrega o `ZoneInfo`; falhas viram `TimezoneError`.
"""


@dataclass(frozen=True)
class Coordinates:
    lat: float
    lon: float


def validate_coords(lat: float, lon: float) -> Coordinates:
    if lat is None or lon is None:
        raise InvalidCoordinate("coords unavailable")
    if not (-90.0 <= float(lat) <= 90.0):
        raise InvalidCoordinate(f"invalid latitude: {lat} (must be between -90 and 90 degrees)")
    if not (-180.0 <= float(lon) <= 180.0):
        raise InvalidCoordinate(f"invalid longitude: {lon} (must be between -180 and 180 degrees)")
    return Coordinates(float(lat), float(lon))


@lru_cache(maxsize=1)
def _finder() -> TimezoneFinder:
    return TimezoneFinder()


def resolve_timezone(coords: Coordinates) -> str:
    name = _finder().timezone_at(lng=coords.lon, lat=coords.lat)
    if not name:
        raise TimezoneError(f"no timezone found for lat={coords.lat} lon={coords.lon}")
    return name


def load_zone(name: str) -> ZoneInfo:
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise TimezoneError(f"load timezone {name!r}: {e}") from e
