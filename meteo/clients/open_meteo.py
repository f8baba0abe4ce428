# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
from __future__ import annotations
import json
from datetime import datetime
from typing import Any, List, Union
from urllib.parse import quote
from pydantic import BaseModel, ValidationError, field_validator, model_validator
from meteo.core.errors import DecodeError, MalformedTimestamp
from meteo.utils.coords import Coordinates, validate_coords

"""
Client Open‑Meteo (previsão horária, 3 dias).


- `build_url(coords, timezone)` monta a URL com lat/lon, fuso IANA e campos fixos.
- `OpenMeteoWeatherData`: schema do payload; `hourly.time` chega como `YYYY-MM-DDTHH:MM` sem fuso.
- `parse_timestamps()` / `decode_time_array()` convertem os horários (hora local do fuso pedido).
- `decode_response(body)` retorna o schema validado ou lança `DecodeError` / `MalformedTimestamp`.
"""

OPEN_METEO_BASE_URL = "https://api.open-meteo.com/v1/forecast"
OPEN_METEO_HOURLY_PARAMS = "temperature_2m,precipitation_probability,weathercode,windspeed_10m"
OPEN_METEO_FORECAST_DAYS = 3

TIME_LAYOUT = "%Y-%m-%dT%H:%M"


def build_url(coords: Coordinates, timezone: str) -> str:
    coords = validate_coords(coords.lat, coords.lon)
    return (
        f"{OPEN_METEO_BASE_URL}?latitude={coords.lat:f}&longitude={coords.lon:f}"
        f"&timezone={quote(timezone, safe='/')}"
        f"&hourly={OPEN_METEO_HOURLY_PARAMS}&forecast_days={OPEN_METEO_FORECAST_DAYS}"
    )


def parse_timestamps(values: Any) -> List[datetime]:
    """
    Converte a lista `hourly.time` em datetimes *naive* (hora de parede do fuso pedido).
    "2023-01-01T12:00" => datetime(2023, 1, 1, 12, 0) sem tzinfo, e não um instante UTC:
    o payload vem no fuso enviado em `&timezone=` e `normalize_open_meteo()` anexa esse fuso.
    Qualquer elemento que não seja string no layout exato => `MalformedTimestamp`.
    """
    if not isinstance(values, list):
        raise MalformedTimestamp(f"expected list of timestamps, got: {type(values).__name__}")

    out: List[datetime] = []
    for idx, v in enumerate(values):
        if not isinstance(v, str):
            raise MalformedTimestamp(f"timestamp #{idx} is not a string: {v!r}")
        try:
            out.append(datetime.strptime(v, TIME_LAYOUT))
        except ValueError as e:
            raise MalformedTimestamp(f"timestamp #{idx} {v!r} does not match {TIME_LAYOUT}") from e
    return out


def decode_time_array(data: Union[bytes, str]) -> List[datetime]:
    """Decodifica um array JSON de timestamps isolado (ex.: `["2023-01-01T12:00"]`)."""
    try:
        values = json.loads(data)
    except ValueError as e:
        raise MalformedTimestamp(f"malformed timestamp array: {e}") from e
    return parse_timestamps(values)


# Schemas
class OpenMeteoHourly(BaseModel):
    time: List[datetime]
    temperature_2m: List[float]
    precipitation_probability: List[float]
    weathercode: List[int]
    windspeed_10m: List[float]

    @field_validator("time", mode="before")
    @classmethod
    def _parse_time(cls, v: Any) -> List[datetime]:
        return parse_timestamps(v)

    @model_validator(mode="after")
    def _same_length(self) -> "OpenMeteoHourly":
        n = len(self.time)
        arrays = (self.temperature_2m, self.precipitation_probability, self.weathercode, self.windspeed_10m)
        if not all(len(a) == n for a in arrays):
            raise ValueError("hourly arrays have inconsistent lengths")
        return self


class OpenMeteoWeatherData(BaseModel):
    latitude: float
    longitude: float
    timezone: str = ""
    hourly: OpenMeteoHourly


def decode_response(body: bytes) -> OpenMeteoWeatherData:
    try:
        return OpenMeteoWeatherData.model_validate_json(body)
    except ValidationError as e:
        raise DecodeError(f"decode open-meteo response: {e}") from e
