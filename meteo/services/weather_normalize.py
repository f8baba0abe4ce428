# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timezone as dt_timezone
from typing import Tuple
from meteo.clients.meteoblue import MeteoblueWeatherData
from meteo.clients.open_meteo import OpenMeteoWeatherData
from meteo.core.errors import DecodeError
from meteo.utils.coords import load_zone
from meteo.utils.pictocodes import describe_pictocode
from meteo.utils.weather_codes import describe_weather

"""
Normalização dos payloads (Open‑Meteo / Meteoblue) para a série horária interna.


- `NormalizedForecast`: arrays paralelos imutáveis (time, temperature, precipitation, wind, condition).
- `time` é sempre timezone-aware: Open‑Meteo recebe o fuso pedido na URL, Meteoblue vem em UTC.
- Código de condição desconhecido => rótulo vazio (não é erro).
"""


@dataclass(frozen=True)
class NormalizedForecast:
    time: Tuple[datetime, ...]
    temperature: Tuple[float, ...]
    precipitation_probability: Tuple[float, ...]
    wind_speed: Tuple[float, ...]
    condition: Tuple[str, ...]

    def __len__(self) -> int:
        return len(self.time)


def normalize_open_meteo(raw: OpenMeteoWeatherData, tz_name: str) -> NormalizedForecast:
    """
    Converte o schema Open‑Meteo. `tz_name` é o fuso enviado em `&timezone=`:
    os horários do payload são hora de parede nesse fuso.
    """
    zone = load_zone(tz_name)
    hourly = raw.hourly
    return NormalizedForecast(
        time=tuple(t.replace(tzinfo=zone) for t in hourly.time),
        temperature=tuple(hourly.temperature_2m),
        precipitation_probability=tuple(hourly.precipitation_probability),
        wind_speed=tuple(hourly.windspeed_10m),
        condition=tuple(describe_weather(c) for c in hourly.weathercode),
    )


def _from_unix(ts: int) -> datetime:
    try:
        return datetime.fromtimestamp(ts, tz=dt_timezone.utc)
    except (OverflowError, OSError, ValueError) as e:
        raise DecodeError(f"unix timestamp out of range: {ts}") from e


def normalize_meteoblue(raw: MeteoblueWeatherData) -> NormalizedForecast:
    data = raw.data_1h
    return NormalizedForecast(
        time=tuple(_from_unix(ts) for ts in data.time),
        temperature=tuple(data.temperature),
        precipitation_probability=tuple(data.precipitation_probability),
        wind_speed=tuple(data.windspeed),
        condition=tuple(describe_pictocode(c) for c in data.pictocode),
    )
