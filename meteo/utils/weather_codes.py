# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
from __future__ import annotations
from types import MappingProxyType
from typing import Mapping, Optional

"""
Mapeamento dos códigos meteorológicos (WMO) do Open‑Meteo.


- `WEATHER_CODE_MAP` traduz códigos → texto legível (somente leitura).
- `describe_weather(code)` devolve a descrição; código desconhecido => "" (não é erro).
- Tabela baseada nos códigos Open-Meteo: https://open-meteo.com/en/docs
"""

WEATHER_CODE_MAP: Mapping[int, str] = MappingProxyType({
    0:  "Clear sky",
    1:  "Mainly clear",
    2:  "Partly cloudy",
    3:  "Overcast",
    45: "Fog",
    48: "Rime fog",
    51: "Light drizzle",
    53: "Moderate drizzle",
    55: "Dense drizzle",
    56: "Light freezing drizzle",
    57: "Dense freezing drizzle",
    61: "Slight rain",
    63: "Moderate rain",
    65: "Heavy rain",
    66: "Light freezing rain",
    67: "Heavy freezing rain",
    71: "Slight snow",
    73: "Moderate snow",
    75: "Heavy snow",
    77: "Snow grains",
    80: "Slight rain",
    81: "Moderate rain",
    82: "Heavy rain",
    85: "Slight snow",
    86: "Heavy snow",
    95: "Thunderstorm",
    96: "Thunderstorm with slight hail",
    99: "Thunderstorm with heavy hail",
})


def describe_weather(code: Optional[int]) -> str:
    if code is None:
        return ""
    return WEATHER_CODE_MAP.get(int(code), "")
