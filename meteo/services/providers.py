# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, ClassVar, Optional, Protocol
import httpx
from meteo.clients import meteoblue, open_meteo
from meteo.clients.http import fetch_body
from meteo.core.config import MeteoConfig
from meteo.core.errors import ConfigError
from meteo.services.weather_normalize import NormalizedForecast, normalize_meteoblue, normalize_open_meteo
from meteo.utils.coords import Coordinates, resolve_timezone, validate_coords

"""
Providers de previsão (estratégias intercambiáveis).


- Contrato único: `fetch(coords) -> NormalizedForecast`.
- `OpenMeteoProvider`: URL pública + fuso IANA das coordenadas.
- `MeteoblueProvider`: URL assinada com api-key/shared-secret do config.
- `select_provider()` escolhe pelo nome ("openmeteo" | "meteoblue").
"""

OPENMETEO_NAME = "openmeteo"
METEOBLUE_NAME = "meteoblue"
PROVIDER_NAMES = (OPENMETEO_NAME, METEOBLUE_NAME)


class WeatherProvider(Protocol):
    name: ClassVar[str]

    def fetch(self, coords: Coordinates) -> NormalizedForecast:
        ...


@dataclass
class OpenMeteoProvider:
    client: httpx.Client
    timezone_lookup: Callable[[Coordinates], str] = resolve_timezone

    name: ClassVar[str] = OPENMETEO_NAME

    def fetch(self, coords: Coordinates) -> NormalizedForecast:
        coords = validate_coords(coords.lat, coords.lon)
        tz_name = self.timezone_lookup(coords)
        body = fetch_body(self.client, open_meteo.build_url(coords, tz_name))
        return normalize_open_meteo(open_meteo.decode_response(body), tz_name)


@dataclass
class MeteoblueProvider:
    client: httpx.Client
    api_key: str
    shared_secret: str

    name: ClassVar[str] = METEOBLUE_NAME

    def fetch(self, coords: Coordinates) -> NormalizedForecast:
        url = meteoblue.build_url(coords, self.api_key, self.shared_secret)
        body = fetch_body(self.client, url)
        return normalize_meteoblue(meteoblue.decode_response(body))


def select_provider(name: str, client: httpx.Client, config: Optional[MeteoConfig] = None) -> WeatherProvider:
    if name == OPENMETEO_NAME:
        return OpenMeteoProvider(client)
    if name == METEOBLUE_NAME:
        if config is None:
            raise ConfigError("meteoblue provider requires a config file (set METEO_CONFIG_PATH)")
        creds = config.meteoblue_credentials()
        return MeteoblueProvider(client, creds.api_key, creds.shared_secret)
    raise ConfigError(f"can't recognize weather API name {name!r} (expected one of: {', '.join(PROVIDER_NAMES)})")
