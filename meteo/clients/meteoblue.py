# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
from __future__ import annotations
import hashlib
import hmac
from typing import List
from pydantic import BaseModel, ValidationError, model_validator
from meteo.core.errors import DecodeError
from meteo.utils.coords import Coordinates, validate_coords

"""
Client Meteoblue (pacote basic-1h, URL assinada).


- `build_url(coords, api_key, shared_secret)` monta path+query e acrescenta `sig` (HMAC-SHA256 em hex).
- Expiração fixa (2030-12-31): mesma entrada => mesma URL e mesma assinatura.
- `MeteoblueWeatherData`: schema do payload; `data_1h.time` em segundos unix (UTC).
"""

METEOBLUE_HOST = "https://my.meteoblue.com"
METEOBLUE_PACKAGE_PATH = "/packages/basic-1h"
METEOBLUE_EXPIRE = 1924948800
METEOBLUE_FORECAST_DAYS = 3


def generate_signature(data: str, secret: str) -> str:
    return hmac.new(secret.encode("utf-8"), data.encode("utf-8"), hashlib.sha256).hexdigest()


def build_query(coords: Coordinates, api_key: str) -> str:
    """Path+query exatamente como é assinado."""
    return (
        f"{METEOBLUE_PACKAGE_PATH}?lat={coords.lat:.6f}&lon={coords.lon:.6f}"
        f"&apikey={api_key}&expire={METEOBLUE_EXPIRE}"
        f"&forecast_days={METEOBLUE_FORECAST_DAYS}&temperature=C&timeformat=timestamp_utc"
    )


def build_url(coords: Coordinates, api_key: str, shared_secret: str) -> str:
    coords = validate_coords(coords.lat, coords.lon)
    query = build_query(coords, api_key)
    sig = generate_signature(query, shared_secret)
    return f"{METEOBLUE_HOST}{query}&sig={sig}"


# Schemas
class MeteoblueMetadata(BaseModel):
    latitude: float
    longitude: float


class MeteoblueData1h(BaseModel):
    time: List[int]
    temperature: List[float]
    precipitation_probability: List[float]
    windspeed: List[float]
    pictocode: List[int]

    @model_validator(mode="after")
    def _same_length(self) -> "MeteoblueData1h":
        n = len(self.time)
        arrays = (self.temperature, self.precipitation_probability, self.windspeed, self.pictocode)
        if not all(len(a) == n for a in arrays):
            raise ValueError("data_1h arrays have inconsistent lengths")
        return self


class MeteoblueWeatherData(BaseModel):
    metadata: MeteoblueMetadata
    data_1h: MeteoblueData1h


def decode_response(body: bytes) -> MeteoblueWeatherData:
    try:
        return MeteoblueWeatherData.model_validate_json(body)
    except ValidationError as e:
        raise DecodeError(f"decode meteoblue response: {e}") from e
