import json
from typing import Callable, Optional

import httpx
import pytest


OPEN_METEO_PAYLOAD = {
    "latitude": 52.52,
    "longitude": 13.419998,
    "timezone": "Europe/Berlin",
    "hourly": {
        "time": ["2023-01-01T12:00", "2023-01-01T13:00"],
        "temperature_2m": [1.1, 2.2],
        "precipitation_probability": [0.0, 10.0],
        "weathercode": [0, 1],
        "windspeed_10m": [3.3, 4.4],
    },
}

METEOBLUE_PAYLOAD = {
    "metadata": {"latitude": 0.0, "longitude": 0.0},
    "data_1h": {
        "time": [1609459200, 1609462800],
        "temperature": [1.1, 2.2],
        "precipitation_probability": [0.0, 0.1],
        "pictocode": [1, 7],
        "windspeed": [3.3, 4.4],
    },
}


def make_client(
    body: bytes = b"",
    status_code: int = 200,
    error: Optional[Exception] = None,
    requests: Optional[list] = None,
) -> httpx.Client:
    def handler(request: httpx.Request) -> httpx.Response:
        if requests is not None:
            requests.append(request)
        if error is not None:
            raise error
        return httpx.Response(status_code, content=body)

    return httpx.Client(transport=httpx.MockTransport(handler))


@pytest.fixture
def client_factory() -> Callable[..., httpx.Client]:
    return make_client


@pytest.fixture
def open_meteo_body() -> bytes:
    return json.dumps(OPEN_METEO_PAYLOAD).encode()


@pytest.fixture
def meteoblue_body() -> bytes:
    return json.dumps(METEOBLUE_PAYLOAD).encode()


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "common:\n"
        "  latitude: 52.52\n"
        "  longitude: 13.405\n"
        "  default-api: openmeteo\n"
        "meteoblue:\n"
        "  api-key: testApiKey\n"
        "  shared-secret: testSecret\n",
        encoding="utf-8",
    )
    return path
