# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
from __future__ import annotations
import logging
from time import perf_counter
import httpx
from meteo.core.errors import ReadError, TransportError, UnexpectedStatus

"""
GET único contra o provider (sem retries, sem timeout próprio).


- Recebe o `httpx.Client` injetado (em testes: `httpx.MockTransport`).
- Status != 200 => `UnexpectedStatus`; falha de rede => `TransportError`; corpo incompleto => `ReadError`.
- Retorna os bytes brutos; decodificação fica a cargo de cada client.
"""

log = logging.getLogger("meteo.http")


def _redact(url: str) -> str:
    # a query do Meteoblue leva apikey e sig
    return url.split("?", 1)[0]


def fetch_body(client: httpx.Client, url: str) -> bytes:
    t0 = perf_counter()
    try:
        with client.stream("GET", url) as resp:
            if resp.status_code != 200:
                raise UnexpectedStatus(resp.status_code, _redact(url))
            try:
                body = resp.read()
            except (httpx.TransportError, httpx.StreamError) as e:
                raise ReadError(f"read response body: {e}") from e
    except httpx.TransportError as e:
        raise TransportError(f"GET {_redact(url)} failed: {e}") from e

    log.debug(
        "http_get_done",
        extra={
            "url": _redact(url),
            "bytes": len(body),
            "elapsed_ms": int((perf_counter() - t0) * 1000),
        },
    )
    return body
