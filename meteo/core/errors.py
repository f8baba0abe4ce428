# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
from __future__ import annotations
from typing import Optional

"""
Hierarquia de erros do meteo.


- `MeteoError` é a base; o CLI captura apenas ela e termina com código 1.
- Cada etapa do pipeline (config, coordenadas, HTTP, decodificação, timezone) tem sua classe.
- Exceções de bibliotecas (httpx, pydantic, yaml) são reembaladas com `raise ... from e`.
"""


class MeteoError(Exception):
    """Erro base: qualquer falha interrompe a execução."""


class ConfigError(MeteoError):
    """Configuração ausente ou inválida (arquivo YAML, env, provider desconhecido)."""


class InvalidCoordinate(MeteoError):
    """Latitude fora de [-90, 90] ou longitude fora de [-180, 180]."""


class TimezoneError(MeteoError):
    """Não foi possível resolver/carregar o timezone das coordenadas."""


class TransportError(MeteoError):
    """Falha de rede ao executar o GET."""


class UnexpectedStatus(MeteoError):
    """Resposta HTTP com status diferente de 200."""

    def __init__(self, status_code: int, url: Optional[str] = None):
        self.status_code = status_code
        self.url = url
        super().__init__(f"unexpected status code: {status_code}")


class ReadError(MeteoError):
    """O corpo da resposta não pôde ser lido por completo."""


class DecodeError(MeteoError):
    """JSON inválido ou estrutura diferente da esperada."""


class MalformedTimestamp(DecodeError):
    """Timestamp horário fora do formato `YYYY-MM-DDTHH:MM`."""
