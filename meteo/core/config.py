# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
from __future__ import annotations
import os
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional
import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError
from meteo.core.errors import ConfigError

"""
Configurações do meteo.


- `Settings`: variáveis de ambiente (.env) do processo (caminho do YAML, log, provider default, limite de linhas).
- `MeteoConfig`: arquivo YAML validado via pydantic (seções `common` e `meteoblue`).
- `load_config()` / `update_config_coords()` leem e regravam o arquivo; falhas viram `ConfigError`.
- Nada aqui é global: o CLI constrói os objetos e os repassa explicitamente.
"""

load_dotenv()

CONFIG_FILE_NAME = "config.yaml"


def _env(name: str, default: str) -> Any:
    return field(default_factory=lambda: os.getenv(name, default))


def _env_positive_int(name: str, default: str) -> Any:
    def _read() -> int:
        raw = os.getenv(name, default)
        try:
            value = int(raw)
        except ValueError as e:
            raise ConfigError(f"{name} must be a positive integer, got: {raw!r}") from e
        if value < 1:
            raise ConfigError(f"{name} must be a positive integer, got: {raw!r}")
        return value

    return field(default_factory=_read)


@dataclass
class Settings:
    APP_NAME: str = "meteo"
    LOG_LEVEL: str = _env("LOG_LEVEL", "WARNING")

    METEO_CONFIG_PATH: str = _env("METEO_CONFIG_PATH", "")
    METEO_DEFAULT_API: str = _env("METEO_DEFAULT_API", "openmeteo")
    METEO_MAX_ROWS: int = _env_positive_int("METEO_MAX_ROWS", "12")


# Schemas do arquivo YAML
class CommonSection(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    latitude: float
    longitude: float
    default_api: Optional[str] = Field(default=None, alias="default-api")


class MeteoblueSection(BaseModel):
    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    api_key: str = Field(alias="api-key")
    shared_secret: str = Field(alias="shared-secret")


class MeteoConfig(BaseModel):
    common: CommonSection
    meteoblue: Optional[MeteoblueSection] = None

    def meteoblue_credentials(self) -> MeteoblueSection:
        if self.meteoblue is None:
            raise ConfigError("meteoblue provider requires 'meteoblue.api-key' and 'meteoblue.shared-secret' in config")
        return self.meteoblue


def resolve_config_file(config_path: str) -> Optional[Path]:
    """
    `METEO_CONFIG_PATH` pode apontar para o próprio arquivo ou para o diretório
    que contém `config.yaml`. Vazio => sem arquivo.
    """
    if not config_path:
        return None
    p = Path(config_path).expanduser()
    if p.is_dir():
        return p / CONFIG_FILE_NAME
    return p


def _read_mapping(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
    except OSError as e:
        raise ConfigError(f"read config {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"parse config {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"config {path} must be a mapping, got: {type(data).__name__}")
    return data


def load_config(path: Path) -> MeteoConfig:
    """Lê e valida o YAML. Campos obrigatórios ausentes => `ConfigError`."""
    data = _read_mapping(path)
    try:
        return MeteoConfig.model_validate(data)
    except ValidationError as e:
        missing = ", ".join(".".join(str(p) for p in err["loc"]) for err in e.errors())
        raise ConfigError(f"invalid config {path}: {missing}") from e


def update_config_coords(path: Path, lat: float, lon: float) -> None:
    """
    Regrava `common.latitude` / `common.longitude` preservando as demais chaves.
    """
    data = _read_mapping(path)
    common = data.get("common")
    if not isinstance(common, dict):
        raise ConfigError(f"can't find 'common' section in config {path}")

    common["latitude"] = float(lat)
    common["longitude"] = float(lon)

    # grava num arquivo irmão e troca atomicamente; falha no meio não trunca o original
    tmp_path: Optional[str] = None
    try:
        with tempfile.NamedTemporaryFile(
            "w", encoding="utf-8", dir=path.parent, prefix=f".{path.name}.", suffix=".tmp", delete=False
        ) as fh:
            tmp_path = fh.name
            yaml.safe_dump(data, fh, sort_keys=False)
        os.replace(tmp_path, path)
    except (OSError, yaml.YAMLError) as e:
        if tmp_path is not None and os.path.exists(tmp_path):
            os.unlink(tmp_path)
        raise ConfigError(f"write config {path}: {e}") from e
