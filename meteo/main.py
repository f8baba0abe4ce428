# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
from __future__ import annotations
import argparse
import logging
import sys
from time import perf_counter
from typing import List, Optional
import httpx
from rich.console import Console
from meteo.core.config import MeteoConfig, Settings, load_config, resolve_config_file, update_config_coords
from meteo.core.errors import ConfigError, MeteoError
from meteo.services.forecast_render import render_forecast
from meteo.services.providers import PROVIDER_NAMES, select_provider
from meteo.utils.coords import validate_coords

"""
meteo – entrypoint do CLI.

- `meteo [--lat LAT] [--lng LNG] [-w openmeteo|meteoblue]`: busca e imprime as próximas horas.
- `meteo set coords LAT LNG`: regrava as coordenadas padrão no YAML de `METEO_CONFIG_PATH`.
- Qualquer `MeteoError` => mensagem de uma linha em stderr e código de saída 1.
"""

log = logging.getLogger("meteo")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="meteo", description="CLI app for weather prediction")
    parser.add_argument("--lat", "-lat", dest="lat", type=float, default=None, help="Forecasting latitude")
    parser.add_argument(
        "--lng", "--lon", "-lng", "-lon",
        dest="lon", type=float, default=None, help="Forecasting longitude",
    )
    parser.add_argument("-w", "--api", choices=PROVIDER_NAMES, default=None, help="Weather API client")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging to stderr")

    sub = parser.add_subparsers(dest="command")
    set_cmd = sub.add_parser("set", help="Re-write default config parameters")
    set_sub = set_cmd.add_subparsers(dest="set_command")
    coords_cmd = set_sub.add_parser("coords", help="Re-write default latitude and longitude")
    coords_cmd.add_argument("lat", type=float)
    coords_cmd.add_argument("lon", type=float)
    return parser


def _load_optional_config(settings: Settings) -> Optional[MeteoConfig]:
    path = resolve_config_file(settings.METEO_CONFIG_PATH)
    if path is None:
        return None
    return load_config(path)


def run_forecast(
    args: argparse.Namespace,
    settings: Settings,
    *,
    client: Optional[httpx.Client] = None,
    console: Optional[Console] = None,
) -> int:
    console = console or Console()
    config = _load_optional_config(settings)

    lat = args.lat if args.lat is not None else (config.common.latitude if config else None)
    lon = args.lon if args.lon is not None else (config.common.longitude if config else None)
    if lat is None or lon is None:
        raise ConfigError("latitude/longitude not configured (use --lat/--lng or METEO_CONFIG_PATH)")
    coords = validate_coords(lat, lon)

    api_name = args.api or (config.common.default_api if config else None) or settings.METEO_DEFAULT_API

    owns_client = client is None
    client = client or httpx.Client()
    try:
        provider = select_provider(api_name, client, config)

        log.info("forecast_fetch_start", extra={"provider": provider.name, "lat": coords.lat, "lon": coords.lon})
        t0 = perf_counter()
        forecast = provider.fetch(coords)
        log.info(
            "forecast_fetch_done",
            extra={
                "provider": provider.name,
                "samples": len(forecast),
                "elapsed_ms": int((perf_counter() - t0) * 1000),
            },
        )
    finally:
        if owns_client:
            client.close()

    console.print(f"Latitude: {coords.lat:f}  Longitude: {coords.lon:f}  ({provider.name})", highlight=False)
    render_forecast(forecast, coords, console=console, max_rows=settings.METEO_MAX_ROWS)
    return 0


def run_set(args: argparse.Namespace, settings: Settings, *, console: Optional[Console] = None) -> int:
    console = console or Console()
    if args.set_command != "coords":
        console.print("Use `meteo set coords LAT LNG` to re-write default coordinates", markup=False)
        return 0

    path = resolve_config_file(settings.METEO_CONFIG_PATH)
    if path is None:
        raise ConfigError("METEO_CONFIG_PATH environment variable not set")
    coords = validate_coords(args.lat, args.lon)
    update_config_coords(path, coords.lat, coords.lon)
    log.info("config_coords_updated", extra={"path": str(path), "lat": coords.lat, "lon": coords.lon})
    console.print(f"Default coordinates set to {coords.lat:f}, {coords.lon:f} in {path}", highlight=False)
    return 0


def main(
    argv: Optional[List[str]] = None,
    *,
    settings: Optional[Settings] = None,
    client: Optional[httpx.Client] = None,
    console: Optional[Console] = None,
) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = settings or Settings()

        level = logging.DEBUG if args.verbose else getattr(logging, settings.LOG_LEVEL.upper(), logging.WARNING)
        logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

        if args.command == "set":
            return run_set(args, settings, console=console)
        return run_forecast(args, settings, client=client, console=console)
    except MeteoError as e:
        log.debug("meteo_error", extra={"type": e.__class__.__name__, "error": str(e)})
        print(f"Error: {e}", file=sys.stderr)
        return 1


def cli() -> None:
    sys.exit(main())


if __name__ == "__main__":
    cli()
