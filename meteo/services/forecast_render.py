# Copyright (c) 2025 Alexandre Tavares
# Licensed under the Creative Commons Attribution-NonCommercial 4.0 International (CC BY-NC 4.0)
# See the LICENSE file in the project root for more information.
from __future__ import annotations
from datetime import datetime, tzinfo
from typing import List, NamedTuple, Optional
from rich.console import Console
from rich.table import Table
from meteo.services.weather_normalize import NormalizedForecast
from meteo.utils.coords import Coordinates, load_zone, resolve_timezone

"""
Renderização da previsão horária em tabela (terminal).


- Converte cada horário para o fuso das coordenadas (lookup próprio, independente do payload).
- Descarta horários anteriores a "agora"; a saída depende do relógio no momento da execução.
- Imprime no máximo `max_rows` linhas (padrão 12, exatamente 12).
- Formato: `HH:00`, `12.3°C`, `4.5km/h`, `20%`, condição textual.
"""

DEFAULT_MAX_ROWS = 12


class ForecastRow(NamedTuple):
    hour: str
    temperature: str
    wind: str
    precipitation: str
    condition: str


def build_rows(
    forecast: NormalizedForecast,
    zone: tzinfo,
    *,
    now: Optional[datetime] = None,
    max_rows: int = DEFAULT_MAX_ROWS,
) -> List[ForecastRow]:
    """Filtra (passado), limita e formata as linhas; parte pura do renderer."""
    now = now or datetime.now(zone)
    rows: List[ForecastRow] = []
    for i, ts in enumerate(forecast.time):
        if len(rows) >= max_rows:
            break

        local = ts.astimezone(zone)
        if local < now:
            continue

        rows.append(ForecastRow(
            hour=f"{local.hour:02d}:00",
            temperature=f"{forecast.temperature[i]:.1f}°C",
            wind=f"{forecast.wind_speed[i]:.1f}km/h",
            precipitation=f"{forecast.precipitation_probability[i]:.0f}%",
            condition=forecast.condition[i],
        ))
    return rows


def print_forecast(rows: List[ForecastRow], console: Optional[Console] = None) -> None:
    console = console or Console()

    table = Table(box=None, pad_edge=False, show_edge=False, header_style="bold")
    table.add_column("Time", width=6, no_wrap=True)
    table.add_column("Temp", width=10, no_wrap=True, style="cyan")
    table.add_column("Wind", width=10, no_wrap=True, style="blue")
    table.add_column("Precip", width=13, no_wrap=True, style="green")
    table.add_column("Weather", no_wrap=True)

    for row in rows:
        table.add_row(*row)

    console.print(table)


def render_forecast(
    forecast: NormalizedForecast,
    coords: Coordinates,
    *,
    console: Optional[Console] = None,
    now: Optional[datetime] = None,
    max_rows: int = DEFAULT_MAX_ROWS,
    tz_name: Optional[str] = None,
) -> List[ForecastRow]:
    """
    Resolve o fuso de exibição pelas coordenadas, monta as linhas e imprime.
    Falha de timezone => `TimezoneError` (fatal, sem renderização parcial).
    """
    zone = load_zone(tz_name or resolve_timezone(coords))
    rows = build_rows(forecast, zone, now=now, max_rows=max_rows)
    print_forecast(rows, console)
    return rows
