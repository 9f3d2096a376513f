"""Station price listing endpoints.

Endpoints (relative to ``config.base_url``):
  - /EstacionesTerrestres/
  - /EstacionesTerrestres/Filtro{CCAA,Provincia,Municipio,Producto}[Producto]/...
  - /EstacionesTerrestresHist/{dd-mm-yyyy}
  - /EstacionesTerrestresHist/FiltroCCAA[Producto]/{dd-mm-yyyy}/...
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Any

from pycarburantes._transport import Transport
from pycarburantes.config import CarburantesConfig
from pycarburantes.exceptions import DataFetchError
from pycarburantes.models.reference import StationFilter

_logger = logging.getLogger(__name__)

STATIONS_PATH = "/EstacionesTerrestres/"
HISTORICAL_PATH = "/EstacionesTerrestresHist"


def build_station_path(station_filter: StationFilter | None = None) -> str:
    """Pick the listing path for *station_filter*.

    Only the broadest geographic level is used: region beats province,
    province beats municipality.  A product id narrows any of them.
    """
    if station_filter is None:
        return STATIONS_PATH

    product = station_filter.product_id
    for level, value in (
        ("CCAA", station_filter.region_id),
        ("Provincia", station_filter.province_id),
        ("Municipio", station_filter.municipality_id),
    ):
        if value:
            if product:
                return f"/EstacionesTerrestres/Filtro{level}Producto/{value}/{product}"
            return f"/EstacionesTerrestres/Filtro{level}/{value}"
    if product:
        return f"/EstacionesTerrestres/FiltroProducto/{product}"
    return STATIONS_PATH


def format_history_date(day: date | str) -> str:
    """Upstream history dates are ``dd-mm-yyyy``."""
    if isinstance(day, date):
        return day.strftime("%d-%m-%Y")
    return day


def build_historical_path(day: date | str, station_filter: StationFilter | None = None) -> str:
    """History endpoints only support the region (+ product) filters."""
    stamp = format_history_date(day)
    if station_filter is not None and station_filter.region_id:
        if station_filter.product_id:
            return (
                f"{HISTORICAL_PATH}/FiltroCCAAProducto/{stamp}/"
                f"{station_filter.region_id}/{station_filter.product_id}"
            )
        return f"{HISTORICAL_PATH}/FiltroCCAA/{stamp}/{station_filter.region_id}"
    return f"{HISTORICAL_PATH}/{stamp}"


def extract_station_records(response: Any) -> list[dict[str, Any]] | None:
    """Return the raw ``ListaEESSPrecio`` records, ``None`` when absent."""
    if not isinstance(response, dict):
        return None
    records = response.get("ListaEESSPrecio")
    if not isinstance(records, list):
        return None
    return [record for record in records if isinstance(record, dict)]


async def fetch_station_records(
    config: CarburantesConfig,
    transport: Transport,
    path: str,
    *,
    required: bool = False,
) -> list[dict[str, Any]]:
    """Download one station listing.

    With *required* a response without a listing raises
    :class:`DataFetchError`; otherwise it yields an empty list.
    """
    url = f"{config.base_url}{path}"
    response = await transport.get_json(url)
    records = extract_station_records(response)
    if records is None:
        result = response.get("ResultadoConsulta", "") if isinstance(response, dict) else ""
        if required:
            raise DataFetchError(f"No station listing in response from {path}: {result}", endpoint=path)
        _logger.warning("No station listing in response from %s: %s", path, result)
        return []
    _logger.info("Loaded %d stations from %s", len(records), path)
    return records
