"""Upstream station record adapter.

Translates a ``ListaEESSPrecio`` entry into a :class:`Station`.  The
upstream keys carry spaces, accents and punctuation; the mapping below is
the only place they appear.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from datetime import datetime
from typing import Any

from pycarburantes.ingestion.normalize import parse_decimal, parse_price, safe_str
from pycarburantes.ingestion.schedule import is_open_now
from pycarburantes.models.fuel import CHEAPEST_FUEL_ORDER, FuelType
from pycarburantes.models.station import CheapestFuel, Station

_logger = logging.getLogger(__name__)

#: Upstream text field -> Station attribute.
_TEXT_FIELDS: dict[str, str] = {
    "IDEESS": "station_id",
    "Rótulo": "brand",
    "Dirección": "address",
    "C.P.": "postal_code",
    "Localidad": "locality",
    "Municipio": "municipality",
    "Provincia": "province",
    "Margen": "margin",
    "Remisión": "remission",
    "Tipo Venta": "sale_type",
    "Horario": "schedule",
}

_ID_FIELDS: dict[str, str] = {
    "IDMunicipio": "municipality_id",
    "IDProvincia": "province_id",
    "IDCCAA": "region_id",
}

_LATITUDE_FIELD = "Latitud"
_LONGITUDE_FIELD = "Longitud (WGS84)"


def parse_prices(raw: Mapping[str, Any]) -> dict[FuelType, float]:
    """Collect every valid positive price from an upstream record."""
    prices: dict[FuelType, float] = {}
    for fuel_type in FuelType:
        price = parse_price(raw.get(fuel_type.api_field))
        if price is not None:
            prices[fuel_type] = price
    return prices


def cheapest_fuel(prices: Mapping[FuelType, float]) -> CheapestFuel | None:
    """Cheapest of the main fuels; ties go to the earlier fuel in the fixed order."""
    best: CheapestFuel | None = None
    for fuel_type in CHEAPEST_FUEL_ORDER:
        price = prices.get(fuel_type)
        if price is None:
            continue
        if best is None or price < best.price:
            best = CheapestFuel(fuel_type=fuel_type, price=price)
    return best


def parse_station(raw: Mapping[str, Any], *, now: datetime | None = None) -> Station:
    """Build a normalized station from one upstream record.

    *now* is the local time used for the open-now check and defaults to
    the system clock.
    """
    if now is None:
        now = datetime.now()

    fields: dict[str, Any] = {}
    for api_key, attr in _TEXT_FIELDS.items():
        value = raw.get(api_key)
        fields[attr] = "" if value is None else str(value).strip()
    for api_key, attr in _ID_FIELDS.items():
        fields[attr] = safe_str(raw.get(api_key))

    prices = parse_prices(raw)
    return Station(
        **fields,
        latitude=parse_decimal(raw.get(_LATITUDE_FIELD)),
        longitude=parse_decimal(raw.get(_LONGITUDE_FIELD)),
        prices=prices,
        is_open=is_open_now(fields["schedule"], now),
        cheapest_fuel=cheapest_fuel(prices),
        raw=dict(raw),
    )


def normalize_stations(raws: Iterable[Mapping[str, Any]], *, now: datetime | None = None) -> list[Station]:
    """Normalize a whole listing with one shared clock reading."""
    if now is None:
        now = datetime.now()
    stations = [parse_station(raw, now=now) for raw in raws if isinstance(raw, Mapping)]
    missing = sum(1 for station in stations if not station.has_coordinates)
    if missing:
        _logger.debug("%d of %d stations have no usable coordinates", missing, len(stations))
    return stations


def unique_brands(stations: Iterable[Station]) -> list[str]:
    """Sorted distinct non-blank brand names."""
    return sorted({station.brand for station in stations if station.brand.strip()})
