"""Ingestion layer.

Adapters that turn upstream ``ListaEESSPrecio`` records into normalized
:class:`~pycarburantes.models.station.Station` objects.  Upstream field
names never leak past this package.
"""

from pycarburantes.ingestion.normalize import parse_decimal, parse_price
from pycarburantes.ingestion.schedule import is_open_now
from pycarburantes.ingestion.stations import cheapest_fuel, normalize_stations, parse_station, unique_brands

__all__ = [
    "cheapest_fuel",
    "is_open_now",
    "normalize_stations",
    "parse_decimal",
    "parse_price",
    "parse_station",
    "unique_brands",
]
