"""Data models for station data, locations and queries."""

from pycarburantes.models._base import CarburantesBaseModel
from pycarburantes.models.fuel import CHEAPEST_FUEL_ORDER, FuelType
from pycarburantes.models.location import LocationSource, RoutePoint, RouteQuery, UserLocation
from pycarburantes.models.query import QueryState, SortKey
from pycarburantes.models.reference import Municipality, Product, Province, Region, StationFilter
from pycarburantes.models.station import CheapestFuel, Station
from pycarburantes.models.stats import PriceStats, SearchResult

__all__ = [
    "CHEAPEST_FUEL_ORDER",
    "CarburantesBaseModel",
    "CheapestFuel",
    "FuelType",
    "LocationSource",
    "Municipality",
    "PriceStats",
    "Product",
    "Province",
    "QueryState",
    "Region",
    "RoutePoint",
    "RouteQuery",
    "SearchResult",
    "SortKey",
    "Station",
    "StationFilter",
    "UserLocation",
]
