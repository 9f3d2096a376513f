"""pycarburantes - Async client and search engine for Spanish fuel station prices."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pycarburantes")
except PackageNotFoundError:
    __version__ = "0+local"
from pycarburantes.client import CarburantesClient, DeviceLocator
from pycarburantes.config import CarburantesConfig
from pycarburantes.exceptions import (
    CarburantesConfigError,
    CarburantesError,
    DataFetchError,
    LocationError,
    LocationFailureKind,
)
from pycarburantes.explorer import StationExplorer
from pycarburantes.geo import distance_km
from pycarburantes.ingestion import normalize_stations, parse_station
from pycarburantes.models import (
    CheapestFuel,
    FuelType,
    LocationSource,
    Municipality,
    PriceStats,
    Product,
    Province,
    QueryState,
    Region,
    RoutePoint,
    RouteQuery,
    SearchResult,
    SortKey,
    Station,
    StationFilter,
    UserLocation,
)
from pycarburantes.route import find_stations_in_route
from pycarburantes.search import filter_stations
from pycarburantes.stats import cheapest_in_radius, nearest, price_stats

__all__ = [
    "__version__",
    "CarburantesClient",
    "CarburantesConfig",
    "CarburantesConfigError",
    "CarburantesError",
    "CheapestFuel",
    "DataFetchError",
    "DeviceLocator",
    "FuelType",
    "LocationError",
    "LocationFailureKind",
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
    "StationExplorer",
    "StationFilter",
    "UserLocation",
    "cheapest_in_radius",
    "distance_km",
    "filter_stations",
    "find_stations_in_route",
    "nearest",
    "normalize_stations",
    "parse_station",
    "price_stats",
]
