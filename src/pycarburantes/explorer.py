"""Recompute-on-demand holder for a station search.

Holds the current station set, user location and query.  Nothing is
recomputed implicitly: after changing any of them the caller runs
:meth:`StationExplorer.refresh` and keeps the returned result.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from pycarburantes._constants import DEFAULT_STATS_RADIUS_KM
from pycarburantes.ingestion.stations import unique_brands
from pycarburantes.models.fuel import FuelType
from pycarburantes.models.location import RouteQuery, UserLocation
from pycarburantes.models.query import QueryState
from pycarburantes.models.station import Station
from pycarburantes.models.stats import SearchResult
from pycarburantes.route import find_stations_in_route
from pycarburantes.search import filter_stations
from pycarburantes.stats import cheapest_in_radius, nearest, price_stats

_logger = logging.getLogger(__name__)


class StationExplorer:
    """Current search state plus the pure pipeline that evaluates it.

    Usage::

        explorer = StationExplorer(await client.get_all_stations())
        explorer.set_location(await client.locate())
        explorer.set_query(QueryState(radius=10, sort_by="price"))
        result = explorer.refresh()
    """

    def __init__(
        self,
        stations: Iterable[Station] = (),
        *,
        location: UserLocation | None = None,
        query: QueryState | None = None,
    ) -> None:
        self._stations: tuple[Station, ...] = tuple(stations)
        self._location = location
        self._query = query if query is not None else QueryState()

    @property
    def stations(self) -> tuple[Station, ...]:
        return self._stations

    @property
    def location(self) -> UserLocation | None:
        return self._location

    @property
    def query(self) -> QueryState:
        return self._query

    def set_stations(self, stations: Iterable[Station]) -> None:
        """Replace the whole station set."""
        self._stations = tuple(stations)

    def set_location(self, location: UserLocation | None) -> None:
        self._location = location

    def set_query(self, query: QueryState) -> None:
        self._query = query

    def available_brands(self) -> list[str]:
        return unique_brands(self._stations)

    def refresh(self) -> SearchResult:
        """Filter the current snapshot and summarize the result."""
        query = self._query
        stations = filter_stations(self._stations, query, self._location)
        radius = query.radius or DEFAULT_STATS_RADIUS_KM
        fuel_type = query.fuel_type or FuelType.GASOLINA_95
        _logger.debug("Query matched %d of %d stations", len(stations), len(self._stations))
        return SearchResult(
            stations=stations,
            nearest=nearest(stations),
            cheapest_in_radius=cheapest_in_radius(stations, radius),
            price_stats=price_stats(stations, fuel_type),
        )

    def search_route(self, route: RouteQuery) -> list[Station]:
        """Stations along *route* from the full set, ignoring the query."""
        stations = find_stations_in_route(self._stations, route)
        _logger.debug("Found %d stations along the route", len(stations))
        return stations
