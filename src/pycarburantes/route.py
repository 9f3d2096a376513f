"""Route corridor selection.

Great-circle approximation only: the detour of a station is how much
longer start → station → end is than start → end, with no road network.
"""

from __future__ import annotations

from collections.abc import Iterable

from pycarburantes.geo import distance_km
from pycarburantes.models.location import RoutePoint, RouteQuery
from pycarburantes.models.station import Station

# Floating point slack so stations exactly on the great circle pass max_detour=0.
_DETOUR_TOLERANCE_KM = 1e-9


def detour_km(start: RoutePoint, end: RoutePoint, latitude: float, longitude: float) -> float:
    """Extra kilometres to pass through (*latitude*, *longitude*) on the way."""
    direct = distance_km(start.latitude, start.longitude, end.latitude, end.longitude)
    via = distance_km(start.latitude, start.longitude, latitude, longitude) + distance_km(
        latitude, longitude, end.latitude, end.longitude
    )
    return via - direct


def find_stations_in_route(stations: Iterable[Station], route: RouteQuery) -> list[Station]:
    """Stations within ``route.max_detour`` of the trip, smallest detour first.

    Kept stations are copies annotated with ``distance`` (from the start)
    and ``detour``.  Stations without coordinates are left out entirely.
    """
    start, end = route.start, route.end
    direct = distance_km(start.latitude, start.longitude, end.latitude, end.longitude)

    selected: list[Station] = []
    for station in stations:
        if station.latitude is None or station.longitude is None:
            continue
        from_start = distance_km(start.latitude, start.longitude, station.latitude, station.longitude)
        to_end = distance_km(station.latitude, station.longitude, end.latitude, end.longitude)
        detour = from_start + to_end - direct
        if detour <= route.max_detour + _DETOUR_TOLERANCE_KM:
            selected.append(station.model_copy(update={"distance": from_start, "detour": detour}))

    selected.sort(key=lambda s: s.detour or 0.0)
    return selected
