"""Plain-text rendering helpers for results."""

from __future__ import annotations

import math

from pycarburantes.models.location import LocationSource, UserLocation
from pycarburantes.models.station import Station

_SOURCE_MARKERS = {
    LocationSource.GPS: "[gps]",
    LocationSource.IP: "[ip]",
    LocationSource.MANUAL: "[manual]",
}


def format_distance(distance: float | None) -> str:
    """``850 m`` below one kilometre, ``12.3 km`` above, ``N/A`` when unknown."""
    if distance is None or math.isinf(distance):
        return "N/A"
    if distance < 1:
        return f"{round(distance * 1000)} m"
    return f"{distance:.1f} km"


def format_price(price: float | None) -> str:
    if price is None:
        return "N/A"
    return f"{price:.3f} €/L"


def cheapest_fuel_info(station: Station) -> str:
    if station.cheapest_fuel is None:
        return "Sin precios"
    return f"{station.cheapest_fuel.name}: {format_price(station.cheapest_fuel.price)}"


def location_label(location: UserLocation | None) -> str:
    if location is None:
        return "No establecida"
    marker = _SOURCE_MARKERS[location.source]
    if location.city and location.region:
        where = f"{location.city}, {location.region}"
    else:
        where = f"{location.latitude:.4f}, {location.longitude:.4f}"
    return f"{marker} {where}"
