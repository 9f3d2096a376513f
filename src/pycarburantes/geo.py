"""Great-circle geometry helpers.

All inputs are decimal degrees.  Nothing here validates its input: callers
pass parsed, finite values and non-finite input simply yields NaN.
"""

from __future__ import annotations

import math

from pycarburantes._constants import EARTH_RADIUS_KM, SPAIN_EAST, SPAIN_NORTH, SPAIN_SOUTH, SPAIN_WEST
from pycarburantes.models.location import LocationSource, UserLocation


def distance_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Haversine distance in kilometres between two coordinates."""
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lon / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def is_valid_coordinates(latitude: float, longitude: float) -> bool:
    return -90 <= latitude <= 90 and -180 <= longitude <= 180


def to_dms(decimal: float, *, is_latitude: bool) -> str:
    """Format decimal degrees as degrees/minutes/seconds, e.g. ``40°25'0"N``."""
    absolute = abs(decimal)
    degrees = math.floor(absolute)
    minutes_full = (absolute - degrees) * 60
    minutes = math.floor(minutes_full)
    seconds = math.floor((minutes_full - minutes) * 60)

    if is_latitude:
        direction = "N" if decimal >= 0 else "S"
    else:
        direction = "E" if decimal >= 0 else "W"
    return f"{degrees}°{minutes}'{seconds}\"{direction}"


def middle_point(first: UserLocation, second: UserLocation) -> UserLocation:
    """Arithmetic midpoint of two locations (not the geodesic midpoint)."""
    return UserLocation(
        latitude=(first.latitude + second.latitude) / 2,
        longitude=(first.longitude + second.longitude) / 2,
        source=LocationSource.MANUAL,
    )


def is_location_in_spain(location: UserLocation) -> bool:
    """Rough bounding-box test; the Canary Islands fall outside it."""
    return (
        SPAIN_SOUTH <= location.latitude <= SPAIN_NORTH
        and SPAIN_WEST <= location.longitude <= SPAIN_EAST
    )


SAMPLE_LOCATIONS: dict[str, UserLocation] = {
    "madrid": UserLocation(latitude=40.4168, longitude=-3.7038, city="Madrid", country="España"),
    "barcelona": UserLocation(latitude=41.3851, longitude=2.1734, city="Barcelona", country="España"),
    "valencia": UserLocation(latitude=39.4699, longitude=-0.3763, city="Valencia", country="España"),
    "sevilla": UserLocation(latitude=37.3891, longitude=-5.9845, city="Sevilla", country="España"),
}
