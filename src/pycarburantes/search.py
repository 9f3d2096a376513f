"""Location-aware filter/sort engine.

:func:`filter_stations` runs the full query pipeline.  The pipeline order
is part of the contract: price bounds are checked after the radius filter
and before sorting, and the cap is applied last.  Every step returns a new
list; stations are never mutated, distance annotation works on copies.
"""

from __future__ import annotations

import math
import unicodedata
from collections.abc import Iterable, Sequence

from pycarburantes.geo import distance_km
from pycarburantes.models.fuel import FuelType
from pycarburantes.models.location import UserLocation
from pycarburantes.models.query import QueryState, SortKey
from pycarburantes.models.station import Station

_INF = math.inf


def distance_or_inf(station: Station) -> float:
    return _INF if station.distance is None else station.distance


def cheapest_price_or_inf(station: Station) -> float:
    return _INF if station.cheapest_fuel is None else station.cheapest_fuel.price


def _contains(haystack: str | None, needle: str) -> bool:
    return bool(haystack) and needle in haystack.lower()


def filter_by_search_term(stations: Iterable[Station], term: str) -> list[Station]:
    """Keep stations whose brand, address, municipality or province contains *term*."""
    needle = term.strip().lower()
    if not needle:
        return list(stations)
    return [
        s
        for s in stations
        if _contains(s.brand, needle)
        or _contains(s.address, needle)
        or _contains(s.municipality, needle)
        or _contains(s.province, needle)
    ]


def filter_by_company(
    stations: Iterable[Station],
    whitelist: Sequence[str] = (),
    blacklist: Sequence[str] = (),
) -> list[Station]:
    """Apply brand whitelist then blacklist (case-insensitive fragments)."""
    allowed = [fragment.lower() for fragment in whitelist if fragment]
    denied = [fragment.lower() for fragment in blacklist if fragment]

    filtered = list(stations)
    if allowed:
        filtered = [s for s in filtered if any(f in s.brand.lower() for f in allowed)]
    if denied:
        filtered = [s for s in filtered if not any(f in s.brand.lower() for f in denied)]
    return filtered


def filter_by_brand(stations: Iterable[Station], brand: str) -> list[Station]:
    """Substring match against a single brand name."""
    needle = brand.strip().lower()
    if not needle:
        return list(stations)
    return [s for s in stations if needle in s.brand.lower()]


def filter_by_fuel_type(stations: Iterable[Station], fuel_type: FuelType | None) -> list[Station]:
    """Keep stations selling *fuel_type* at a valid price."""
    if fuel_type is None:
        return list(stations)
    return [s for s in stations if s.price_for(fuel_type) is not None]


def filter_by_open_status(stations: Iterable[Station], only_open: bool) -> list[Station]:
    if not only_open:
        return list(stations)
    return [s for s in stations if s.is_open]


def annotate_distance(stations: Iterable[Station], location: UserLocation) -> list[Station]:
    """Copy stations with ``distance`` from *location*; no coordinates → infinity."""
    annotated: list[Station] = []
    for station in stations:
        if station.latitude is None or station.longitude is None:
            distance = _INF
        else:
            distance = distance_km(location.latitude, location.longitude, station.latitude, station.longitude)
        annotated.append(station.model_copy(update={"distance": distance}))
    return annotated


def filter_by_radius(stations: Iterable[Station], radius: float | None) -> list[Station]:
    if not radius:
        return list(stations)
    return [s for s in stations if distance_or_inf(s) <= radius]


def filter_by_price(
    stations: Iterable[Station],
    min_price: float | None = None,
    max_price: float | None = None,
) -> list[Station]:
    """Bound the cheapest fuel price; stations without prices are dropped.

    A bound of ``None`` or ``0`` is unset. With both bounds unset this is
    a no-op.
    """
    if not min_price and not max_price:
        return list(stations)

    filtered: list[Station] = []
    for station in stations:
        cheapest = station.cheapest_fuel
        if cheapest is None:
            continue
        if min_price and cheapest.price < min_price:
            continue
        if max_price and cheapest.price > max_price:
            continue
        filtered.append(station)
    return filtered


def _name_key(station: Station) -> tuple[str, str]:
    # Accent and case folding first, raw text to order otherwise-equal names.
    decomposed = unicodedata.normalize("NFKD", station.brand)
    folded = "".join(ch for ch in decomposed if not unicodedata.combining(ch)).casefold()
    return folded, station.brand


def sort_stations(
    stations: Iterable[Station],
    sort_by: SortKey = SortKey.DISTANCE,
    *,
    has_location: bool = True,
) -> list[Station]:
    """Order stations; distance ordering needs a known user location."""
    ordered = list(stations)
    if sort_by == SortKey.DISTANCE:
        if has_location:
            ordered.sort(key=distance_or_inf)
    elif sort_by == SortKey.PRICE:
        ordered.sort(key=cheapest_price_or_inf)
    elif sort_by == SortKey.NAME:
        ordered.sort(key=_name_key)
    return ordered


def filter_stations(
    stations: Iterable[Station],
    query: QueryState,
    location: UserLocation | None = None,
) -> list[Station]:
    """Run the full query over *stations* and return the ordered result."""
    filtered = filter_by_search_term(stations, query.search_term)
    filtered = filter_by_company(filtered, query.whitelist, query.blacklist)
    filtered = filter_by_brand(filtered, query.brand)
    filtered = filter_by_fuel_type(filtered, query.fuel_type)
    filtered = filter_by_open_status(filtered, query.only_open)

    if location is not None:
        filtered = annotate_distance(filtered, location)
        filtered = filter_by_radius(filtered, query.radius)

    filtered = filter_by_price(filtered, query.min_price, query.max_price)
    filtered = sort_stations(filtered, query.sort_by, has_location=location is not None)

    if query.max_results:
        filtered = filtered[: query.max_results]
    return filtered
