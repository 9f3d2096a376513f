"""Summary statistics over a result set.

Every function accepts an empty collection and returns ``None`` for it.
"""

from __future__ import annotations

from collections.abc import Iterable

from pycarburantes.models.fuel import FuelType
from pycarburantes.models.station import Station
from pycarburantes.models.stats import PriceStats
from pycarburantes.search import cheapest_price_or_inf, distance_or_inf


def nearest(stations: Iterable[Station]) -> Station | None:
    """Station with the smallest ``distance``; unknown distance counts as infinite."""
    return min(stations, key=distance_or_inf, default=None)


def cheapest_in_radius(stations: Iterable[Station], radius: float) -> Station | None:
    """Cheapest priced station whose ``distance`` is within *radius* km."""
    candidates = [
        s for s in stations if distance_or_inf(s) <= radius and s.cheapest_fuel is not None
    ]
    return min(candidates, key=cheapest_price_or_inf, default=None)


def price_stats(stations: Iterable[Station], fuel_type: FuelType) -> PriceStats | None:
    """Min, max and mean of the valid *fuel_type* prices."""
    prices = [price for s in stations if (price := s.price_for(fuel_type)) is not None]
    if not prices:
        return None
    return PriceStats(min=min(prices), max=max(prices), avg=sum(prices) / len(prices))
