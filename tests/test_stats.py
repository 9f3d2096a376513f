from __future__ import annotations

import math

import pytest

from pycarburantes.models.fuel import FuelType
from pycarburantes.models.stats import PriceStats
from pycarburantes.stats import cheapest_in_radius, nearest, price_stats


def test_empty_inputs_return_none() -> None:
    assert nearest([]) is None
    assert cheapest_in_radius([], 10) is None
    assert price_stats([], FuelType.GASOLINA_95) is None


def test_nearest(make_station) -> None:
    stations = [
        make_station("FAR", distance=12.0),
        make_station("UNKNOWN"),
        make_station("NEAR", distance=0.0),
    ]
    result = nearest(stations)
    assert result is not None
    assert result.brand == "NEAR"


def test_nearest_without_distances_returns_first(make_station) -> None:
    stations = [make_station("FIRST"), make_station("SECOND", distance=math.inf)]
    result = nearest(stations)
    assert result is not None
    assert result.brand == "FIRST"


def test_cheapest_in_radius(make_station) -> None:
    stations = [
        make_station("CHEAP_FAR", distance=30.0, prices={FuelType.GASOIL_A: 1.20}),
        make_station("MID", distance=4.0, prices={FuelType.GASOIL_A: 1.45}),
        make_station("CHEAP_NEAR", distance=9.5, prices={FuelType.GASOIL_A: 1.35}),
        make_station("UNPRICED", distance=1.0, prices={}),
    ]
    result = cheapest_in_radius(stations, 10)
    assert result is not None
    assert result.brand == "CHEAP_NEAR"


def test_cheapest_in_radius_requires_a_price(make_station) -> None:
    assert cheapest_in_radius([make_station("UNPRICED", distance=1.0, prices={})], 10) is None


def test_cheapest_in_radius_unknown_distance_never_qualifies(make_station) -> None:
    assert cheapest_in_radius([make_station("NOWHERE")], 10_000) is None


def test_price_stats(make_station) -> None:
    stations = [
        make_station(prices={FuelType.GASOLINA_95: 1.50}),
        make_station(prices={FuelType.GASOLINA_95: 1.60}),
        make_station(prices={FuelType.GASOLINA_95: 1.70}),
        make_station(prices={FuelType.GASOIL_A: 1.10}),
    ]
    stats = price_stats(stations, FuelType.GASOLINA_95)

    assert isinstance(stats, PriceStats)
    assert stats.min == 1.50
    assert stats.max == 1.70
    assert stats.avg == pytest.approx(1.60)


def test_price_stats_none_without_prices_for_fuel(make_station) -> None:
    stations = [make_station(prices={FuelType.GASOIL_A: 1.10})]
    assert price_stats(stations, FuelType.GLP) is None
