from __future__ import annotations

import math

import pytest

from pycarburantes.models.fuel import FuelType
from pycarburantes.models.location import UserLocation
from pycarburantes.models.query import QueryState, SortKey
from pycarburantes.search import (
    annotate_distance,
    filter_by_brand,
    filter_by_company,
    filter_by_fuel_type,
    filter_by_open_status,
    filter_by_price,
    filter_by_radius,
    filter_by_search_term,
    filter_stations,
    sort_stations,
)

USER = UserLocation(latitude=40.0, longitude=-3.0)


def _brands(stations) -> list[str]:
    return [s.brand for s in stations]


# ------------------------------------------------------------------
# Individual filters
# ------------------------------------------------------------------


def test_search_term_matches_any_text_field(make_station) -> None:
    stations = [
        make_station("REPSOL", address="AVENIDA DE ARAGON 1"),
        make_station("CEPSA", municipality="Zaragoza"),
        make_station("BP", province="HUESCA"),
        make_station("SHELL", address="CALLE MAYOR"),
    ]
    assert _brands(filter_by_search_term(stations, "ARAGON")) == ["REPSOL"]
    assert _brands(filter_by_search_term(stations, "zaragoza")) == ["CEPSA"]
    assert _brands(filter_by_search_term(stations, "huesca")) == ["BP"]
    assert _brands(filter_by_search_term(stations, "shell")) == ["SHELL"]
    assert len(filter_by_search_term(stations, "")) == 4


def test_whitelist_keeps_matching_fragments(make_station) -> None:
    stations = [make_station("REPSOL"), make_station("CEPSA"), make_station("BALLENOIL")]
    assert _brands(filter_by_company(stations, whitelist=["repsol", "oil"])) == ["REPSOL", "BALLENOIL"]


def test_blacklist_drops_matching_fragments(make_station) -> None:
    stations = [make_station("REPSOL"), make_station("CEPSA"), make_station("BALLENOIL")]
    assert _brands(filter_by_company(stations, blacklist=["Cepsa"])) == ["REPSOL", "BALLENOIL"]


def test_whitelist_then_blacklist(make_station) -> None:
    stations = [make_station("REPSOL"), make_station("REPSOL AUTOGAS"), make_station("CEPSA")]
    filtered = filter_by_company(stations, whitelist=["repsol"], blacklist=["autogas"])
    assert _brands(filtered) == ["REPSOL"]


def test_brand_filter_is_substring(make_station) -> None:
    stations = [make_station("GALP ENERGIA"), make_station("GALPAO"), make_station("BP")]
    assert _brands(filter_by_brand(stations, "galp")) == ["GALP ENERGIA", "GALPAO"]


def test_fuel_type_filter(make_station) -> None:
    stations = [
        make_station("A", prices={FuelType.GASOIL_A: 1.4}),
        make_station("B", prices={FuelType.GASOLINA_95: 1.5}),
        make_station("C", prices={}),
    ]
    assert _brands(filter_by_fuel_type(stations, FuelType.GASOIL_A)) == ["A"]
    assert len(filter_by_fuel_type(stations, None)) == 3


def test_open_status_filter(make_station) -> None:
    stations = [make_station("OPEN", is_open=True), make_station("CLOSED", is_open=False)]
    assert _brands(filter_by_open_status(stations, True)) == ["OPEN"]
    assert len(filter_by_open_status(stations, False)) == 2


def test_annotate_distance_copies_stations(make_station) -> None:
    original = make_station(latitude=40.0, longitude=-3.0)
    (annotated,) = annotate_distance([original], USER)

    assert annotated.distance == pytest.approx(0.0)
    assert original.distance is None


def test_missing_coordinates_are_infinitely_far(make_station) -> None:
    (annotated,) = annotate_distance([make_station(latitude=None, longitude=None)], USER)
    assert math.isinf(annotated.distance)


def test_radius_zero_or_none_disables_filter(make_station) -> None:
    stations = annotate_distance([make_station(latitude=41.0)], USER)
    assert len(filter_by_radius(stations, None)) == 1
    assert len(filter_by_radius(stations, 0)) == 1
    assert filter_by_radius(stations, 10) == []


def test_price_bounds(make_station) -> None:
    stations = [
        make_station("CHEAP", prices={FuelType.GASOIL_A: 1.30}),
        make_station("MID", prices={FuelType.GASOIL_A: 1.50}),
        make_station("DEAR", prices={FuelType.GASOIL_A: 1.70}),
        make_station("NONE", prices={}),
    ]
    assert _brands(filter_by_price(stations, 1.4, 1.6)) == ["MID"]
    assert _brands(filter_by_price(stations, min_price=1.5)) == ["MID", "DEAR"]
    assert _brands(filter_by_price(stations, max_price=1.5)) == ["CHEAP", "MID"]
    assert len(filter_by_price(stations)) == 4


def test_zero_price_bounds_are_unset(make_station) -> None:
    stations = [make_station("PRICED", prices={FuelType.GASOIL_A: 1.50}), make_station("NONE", prices={})]
    assert _brands(filter_by_price(stations, 0, 0)) == ["PRICED", "NONE"]
    assert _brands(filter_by_price(stations, 0, 1.6)) == ["PRICED"]


# ------------------------------------------------------------------
# Sorting
# ------------------------------------------------------------------


def test_sort_by_name_is_alphabetical(make_station) -> None:
    stations = [make_station("Repsol"), make_station("Cepsa"), make_station("BP")]
    assert _brands(sort_stations(stations, SortKey.NAME)) == ["BP", "Cepsa", "Repsol"]


def test_sort_by_name_ignores_case_and_accents(make_station) -> None:
    stations = [make_station("eroski"), make_station("Érica"), make_station("ALCAMPO")]
    assert _brands(sort_stations(stations, SortKey.NAME)) == ["ALCAMPO", "Érica", "eroski"]


def test_sort_by_price_puts_unpriced_last(make_station) -> None:
    stations = [
        make_station("NONE", prices={}),
        make_station("DEAR", prices={FuelType.GASOLINA_95: 1.7}),
        make_station("CHEAP", prices={FuelType.GASOIL_A: 1.3}),
    ]
    assert _brands(sort_stations(stations, SortKey.PRICE)) == ["CHEAP", "DEAR", "NONE"]


def test_sort_by_distance_needs_location(make_station) -> None:
    stations = [make_station("FAR", distance=9.0), make_station("NEAR", distance=1.0)]
    assert _brands(sort_stations(stations, SortKey.DISTANCE)) == ["NEAR", "FAR"]
    assert _brands(sort_stations(stations, SortKey.DISTANCE, has_location=False)) == ["FAR", "NEAR"]


# ------------------------------------------------------------------
# Full pipeline
# ------------------------------------------------------------------


class TestFilterStations:
    def test_radius_filter(self, make_station) -> None:
        here = make_station("HERE", latitude=40.0, longitude=-3.0)
        far = make_station("FAR", latitude=40.45, longitude=-3.0)  # ~50 km north

        result = filter_stations([here, far], QueryState(radius=10), USER)

        assert _brands(result) == ["HERE"]
        assert result[0].distance == pytest.approx(0.0, abs=1e-9)

    def test_without_location_no_distance_is_computed(self, make_station) -> None:
        stations = [make_station("B"), make_station("A")]
        result = filter_stations(stations, QueryState(radius=10))

        assert _brands(result) == ["B", "A"]
        assert all(s.distance is None for s in result)

    def test_station_without_coordinates_survives_text_filters(self, make_station) -> None:
        nowhere = make_station("REPSOL", latitude=None, longitude=None)

        assert filter_stations([nowhere], QueryState(search_term="repsol")) == [nowhere]
        assert filter_stations([nowhere], QueryState(radius=10), USER) == []

    def test_price_filter_runs_after_radius(self, make_station) -> None:
        near_dear = make_station("NEAR", latitude=40.01, prices={FuelType.GASOLINA_95: 1.9})
        far_cheap = make_station("FAR", latitude=41.0, prices={FuelType.GASOLINA_95: 1.3})

        query = QueryState(radius=10, max_price=1.5)
        assert filter_stations([near_dear, far_cheap], query, USER) == []

    def test_zero_min_price_from_form_keeps_unpriced_stations(self, make_station) -> None:
        priced = make_station("A", prices={FuelType.GASOLINA_95: 1.5})
        unpriced = make_station("B", prices={})

        result = filter_stations([priced, unpriced], QueryState.from_form({"minPrice": 0}))

        assert _brands(result) == ["A", "B"]

    def test_combined_query(self, make_station) -> None:
        stations = [
            make_station("REPSOL", latitude=40.02, prices={FuelType.GASOIL_A: 1.45}),
            make_station("REPSOL", latitude=40.01, prices={FuelType.GASOIL_A: 1.55}),
            make_station("CEPSA", latitude=40.0, prices={FuelType.GASOIL_A: 1.35}),
            make_station("REPSOL", latitude=40.03, prices={FuelType.GASOLINA_95: 1.40}),
            make_station("REPSOL", latitude=40.0, prices={FuelType.GASOIL_A: 1.30}, is_open=False),
        ]
        query = QueryState(
            radius=20,
            whitelist="repsol",
            fuel_type=FuelType.GASOIL_A,
            only_open=True,
            sort_by=SortKey.PRICE,
        )

        result = filter_stations(stations, query, USER)

        assert [s.cheapest_fuel.price for s in result] == [1.45, 1.55]

    def test_cap_applies_after_sorting(self, make_station) -> None:
        stations = [make_station(f"S{i}", latitude=40.0 + i / 100) for i in range(5, 0, -1)]
        result = filter_stations(stations, QueryState(max_results=2), USER)
        assert _brands(result) == ["S1", "S2"]

    def test_input_is_not_mutated(self, make_station) -> None:
        stations = [make_station("B"), make_station("A")]
        filter_stations(stations, QueryState(sort_by=SortKey.NAME), USER)
        assert _brands(stations) == ["B", "A"]
        assert stations[0].distance is None

    def test_name_sort_is_independent_of_input_order(self, make_station) -> None:
        brands = ["Repsol", "Cepsa", "BP"]
        forward = filter_stations([make_station(b) for b in brands], QueryState(sort_by="name"))
        backward = filter_stations([make_station(b) for b in reversed(brands)], QueryState(sort_by="name"))
        assert _brands(forward) == _brands(backward) == ["BP", "Cepsa", "Repsol"]
