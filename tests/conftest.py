from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from pycarburantes.ingestion.stations import cheapest_fuel
from pycarburantes.models.fuel import FuelType
from pycarburantes.models.station import Station


def _make_station(
    brand: str = "REPSOL",
    *,
    latitude: float | None = 40.0,
    longitude: float | None = -3.0,
    prices: dict[FuelType, float] | None = None,
    is_open: bool = True,
    **fields: Any,
) -> Station:
    prices = {FuelType.GASOLINA_95: 1.5} if prices is None else prices
    return Station(
        brand=brand,
        latitude=latitude,
        longitude=longitude,
        prices=prices,
        is_open=is_open,
        cheapest_fuel=cheapest_fuel(prices),
        **fields,
    )


@pytest.fixture
def make_station() -> Callable[..., Station]:
    return _make_station


@pytest.fixture
def raw_station() -> dict[str, Any]:
    """A ``ListaEESSPrecio`` record as the ministry service returns it."""
    return {
        "C.P.": "28006",
        "Dirección": "CALLE SERRANO, 110",
        "Horario": "L-D: 24H",
        "Latitud": "40,437306",
        "Localidad": "MADRID",
        "Longitud (WGS84)": "-3,686833",
        "Margen": "D",
        "Municipio": "Madrid",
        "Precio Biodiesel": "",
        "Precio Gasoleo A": "1,459",
        "Precio Gasoleo B": "",
        "Precio Gasolina 95 E5": "1,589",
        "Precio Gasolina 98 E5": "1,729",
        "Precio GLP": "0,000",
        "Precio GNC": "",
        "Precio Hidrogeno": "",
        "Provincia": "MADRID",
        "Remisión": "dm",
        "Rótulo": "REPSOL",
        "Tipo Venta": "P",
        "IDEESS": "4375",
        "IDMunicipio": "4354",
        "IDProvincia": "28",
        "IDCCAA": "13",
    }
