"""Fuel station model."""

from __future__ import annotations

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

from pycarburantes.models._base import CarburantesBaseModel
from pycarburantes.models.fuel import FuelType


class CheapestFuel(BaseModel):
    """Lowest valid price among a station's fuels."""

    model_config = ConfigDict(frozen=True)

    fuel_type: FuelType
    price: float

    @property
    def name(self) -> str:
        return self.fuel_type.label


class Station(CarburantesBaseModel):
    """A normalized fuel station.

    Built by :func:`pycarburantes.ingestion.stations.parse_station` from an
    upstream ``ListaEESSPrecio`` record.  Coordinates are ``None`` when
    the upstream value is missing or unparseable; ``prices`` only holds
    valid positive prices.

    ``distance`` and ``detour`` are transient: they are only set on the
    copies returned by a location-aware query.
    """

    _stash_raw: ClassVar[bool] = False

    station_id: str = ""
    brand: str = ""
    address: str = ""
    postal_code: str = ""
    locality: str = ""
    municipality: str = ""
    province: str = ""
    margin: str = ""
    remission: str = ""
    sale_type: str = ""
    schedule: str = ""
    latitude: float | None = None
    longitude: float | None = None
    municipality_id: str | None = None
    province_id: str | None = None
    region_id: str | None = None
    prices: dict[FuelType, float] = Field(default_factory=dict)

    is_open: bool = True
    cheapest_fuel: CheapestFuel | None = None

    distance: float | None = None
    detour: float | None = None

    @property
    def has_coordinates(self) -> bool:
        return self.latitude is not None and self.longitude is not None

    def price_for(self, fuel_type: FuelType) -> float | None:
        """Valid price for *fuel_type*, ``None`` when not sold or not parseable."""
        return self.prices.get(fuel_type)
