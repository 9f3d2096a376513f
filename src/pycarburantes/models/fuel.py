"""Fuel product catalogue."""

from __future__ import annotations

import enum


class FuelType(enum.StrEnum):
    """Fuel products priced by the upstream API.

    Values are the short query keys; :attr:`api_field` is the upstream
    price column and :attr:`label` the human readable name.
    """

    GASOLINA_95 = "gasolina95"
    GASOLINA_98 = "gasolina98"
    GASOIL_A = "gasoilA"
    GASOIL_B = "gasoilB"
    GLP = "glp"
    GNC = "gnc"
    GASOLINA_95_E10 = "gasolina95E10"
    GASOLINA_98_E10 = "gasolina98E10"
    BIODIESEL = "biodiesel"
    GNL = "gnl"
    HIDROGENO = "hidrogeno"

    @property
    def api_field(self) -> str:
        return _API_FIELDS[self]

    @property
    def label(self) -> str:
        return _LABELS[self]


_API_FIELDS: dict[FuelType, str] = {
    FuelType.GASOLINA_95: "Precio Gasolina 95 E5",
    FuelType.GASOLINA_98: "Precio Gasolina 98 E5",
    FuelType.GASOIL_A: "Precio Gasoleo A",
    FuelType.GASOIL_B: "Precio Gasoleo B",
    FuelType.GLP: "Precio GLP",
    FuelType.GNC: "Precio GNC",
    FuelType.GASOLINA_95_E10: "Precio Gasolina 95 E10",
    FuelType.GASOLINA_98_E10: "Precio Gasolina 98 E10",
    FuelType.BIODIESEL: "Precio Biodiesel",
    FuelType.GNL: "Precio GNL",
    FuelType.HIDROGENO: "Precio Hidrogeno",
}

_LABELS: dict[FuelType, str] = {
    FuelType.GASOLINA_95: "Gasolina 95",
    FuelType.GASOLINA_98: "Gasolina 98",
    FuelType.GASOIL_A: "Gasóleo A",
    FuelType.GASOIL_B: "Gasóleo B",
    FuelType.GLP: "GLP",
    FuelType.GNC: "GNC",
    FuelType.GASOLINA_95_E10: "Gasolina 95 E10",
    FuelType.GASOLINA_98_E10: "Gasolina 98 E10",
    FuelType.BIODIESEL: "Biodiésel",
    FuelType.GNL: "GNL",
    FuelType.HIDROGENO: "Hidrógeno",
}

#: Fuels considered when picking a station's cheapest fuel, in tie-break order.
CHEAPEST_FUEL_ORDER: tuple[FuelType, ...] = (
    FuelType.GASOLINA_95,
    FuelType.GASOLINA_98,
    FuelType.GASOIL_A,
    FuelType.GASOIL_B,
    FuelType.GLP,
    FuelType.GNC,
)
