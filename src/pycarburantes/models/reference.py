"""Static reference listings (regions, provinces, municipalities, products)."""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from pycarburantes.models._base import CarburantesBaseModel


class Region(CarburantesBaseModel):
    """Comunidad autónoma."""

    region_id: str = Field(alias="IDCCAA")
    name: str = Field(default="", alias="CCAA")


class Province(CarburantesBaseModel):
    # The upstream Provincias listing spells the key "IDPovincia".
    province_id: str = Field(validation_alias=AliasChoices("IDProvincia", "IDPovincia", "province_id"))
    name: str = Field(default="", alias="Provincia")
    region_id: str | None = Field(default=None, alias="IDCCAA")


class Municipality(CarburantesBaseModel):
    municipality_id: str = Field(alias="IDMunicipio")
    name: str = Field(default="", alias="Municipio")
    province_id: str | None = Field(default=None, alias="IDProvincia")
    region_id: str | None = Field(default=None, alias="IDCCAA")


class Product(CarburantesBaseModel):
    """Petroleum product as listed by ``ProductosPetroliferos``."""

    product_id: str = Field(alias="IDProducto")
    name: str = Field(default="", alias="NombreProducto")
    abbreviation: str = Field(default="", alias="NombreProductoAbreviatura")


class StationFilter(BaseModel):
    """Server-side pre-filter for station downloads.

    Only one geographic level is honoured, in region, province,
    municipality order; ``product_id`` combines with it.
    """

    model_config = ConfigDict(frozen=True)

    region_id: str | None = None
    province_id: str | None = None
    municipality_id: str | None = None
    product_id: str | None = None
