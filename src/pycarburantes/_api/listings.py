"""Static reference listing endpoints (``/Listados/...``)."""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import ValidationError

from pycarburantes._transport import Transport
from pycarburantes.config import CarburantesConfig
from pycarburantes.exceptions import DataFetchError
from pycarburantes.models._base import CarburantesBaseModel

TModel = TypeVar("TModel", bound=CarburantesBaseModel)

REGIONS_PATH = "/Listados/ComunidadesAutonomas/"
PROVINCES_PATH = "/Listados/Provincias/"
MUNICIPALITIES_PATH = "/Listados/Municipios/"
PRODUCTS_PATH = "/Listados/ProductosPetroliferos/"


def provinces_by_region_path(region_id: str) -> str:
    return f"/Listados/ProvinciasPorComunidad/{region_id}"


def municipalities_by_province_path(province_id: str) -> str:
    return f"/Listados/MunicipiosPorProvincia/{province_id}"


async def fetch_listing(
    config: CarburantesConfig,
    transport: Transport,
    path: str,
    model: type[TModel],
) -> list[TModel]:
    """Fetch a listing and validate every item as *model*."""
    response: Any = await transport.get_json(f"{config.base_url}{path}")
    if not isinstance(response, list):
        raise DataFetchError(f"Expected a JSON list from {path}", endpoint=path)
    try:
        return [model.model_validate(item) for item in response if isinstance(item, dict)]
    except ValidationError as exc:
        raise DataFetchError(f"Malformed {model.__name__} listing from {path}: {exc}", endpoint=path) from exc
