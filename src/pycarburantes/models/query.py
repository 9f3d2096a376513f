"""Query state for the filter/sort engine."""

from __future__ import annotations

import enum
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pycarburantes.models.fuel import FuelType


class SortKey(enum.StrEnum):
    DISTANCE = "distance"
    PRICE = "price"
    NAME = "name"


def split_fragments(value: Any) -> tuple[str, ...]:
    """Split a comma separated brand list into lower-cased fragments.

    Blank fragments are dropped, so ``"repsol, "`` means just ``repsol``.
    """
    if value is None:
        return ()
    items = value.split(",") if isinstance(value, str) else list(value)
    fragments = (str(item).strip().lower() for item in items)
    return tuple(fragment for fragment in fragments if fragment)


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


class QueryState(BaseModel):
    """Every user-controlled filter and ordering option.

    Rebuilt from the form on every change; see :meth:`from_form`.
    Unset values (``None``, empty strings, empty fragment lists) disable
    the matching filter.  A ``radius``, ``min_price``, ``max_price`` or
    ``max_results`` of ``0`` also counts as unset.
    """

    model_config = ConfigDict(frozen=True)

    search_term: str = ""
    radius: float | None = Field(default=None, ge=0)
    whitelist: tuple[str, ...] = ()
    blacklist: tuple[str, ...] = ()
    brand: str = ""
    fuel_type: FuelType | None = None
    min_price: float | None = Field(default=None, ge=0)
    max_price: float | None = Field(default=None, ge=0)
    only_open: bool = False
    sort_by: SortKey = SortKey.DISTANCE
    max_results: int | None = Field(default=None, ge=0)

    @field_validator("whitelist", "blacklist", mode="before")
    @classmethod
    def _split_fragments(cls, value: Any) -> tuple[str, ...]:
        return split_fragments(value)

    @field_validator("radius", "fuel_type", "min_price", "max_price", "max_results", mode="before")
    @classmethod
    def _blank_means_unset(cls, value: Any) -> Any:
        return _blank_to_none(value)

    @field_validator("sort_by", mode="before")
    @classmethod
    def _default_sort(cls, value: Any) -> Any:
        return _blank_to_none(value) or SortKey.DISTANCE

    @field_validator("search_term", "brand", mode="before")
    @classmethod
    def _strip_text(cls, value: Any) -> str:
        return "" if value is None else str(value).strip()

    @classmethod
    def from_form(cls, form: Mapping[str, Any]) -> QueryState:
        """Build a query from loose form values.

        Accepts both the field names and the web form control names
        (``searchTerm``, ``empresasWhitelist``, ``sortBy``, ...).
        """
        renames = {
            "searchTerm": "search_term",
            "empresasWhitelist": "whitelist",
            "empresasBlacklist": "blacklist",
            "fuelType": "fuel_type",
            "minPrice": "min_price",
            "maxPrice": "max_price",
            "onlyOpen": "only_open",
            "sortBy": "sort_by",
            "maxResults": "max_results",
        }
        fields = set(cls.model_fields)
        values: dict[str, Any] = {}
        for key, value in form.items():
            name = renames.get(key, key)
            if name in fields:
                values[name] = value
        return cls.model_validate(values)
