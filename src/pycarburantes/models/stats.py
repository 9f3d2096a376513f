"""Aggregate statistics and explorer result models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from pycarburantes.models.station import Station


class PriceStats(BaseModel):
    model_config = ConfigDict(frozen=True)

    min: float
    max: float
    avg: float


class SearchResult(BaseModel):
    """Output of one explorer refresh: the ordered stations and their summary."""

    model_config = ConfigDict(frozen=True)

    stations: list[Station]
    nearest: Station | None = None
    cheapest_in_radius: Station | None = None
    price_stats: PriceStats | None = None
