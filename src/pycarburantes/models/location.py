"""User location and route models."""

from __future__ import annotations

import enum

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class LocationSource(enum.StrEnum):
    """How a :class:`UserLocation` was obtained."""

    GPS = "gps"
    MANUAL = "manual"
    IP = "ip"


class UserLocation(BaseModel):
    """Position the user searches from.

    Immutable; re-locating replaces it wholesale.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    latitude: float = Field(ge=-90, le=90, validation_alias=AliasChoices("latitude", "lat"))
    longitude: float = Field(ge=-180, le=180, validation_alias=AliasChoices("longitude", "lon", "lng"))
    accuracy: float | None = None
    source: LocationSource = LocationSource.MANUAL
    address: str | None = None
    city: str | None = None
    region: str | None = None
    country: str | None = None


class RoutePoint(BaseModel):
    """A trip endpoint."""

    model_config = ConfigDict(frozen=True)

    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)
    name: str | None = None


class RouteQuery(BaseModel):
    """A trip and the extra distance the user accepts to refuel on it."""

    model_config = ConfigDict(frozen=True)

    start: RoutePoint
    end: RoutePoint
    max_detour: float = Field(default=5.0, ge=0)
