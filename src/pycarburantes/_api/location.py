"""IP location and reverse geocoding endpoints."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError

from pycarburantes._constants import DEFAULT_COUNTRY, UNKNOWN_PLACE
from pycarburantes._transport import Transport
from pycarburantes.config import CarburantesConfig
from pycarburantes.exceptions import DataFetchError, LocationError, LocationFailureKind
from pycarburantes.models.location import LocationSource, UserLocation

_logger = logging.getLogger(__name__)


class IpLocationResponse(BaseModel):
    """Subset of an ipapi / ip-api style response."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    latitude: float | None = Field(default=None, validation_alias=AliasChoices("lat", "latitude"))
    longitude: float | None = Field(default=None, validation_alias=AliasChoices("lon", "longitude"))
    city: str | None = None
    region: str | None = Field(default=None, validation_alias=AliasChoices("region", "regionName"))
    country: str | None = Field(default=None, validation_alias=AliasChoices("country_name", "country"))


class Place(BaseModel):
    """Human readable description of a coordinate."""

    model_config = ConfigDict(frozen=True)

    address: str
    city: str = UNKNOWN_PLACE
    region: str = UNKNOWN_PLACE
    country: str = DEFAULT_COUNTRY


async def fetch_ip_location(config: CarburantesConfig, transport: Transport) -> UserLocation:
    """Approximate the caller's position from their public IP."""
    try:
        response = await transport.get_json(config.ip_location_url)
        parsed = IpLocationResponse.model_validate(response)
    except (DataFetchError, ValidationError) as exc:
        raise LocationError(
            f"IP location lookup failed: {exc}",
            kind=LocationFailureKind.UNAVAILABLE,
        ) from exc

    if parsed.latitude is None or parsed.longitude is None:
        raise LocationError("IP location response has no coordinates", kind=LocationFailureKind.UNAVAILABLE)

    parts = [part for part in (parsed.city, parsed.region, parsed.country) if part]
    try:
        return UserLocation(
            latitude=parsed.latitude,
            longitude=parsed.longitude,
            source=LocationSource.IP,
            city=parsed.city,
            region=parsed.region,
            country=parsed.country,
            address=", ".join(parts) or None,
        )
    except ValidationError as exc:
        raise LocationError(f"IP location out of range: {exc}", kind=LocationFailureKind.UNAVAILABLE) from exc


def _place_from_nominatim(response: Any, latitude: float, longitude: float) -> Place:
    data = response if isinstance(response, dict) else {}
    address = data.get("address") if isinstance(data.get("address"), dict) else {}
    return Place(
        address=data.get("display_name") or f"{latitude}, {longitude}",
        city=address.get("city") or address.get("town") or address.get("village") or UNKNOWN_PLACE,
        region=address.get("state") or address.get("region") or UNKNOWN_PLACE,
        country=address.get("country") or DEFAULT_COUNTRY,
    )


async def reverse_geocode(
    config: CarburantesConfig,
    transport: Transport,
    latitude: float,
    longitude: float,
) -> Place:
    """Describe a coordinate; falls back to the bare coordinate on failure."""
    params = {
        "format": "json",
        "lat": str(latitude),
        "lon": str(longitude),
        "addressdetails": "1",
    }
    try:
        response = await transport.get_json(config.reverse_geocode_url, params=params)
    except DataFetchError as exc:
        _logger.warning("Reverse geocoding failed for %s, %s: %s", latitude, longitude, exc)
        return Place(address=f"{latitude}, {longitude}")
    return _place_from_nominatim(response, latitude, longitude)
