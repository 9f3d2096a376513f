"""High-level async client for the Spanish fuel price service."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from datetime import date, datetime
from typing import Any, TypeVar
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import aiohttp

from pycarburantes._api import listings as _listings_api
from pycarburantes._api import location as _location_api
from pycarburantes._api import stations as _stations_api
from pycarburantes._api.location import Place
from pycarburantes._cache import ListingCache
from pycarburantes._transport import HttpTransport
from pycarburantes.config import CarburantesConfig
from pycarburantes.exceptions import (
    CarburantesConfigError,
    CarburantesError,
    DataFetchError,
    LocationError,
    LocationFailureKind,
)
from pycarburantes.ingestion.stations import normalize_stations
from pycarburantes.models._base import CarburantesBaseModel
from pycarburantes.models.location import LocationSource, UserLocation
from pycarburantes.models.reference import Municipality, Product, Province, Region, StationFilter
from pycarburantes.models.station import Station

_logger = logging.getLogger(__name__)

TModel = TypeVar("TModel", bound=CarburantesBaseModel)

DeviceLocator = Callable[[], Awaitable[UserLocation]]
"""Host supplied GPS provider; raises :class:`LocationError` on failure."""


class CarburantesClient:
    """Async client for station prices, reference listings and location.

    Usage::

        async with CarburantesClient(CarburantesConfig()) as client:
            stations = await client.get_all_stations()
    """

    def __init__(
        self,
        config: CarburantesConfig | None = None,
        *,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        self._config = config if config is not None else CarburantesConfig()
        self._external_session = session is not None
        self._http_session = session
        self._transport: HttpTransport | None = None
        self._listings = ListingCache()
        try:
            self._tz = ZoneInfo(self._config.time_zone)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise CarburantesConfigError(f"Unknown time zone {self._config.time_zone!r}") from exc

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> CarburantesClient:
        if self._http_session is None:
            self._http_session = aiohttp.ClientSession()
        self._transport = HttpTransport(self._config, self._http_session)
        return self

    async def __aexit__(self, *exc: Any) -> None:
        if not self._external_session and self._http_session is not None:
            await self._http_session.close()
            self._http_session = None
        self._transport = None

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _require_transport(self) -> HttpTransport:
        if self._transport is None:
            raise CarburantesError("Client not initialized. Use 'async with CarburantesClient(...) as client:'")
        return self._transport

    def now(self) -> datetime:
        """Current time in the configured time zone."""
        return datetime.now(self._tz)

    async def _load_stations(self, path: str, *, required: bool) -> list[Station]:
        records = await _stations_api.fetch_station_records(
            self._config,
            self._require_transport(),
            path,
            required=required,
        )
        return normalize_stations(records, now=self.now())

    async def _listing(self, path: str, model: type[TModel], *, cached: bool) -> list[TModel]:
        """Fetch a reference listing; failures are logged and give ``[]``."""
        if cached and path in self._listings:
            return self._listings.get(path)
        try:
            items = await _listings_api.fetch_listing(self._config, self._require_transport(), path, model)
        except DataFetchError as exc:
            _logger.warning("Could not load %s: %s", path, exc)
            return []
        if cached:
            self._listings.set(path, items)
        return items

    # ------------------------------------------------------------------
    # Stations
    # ------------------------------------------------------------------

    async def get_all_stations(self) -> list[Station]:
        """Every land station with current prices.

        Raises :class:`DataFetchError` if the response carries no listing.
        """
        return await self._load_stations(_stations_api.STATIONS_PATH, required=True)

    async def get_stations(self, station_filter: StationFilter | None = None) -> list[Station]:
        """Stations pre-filtered server side; an empty listing gives ``[]``."""
        path = _stations_api.build_station_path(station_filter)
        return await self._load_stations(path, required=False)

    async def get_historical_stations(
        self,
        day: date | str,
        station_filter: StationFilter | None = None,
    ) -> list[Station]:
        """Station prices as published on *day* (``date`` or ``dd-mm-yyyy``)."""
        path = _stations_api.build_historical_path(day, station_filter)
        return await self._load_stations(path, required=False)

    # ------------------------------------------------------------------
    # Reference listings
    # ------------------------------------------------------------------

    async def get_regions(self) -> list[Region]:
        return await self._listing(_listings_api.REGIONS_PATH, Region, cached=True)

    async def get_provinces(self) -> list[Province]:
        return await self._listing(_listings_api.PROVINCES_PATH, Province, cached=True)

    async def get_provinces_by_region(self, region_id: str) -> list[Province]:
        return await self._listing(_listings_api.provinces_by_region_path(region_id), Province, cached=False)

    async def get_municipalities(self) -> list[Municipality]:
        return await self._listing(_listings_api.MUNICIPALITIES_PATH, Municipality, cached=False)

    async def get_municipalities_by_province(self, province_id: str) -> list[Municipality]:
        path = _listings_api.municipalities_by_province_path(province_id)
        return await self._listing(path, Municipality, cached=True)

    async def get_products(self) -> list[Product]:
        return await self._listing(_listings_api.PRODUCTS_PATH, Product, cached=True)

    # ------------------------------------------------------------------
    # Location
    # ------------------------------------------------------------------

    async def get_location_by_ip(self) -> UserLocation:
        return await _location_api.fetch_ip_location(self._config, self._require_transport())

    async def reverse_geocode(self, latitude: float, longitude: float) -> Place:
        return await _location_api.reverse_geocode(self._config, self._require_transport(), latitude, longitude)

    async def locate(self, device: DeviceLocator | None = None) -> UserLocation:
        """Resolve the user's position: device GPS first, then IP.

        Raises :class:`LocationError` only when both attempts fail.
        """
        try:
            if device is None:
                raise LocationError("No device location provider", kind=LocationFailureKind.UNSUPPORTED)
            return await device()
        except LocationError as gps_error:
            _logger.warning("Device location failed (%s), trying IP location", gps_error.kind)

        try:
            return await self.get_location_by_ip()
        except LocationError as ip_error:
            raise LocationError(
                "Could not determine the location automatically",
                kind=ip_error.kind,
            ) from ip_error

    @staticmethod
    def create_manual_location(latitude: float, longitude: float) -> UserLocation:
        return UserLocation(latitude=latitude, longitude=longitude, source=LocationSource.MANUAL)
