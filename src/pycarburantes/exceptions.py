"""Custom exception hierarchy for pycarburantes."""

from __future__ import annotations

import enum


class CarburantesError(Exception):
    """Base exception for all pycarburantes errors."""


class CarburantesConfigError(CarburantesError):
    """Invalid or missing configuration."""


class DataFetchError(CarburantesError):
    """Station or listing download failed (network, non-200, invalid JSON, empty listing)."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        endpoint: str = "",
    ) -> None:
        self.status_code = status_code
        self.endpoint = endpoint
        super().__init__(message)


class LocationFailureKind(enum.StrEnum):
    """Why a location provider could not produce a position."""

    PERMISSION_DENIED = "permission-denied"
    UNAVAILABLE = "unavailable"
    TIMEOUT = "timeout"
    UNSUPPORTED = "unsupported"


class LocationError(CarburantesError):
    """GPS or IP based location lookup failed.

    Non-fatal by nature: callers resolving the location automatically are
    expected to log and carry on without one, while user-initiated lookups
    should surface the message.
    """

    def __init__(
        self,
        message: str,
        *,
        kind: LocationFailureKind = LocationFailureKind.UNAVAILABLE,
    ) -> None:
        self.kind = kind
        super().__init__(message)
