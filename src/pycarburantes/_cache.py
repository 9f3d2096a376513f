"""Memoization table for static reference listings."""

from __future__ import annotations

import copy
from collections.abc import Hashable
from typing import Any


class ListingCache:
    """Listing responses keyed by request parameters.

    Entries live as long as the owning client; there is no expiry.
    Values are copied on the way in and out so callers cannot mutate
    the cached listing.
    """

    def __init__(self) -> None:
        self._entries: dict[Hashable, Any] = {}

    def __contains__(self, key: Hashable) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, key: Hashable) -> Any | None:
        if key not in self._entries:
            return None
        return copy.copy(self._entries[key])

    def set(self, key: Hashable, value: Any) -> None:
        self._entries[key] = copy.copy(value)

    def clear(self) -> None:
        self._entries.clear()
