"""Normalization helpers.

Centralizes defensive parsing of the upstream's locale formatted strings.
Nothing here raises: unparseable input becomes ``None``.
"""

from __future__ import annotations

import math
from typing import Any


def parse_decimal(value: Any) -> float | None:
    """Parse a comma-decimal string such as ``"40,416775"``.

    Plain numbers pass through.  Empty, unparseable and non-finite values give
    ``None``.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        result = float(value)
    else:
        text = str(value).strip().replace(",", ".", 1)
        if not text:
            return None
        try:
            result = float(text)
        except ValueError:
            return None
    if not math.isfinite(result):
        return None
    return result


def parse_price(value: Any) -> float | None:
    """Parse a price; non-positive prices (``"0,000"``) count as absent."""
    price = parse_decimal(value)
    if price is None or price <= 0:
        return None
    return price


def safe_str(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text if text else None
