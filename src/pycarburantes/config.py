"""Client configuration for pycarburantes."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from pycarburantes._constants import BASE_URL, IP_LOCATION_URL, REVERSE_GEOCODE_URL, USER_AGENT
from pycarburantes.exceptions import CarburantesConfigError


@dataclasses.dataclass(frozen=True)
class CarburantesConfig:
    """Client configuration.

    Parameters
    ----------
    base_url : str
        Root of the ``PreciosCarburantes`` REST service.
    ip_location_url : str
        JSON endpoint used for IP based location.
    reverse_geocode_url : str
        Nominatim compatible reverse geocoding endpoint.
    time_zone : str
        IANA time zone used to decide whether a station is open now.
    request_timeout : float
        Total per-request timeout in seconds.  The full station list is
        several megabytes, so keep this generous.
    user_agent : str
        User-Agent header sent with every request (Nominatim requires one).
    """

    base_url: str = BASE_URL
    ip_location_url: str = IP_LOCATION_URL
    reverse_geocode_url: str = REVERSE_GEOCODE_URL
    time_zone: str = "Europe/Madrid"
    request_timeout: float = 60.0
    user_agent: str = USER_AGENT

    @classmethod
    def from_env(cls, **overrides: Any) -> CarburantesConfig:
        """Create configuration from ``CARBURANTES_*`` environment variables.

        Explicit keyword arguments override environment values.
        """
        env = os.environ

        _ENV_CONFIG_MAP = {
            "CARBURANTES_BASE_URL": "base_url",
            "CARBURANTES_IP_LOCATION_URL": "ip_location_url",
            "CARBURANTES_REVERSE_GEOCODE_URL": "reverse_geocode_url",
            "CARBURANTES_TIME_ZONE": "time_zone",
            "CARBURANTES_USER_AGENT": "user_agent",
        }
        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = val

        # request_timeout is numeric, handle separately
        timeout_env = env.get("CARBURANTES_REQUEST_TIMEOUT")
        if timeout_env is not None and "request_timeout" not in overrides:
            try:
                config_kwargs["request_timeout"] = float(timeout_env)
            except ValueError as exc:
                raise CarburantesConfigError(
                    f"CARBURANTES_REQUEST_TIMEOUT must be a number, got {timeout_env!r}"
                ) from exc

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
