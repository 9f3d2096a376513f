"""HTTP transport for the JSON services the client talks to."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any, Protocol

import aiohttp

from pycarburantes.config import CarburantesConfig
from pycarburantes.exceptions import DataFetchError

_logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Structural transport interface used by endpoint modules.

    Having a protocol here makes it easy to pass test doubles while keeping
    the production implementation (`HttpTransport`) concrete.
    """

    async def get_json(self, url: str, params: Mapping[str, str] | None = None) -> Any:
        ...


class HttpTransport:
    """GET + JSON decoding on top of a shared aiohttp session."""

    def __init__(self, config: CarburantesConfig, http_session: aiohttp.ClientSession) -> None:
        self._config = config
        self._http = http_session
        self._timeout = aiohttp.ClientTimeout(total=config.request_timeout)

    async def get_json(self, url: str, params: Mapping[str, str] | None = None) -> Any:
        """Fetch *url* and decode its JSON body.

        Raises :class:`DataFetchError` on network failures, non-200
        statuses and undecodable bodies.
        """
        headers = {
            "accept": "application/json",
            "user-agent": self._config.user_agent,
        }

        _logger.debug("GET %s", url)

        try:
            async with self._http.get(url, params=params, headers=headers, timeout=self._timeout) as resp:
                text = await resp.text()
                if resp.status != 200:
                    raise DataFetchError(
                        f"HTTP {resp.status} from {url}: {text[:200]}",
                        status_code=resp.status,
                        endpoint=url,
                    )
        except DataFetchError:
            raise
        except (aiohttp.ClientError, TimeoutError, UnicodeDecodeError) as exc:
            raise DataFetchError(f"Request to {url} failed: {exc}", endpoint=url) from exc

        # The ministry service prefixes some responses with a BOM.
        try:
            return json.loads(text.lstrip("\ufeff"))
        except json.JSONDecodeError as exc:
            raise DataFetchError(f"Invalid JSON from {url}: {text[:200]}", endpoint=url) from exc
