from __future__ import annotations

import pytest

from pycarburantes.client import CarburantesClient
from pycarburantes.config import CarburantesConfig
from pycarburantes.exceptions import CarburantesConfigError


def test_defaults() -> None:
    config = CarburantesConfig()
    assert config.base_url.endswith("/ServiciosRESTCarburantes/PreciosCarburantes")
    assert config.time_zone == "Europe/Madrid"


def test_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CARBURANTES_BASE_URL", "http://localhost:8080")
    monkeypatch.setenv("CARBURANTES_TIME_ZONE", "Atlantic/Canary")
    monkeypatch.setenv("CARBURANTES_REQUEST_TIMEOUT", "15")

    config = CarburantesConfig.from_env()

    assert config.base_url == "http://localhost:8080"
    assert config.time_zone == "Atlantic/Canary"
    assert config.request_timeout == 15.0


def test_overrides_beat_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CARBURANTES_TIME_ZONE", "Atlantic/Canary")
    monkeypatch.setenv("CARBURANTES_REQUEST_TIMEOUT", "not-a-number")

    config = CarburantesConfig.from_env(time_zone="Europe/Madrid", request_timeout=5.0)

    assert config.time_zone == "Europe/Madrid"
    assert config.request_timeout == 5.0


def test_invalid_timeout_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CARBURANTES_REQUEST_TIMEOUT", "soon")
    with pytest.raises(CarburantesConfigError):
        CarburantesConfig.from_env()


def test_unknown_time_zone_rejected_by_client() -> None:
    with pytest.raises(CarburantesConfigError):
        CarburantesClient(CarburantesConfig(time_zone="Mars/Olympus_Mons"))
