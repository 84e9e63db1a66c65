"""Shared pytest fixtures for roundcaddy tests."""

from __future__ import annotations

from typing import Dict, List, Tuple

import pytest
from fastapi.testclient import TestClient

from roundcaddy.config import reset_settings_cache
from roundcaddy.telemetry.events import set_telemetry_emitter

_SETTINGS_ENV = (
    "ROUNDCADDY_DEFAULT_HOLE_YARDAGE",
    "ROUNDCADDY_GPS_HIGH_ACCURACY_M",
    "ROUNDCADDY_GPS_MEDIUM_ACCURACY_M",
    "ROUNDCADDY_ON_COURSE_MAX_YARDS",
    "REQUIRE_API_KEY",
    "API_KEY",
)


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch):
    for name in _SETTINGS_ENV:
        monkeypatch.delenv(name, raising=False)
    reset_settings_cache()
    yield
    reset_settings_cache()


@pytest.fixture
def telemetry_events():
    """Capture telemetry emitted during a test."""

    captured: List[Tuple[str, Dict[str, object]]] = []
    set_telemetry_emitter(lambda event, payload: captured.append((event, payload)))
    yield captured
    set_telemetry_emitter(None)


@pytest.fixture
def client() -> TestClient:
    from roundcaddy.app import create_app

    with TestClient(create_app(), raise_server_exceptions=False) as client:
        yield client
