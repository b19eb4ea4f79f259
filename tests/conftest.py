"""Shared test fixtures - canned upstream payloads and a static adapter."""

from __future__ import annotations

import pytest

from zipdistance.adapters.distance import StaticDistanceAdapter, ok_payload
from zipdistance.config import reset_config
from zipdistance.container import reset_container
from zipdistance.services import DistanceBatchService

DESTINATION = "60601"
SOURCES = ["95131", "32220", "07305", "75050"]


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    """Make every test start from default configuration."""
    for name in ("ZD_API_BACKEND", "ZD_API_BASE_URL", "ZD_LOG_STRUCTURED"):
        monkeypatch.delenv(name, raising=False)
    reset_config()
    reset_container()
    yield
    reset_config()
    reset_container()


@pytest.fixture()
def static_adapter() -> StaticDistanceAdapter:
    """Adapter answering for the four default sources; 75050 has no route."""
    adapter = StaticDistanceAdapter()
    adapter.add("95131", DESTINATION, ok_payload(2_960_123, 100_800))
    adapter.add("32220", DESTINATION, ok_payload(1_540_000, 51_000))
    adapter.add("07305", DESTINATION, ok_payload(1_270_456, 43_560))
    adapter.add(
        "75050",
        DESTINATION,
        {"status": "OK", "rows": [{"elements": [{"status": "ZERO_RESULTS"}]}]},
    )
    return adapter


@pytest.fixture()
def service(static_adapter: StaticDistanceAdapter) -> DistanceBatchService:
    """Batch service over the static adapter."""
    return DistanceBatchService(distance_query=static_adapter)
