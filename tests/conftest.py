"""
Shared test configuration.

Every test runs without simulated latency and against freshly seeded
stores, so mutations made by one test never leak into another.
"""

import time
from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from app_insights_api.app.core.config import settings
from app_insights_api.app.core.store import init_store
from app_insights_api.app.main import app


# Reference time matching the bundled seed datasets.
SEED_NOW = datetime(2024, 1, 15, 15, 0, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def fresh_store(monkeypatch):
    """Disable latency and reload the seed datasets before each test."""
    monkeypatch.setattr(settings, "latency_scale", 0.0)
    init_store()
    yield


@pytest.fixture
def client():
    """HTTP client bound to the FastAPI application."""
    with TestClient(app) as c:
        yield c


@pytest.fixture
def seed_now():
    return SEED_NOW


@pytest.fixture
def tokyo_local_time(monkeypatch):
    """Run with a host timezone nine hours ahead of UTC."""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")
    monkeypatch.setenv("TZ", "Asia/Tokyo")
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()
