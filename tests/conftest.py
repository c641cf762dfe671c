"""
Pytest configuration and fixtures.
"""

from __future__ import annotations

import os

import pytest
from fastapi.testclient import TestClient

# Don't inherit locale or windows from a developer .env
os.environ.setdefault("RECOMMENDATION_LOCALE", "en")
os.environ.setdefault("DUPLICATE_MIN_INTERVAL_DAYS", "30")
os.environ.setdefault("FREELANCE_LIMIT_DAYS", "90")
os.environ.setdefault("RECENT_APPROACH_DAYS", "90")


@pytest.fixture
def client() -> TestClient:
    """FastAPI test client."""
    from approach_engine.main import app

    return TestClient(app)


@pytest.fixture(autouse=True)
def _clear_settings_cache() -> None:
    """Clear the cached Settings before and after each test."""
    from approach_engine.config import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
