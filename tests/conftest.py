"""Test configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient

from backend.config import reset_app_config
from backend.main import app


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    """Start every test from a clean environment and an unbuilt config."""
    monkeypatch.delenv("PORT", raising=False)
    reset_app_config()
    yield
    reset_app_config()


@pytest.fixture
def client():
    """Create test client with startup/shutdown events running."""
    with TestClient(app) as test_client:
        yield test_client
