"""Test configuration for the Ethiopian Date Service.

Sets a deterministic environment before the application is imported and
provides the shared HTTP client fixture.
"""

import os

import pytest
from fastapi.testclient import TestClient

# Set testing environment BEFORE the application is imported
os.environ["ENVIRONMENT"] = "test"
os.environ.setdefault("LOG_LEVEL", "WARNING")


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "api: mark test as exercising the HTTP layer"
    )


@pytest.fixture(scope="session")
def client():
    """Create test client for the application."""
    from app import app

    with TestClient(app) as test_client:
        yield test_client
