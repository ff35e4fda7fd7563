"""Fixtures for HTTP API tests."""

import pytest
from fastapi.testclient import TestClient

from iban_engine.presentation.api.app import API_V1_PREFIX, create_app


@pytest.fixture
def api_v1_prefix() -> str:
    return API_V1_PREFIX


@pytest.fixture
def test_client():
    """Client for a fresh app; the context manager runs the lifespan."""
    with TestClient(create_app()) as client:
        yield client
