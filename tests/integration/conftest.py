"""Simple conftest for integration tests."""

import os

import pytest
from fractal_api import FractalClient


@pytest.fixture
def integration_client():
    """Create a client for integration tests."""
    base_url = os.environ.get("FRACTAL_TEST_URL")
    if not base_url:
        pytest.skip("FRACTAL_TEST_URL is not set")
    with FractalClient(base_url, timeout=10.0) as client:
        yield client


@pytest.fixture
def client_credentials():
    """Application credentials for the test server."""
    app_id = os.environ.get("FRACTAL_TEST_APP_ID")
    secret = os.environ.get("FRACTAL_TEST_SECRET")
    if not app_id or not secret:
        pytest.skip("FRACTAL_TEST_APP_ID and FRACTAL_TEST_SECRET are not set")
    return app_id, secret
