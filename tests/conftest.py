"""Test configuration and common utilities.

Copyright (c) 2025 Fractal Global. All rights reserved.
"""

from __future__ import annotations

import base64
import json
from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING, Any

import pytest
import respx
from fractal_api import AccessToken, FractalClient, Scope

if TYPE_CHECKING:
    from collections.abc import Callable, Generator


@pytest.fixture
def base_url() -> str:
    """Return base URL for test server.

    Returns:
        str: The base URL for testing.

    """
    return "https://api.fractal.test"


@pytest.fixture
def api_url(base_url: str) -> str:
    """Return the versioned URL endpoints are resolved against."""
    return f"{base_url}/v1/"


@pytest.fixture
def client(base_url: str) -> Generator[FractalClient, None, None]:
    """Create test client.

    Yields:
        FractalClient: Configured test client.

    """
    with FractalClient(base_url, timeout=5.0) as client:
        yield client


@pytest.fixture
def mock_api(api_url: str) -> Generator[respx.MockRouter, None, None]:
    """Mock HTTP responses below the versioned API URL.

    Yields:
        The mock router for HTTP requests.

    """
    with respx.mock(base_url=api_url, assert_all_called=False) as router:
        yield router


def _make_token(*scopes: Scope, expires_in: timedelta = timedelta(hours=1)) -> AccessToken:
    return AccessToken.from_data(
        "test-app",
        list(scopes),
        "test-access-token",
        datetime.now(timezone.utc) + expires_in,
    )


@pytest.fixture
def make_token() -> Callable[..., AccessToken]:
    """Return a factory building in-memory access tokens with given scopes."""
    return _make_token


@pytest.fixture
def admin_token() -> AccessToken:
    return _make_token(Scope.admin())


@pytest.fixture
def public_token() -> AccessToken:
    return _make_token(Scope.public())


@pytest.fixture
def user_token() -> AccessToken:
    """Token of user 7."""
    return _make_token(Scope.user(7))


@pytest.fixture
def expired_token() -> AccessToken:
    return _make_token(Scope.admin(), Scope.public(), expires_in=timedelta(seconds=-1))


@pytest.fixture
def valid_secret() -> str:
    """Base64 secret decoding to exactly 20 bytes."""
    return base64.b64encode(bytes(range(20))).decode("ascii")


def _token_response(scopes: list[Any], expiration: int = 3600) -> dict[str, Any]:
    return {
        "app_id": "test-app",
        "access_token": "issued-token",
        "token_type": "Bearer",
        "scopes": json.dumps(scopes),
        "expiration": expiration,
    }


@pytest.fixture
def sample_user_data() -> dict[str, Any]:
    """Sample user data for testing.

    Returns:
        dict[str, Any]: Sample user data.

    """
    return {
        "id": 7,
        "username": "alice",
        "email": "alice@example.com",
        "email_confirmed": True,
        "first": "Alice",
        "first_confirmed": False,
        "last": None,
        "last_confirmed": False,
        "device_count": 1,
        "wallet_addresses": ["fr1alicewallet"],
        "checking_balance": 1500,
        "cold_balance": 0,
        "bonds": {"2024-01-01T00:00:00Z": 10},
        "birthday": "1990-05-17",
        "birthday_confirmed": True,
        "phone": None,
        "phone_confirmed": False,
        "image": None,
        "address": {
            "address1": "1 Main St",
            "address2": None,
            "city": "Springfield",
            "state": "OR",
            "zip": "97477",
            "country": "US",
        },
        "address_confirmed": False,
        "sybil_score": 0,
        "trust_score": 5,
        "enabled": True,
        "registered": "2024-01-01T00:00:00Z",
        "last_activty": "2024-02-01T12:00:00Z",
        "banned": None,
    }


@pytest.fixture
def sample_profile_data() -> dict[str, Any]:
    return {
        "id": 9,
        "username": "bob",
        "first": "Bob",
        "last": "Stone",
        "image": None,
        "age": 31,
        "trust_score": 3,
    }


@pytest.fixture
def sample_transaction_data() -> dict[str, Any]:
    """Sample transaction data for testing.

    Returns:
        dict[str, Any]: Sample transaction data.

    """
    return {
        "id": 42,
        "origin_user": 7,
        "destination_user": 9,
        "destination": "fr1bobwallet",
        "amount": 250,
        "timestamp": "2024-03-01T10:30:00Z",
    }


@pytest.fixture
def token_response() -> Callable[..., dict[str, Any]]:
    """Return a factory for the body of a ``token`` or ``login`` response."""
    return _token_response
