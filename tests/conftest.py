"""Shared test fixtures for the t1comercios test suite."""

import os
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from t1comercios.auth import AuthGateway, CredentialSet, CredentialStore, TokenBroker
from t1comercios.config import T1Settings

SAMPLE_COMMERCE_ID = "123"
SAMPLE_SELLER_ID = "55"
SAMPLE_PRODUCT_ID = "999"
SAMPLE_CHANNEL_ID = "7"

BASE_URL = "https://api.test"
AUTH_URL = "https://auth.test/realms/demo/protocol/openid-connect/token"

# 2023-11-14T22:13:20Z
START_MS = 1_700_000_000_000


class FakeClock:
    """Controllable epoch-millisecond clock."""

    def __init__(self, now: int = START_MS):
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += int(seconds * 1000)


def token_response(
    access_token: str = "access_1",
    refresh_token: str | None = "refresh_1",
    expires_in: int = 300,
) -> dict[str, Any]:
    data: dict[str, Any] = {
        "access_token": access_token,
        "expires_in": expires_in,
        "token_type": "Bearer",
    }
    if refresh_token:
        data["refresh_token"] = refresh_token
    return data


# ============================================================================
# Fixtures
# ============================================================================

@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep developer T1_* variables out of the tests."""
    for key in list(os.environ):
        if key.startswith("T1_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def settings():
    return T1Settings(
        _env_file=None,
        base_url=BASE_URL,
        auth_url=AUTH_URL,
        client_id="integradores",
        username="integrador@example.com",
        password="s3cret",
        commerce_id=SAMPLE_COMMERCE_ID,
        expiry_skew_seconds=60,
        http_timeout_ms=5000,
    )


@pytest.fixture
def store():
    return CredentialStore()


@pytest.fixture
def mock_gateway(clock):
    """AuthGateway double; refresh/login return fresh 5-minute credentials."""
    gateway = MagicMock(spec=AuthGateway)
    gateway.refresh = AsyncMock(
        return_value=CredentialSet("refreshed_token", "refresh_2", clock.now + 300_000)
    )
    gateway.login = AsyncMock(
        return_value=CredentialSet("login_token", "refresh_login", clock.now + 300_000)
    )
    return gateway


@pytest.fixture
def broker(store, mock_gateway, clock):
    return TokenBroker(store, mock_gateway, clock=clock)


@pytest.fixture
def valid_credentials(clock):
    return CredentialSet("valid_token", "refresh_1", clock.now + 120_000)


@pytest.fixture
def expired_credentials(clock):
    return CredentialSet("old_token", "refresh_1", clock.now - 1)


@pytest.fixture
def api_recorder():
    """Factory for an httpx client whose requests are recorded and answered by ``handler``."""

    def _create(handler):
        requests: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return handler(request)

        client = httpx.AsyncClient(base_url=BASE_URL, transport=httpx.MockTransport(_record))
        return client, requests

    return _create
