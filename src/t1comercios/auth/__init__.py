"""Credential lifecycle for the T1 identity endpoint.

Usage:
    from t1comercios.auth import AuthGateway, CredentialStore, TokenBroker

    broker = TokenBroker(CredentialStore(), AuthGateway(settings))
    token = await broker.ensure_valid_token()  # refresh or login as needed
"""

from .store import CredentialSet, CredentialStore, now_ms
from .gateway import AuthGateway, compute_expires_at
from .broker import RefreshFailed, RefreshResult, RefreshSucceeded, TokenBroker

__all__ = [
    "CredentialSet",
    "CredentialStore",
    "now_ms",
    "AuthGateway",
    "compute_expires_at",
    "TokenBroker",
    "RefreshResult",
    "RefreshSucceeded",
    "RefreshFailed",
]
