"""In-memory credential storage.

Holds a single ``CredentialSet`` that is replaced as a whole on every write.
Readers always see either the previous set or the new one, never a mix.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any


def now_ms() -> int:
    """Current wall-clock time in epoch milliseconds."""
    return int(datetime.now().timestamp() * 1000)


@dataclass(frozen=True)
class CredentialSet:
    """Access/refresh token pair with a margin-adjusted expiry."""

    access_token: str
    refresh_token: str | None = None
    expires_at: int = 0  # epoch ms, already reduced by the renewal margin
    token_type: str = "Bearer"
    scope: str | None = None

    def __post_init__(self) -> None:
        if self.access_token and self.expires_at <= 0:
            raise ValueError("expires_at must be positive when access_token is set")

    def is_valid(self, at_ms: int | None = None) -> bool:
        """True while the access token exists and ``at_ms < expires_at``."""
        current = now_ms() if at_ms is None else at_ms
        return bool(self.access_token) and current < self.expires_at

    def expires_in_seconds(self, at_ms: int | None = None) -> int:
        current = now_ms() if at_ms is None else at_ms
        return max(0, (self.expires_at - current) // 1000)

    def expired(self) -> "CredentialSet":
        """Copy without a usable access token that keeps the refresh token."""
        return replace(self, access_token="", expires_at=0)


class CredentialStore:
    """Single-slot holder for the current credentials.

    Usage:
        store = CredentialStore()
        store.write(CredentialSet("abc", "rt", expires_at=now_ms() + 60_000))
        creds = store.read()
        if creds and creds.is_valid():
            token = creds.access_token
    """

    def __init__(self, initial: CredentialSet | None = None):
        self._current = initial

    def read(self) -> CredentialSet | None:
        return self._current

    def write(self, credentials: CredentialSet) -> None:
        self._current = credentials

    def clear(self) -> None:
        self._current = None

    def get_status(self, at_ms: int | None = None) -> dict[str, Any]:
        """Summary of the stored credentials (never includes token values)."""
        creds = self._current
        if creds is None:
            return {"present": False, "valid": False, "expires_in_seconds": 0, "has_refresh_token": False}
        return {
            "present": bool(creds.access_token),
            "valid": creds.is_valid(at_ms),
            "expires_in_seconds": creds.expires_in_seconds(at_ms),
            "has_refresh_token": bool(creds.refresh_token),
            "token_type": creds.token_type,
            "scope": creds.scope,
        }
