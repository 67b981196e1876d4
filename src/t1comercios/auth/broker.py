"""Token broker: hands out valid access tokens and coordinates renewals.

At most one renewal (refresh, falling back to login) runs at a time. Callers
that find the cached token unusable while a renewal is in flight wait for
that renewal instead of starting their own.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Callable, Union

from ..errors import AuthError
from .gateway import AuthGateway
from .store import CredentialSet, CredentialStore, now_ms

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class RefreshSucceeded:
    credentials: CredentialSet


@dataclass(frozen=True)
class RefreshFailed:
    reason: str


RefreshResult = Union[RefreshSucceeded, RefreshFailed]


class TokenBroker:
    """Single-flight access token provider.

    Usage:
        broker = TokenBroker(CredentialStore(), AuthGateway(settings))

        # Cached token if still valid, otherwise one shared renewal
        token = await broker.ensure_valid_token()

        # After the API rejected `token`, force the next call to renew
        broker.invalidate(token)
    """

    def __init__(
        self,
        store: CredentialStore,
        gateway: AuthGateway,
        clock: Callable[[], int] = now_ms,
    ):
        self.store = store
        self.gateway = gateway
        self._clock = clock
        self._lock = asyncio.Lock()
        self._flight: asyncio.Task[CredentialSet] | None = None
        self.refresh_count = 0
        self.login_count = 0

    def is_token_valid(self) -> bool:
        creds = self.store.read()
        return creds is not None and creds.is_valid(self._clock())

    @property
    def renewal_in_progress(self) -> bool:
        return self._flight is not None

    async def ensure_valid_token(self) -> str:
        """Return a usable access token, renewing it if needed.

        Raises:
            AuthError: If both refresh and login fail
        """
        creds = self.store.read()
        if creds is not None and creds.is_valid(self._clock()):
            return creds.access_token

        async with self._lock:
            flight = self._flight
            if flight is None:
                # A flight may have completed while we waited for the lock.
                creds = self.store.read()
                if creds is not None and creds.is_valid(self._clock()):
                    return creds.access_token
                flight = asyncio.ensure_future(self._run_flight())
                self._flight = flight
            else:
                log.debug("Joining renewal already in progress")

        # Waiters may be cancelled; the renewal itself always runs to completion.
        renewed = await asyncio.shield(flight)
        return renewed.access_token

    def invalidate(self, rejected_token: str | None = None) -> bool:
        """Expire the cached access token, keeping the refresh token.

        With ``rejected_token`` the cache is only expired if it still holds that
        token, so a token already renewed by a concurrent request survives.

        Returns:
            True if the cached credentials were expired
        """
        creds = self.store.read()
        if creds is None or not creds.access_token:
            return False
        if rejected_token is not None and creds.access_token != rejected_token:
            return False
        self.store.write(creds.expired())
        log.info("Cached access token invalidated")
        return True

    def logout(self) -> None:
        """Forget all credentials."""
        self.store.clear()
        log.info("Credentials cleared")

    def get_status(self) -> dict[str, Any]:
        status = self.store.get_status(self._clock())
        status.update(
            {
                "renewal_in_progress": self.renewal_in_progress,
                "refresh_count": self.refresh_count,
                "login_count": self.login_count,
            }
        )
        return status

    async def _run_flight(self) -> CredentialSet:
        try:
            creds = await self._renew()
            self.store.write(creds)
            return creds
        finally:
            self._flight = None

    async def _renew(self) -> CredentialSet:
        current = self.store.read()
        refresh_token = current.refresh_token if current else None

        result = await self._try_refresh(refresh_token)
        if isinstance(result, RefreshSucceeded):
            log.info("Access token refreshed")
            return result.credentials

        log.warning("Refresh unavailable (%s); falling back to password login", result.reason)
        self.login_count += 1
        creds = await self.gateway.login()
        log.info("Logged in with password grant")
        return creds

    async def _try_refresh(self, refresh_token: str | None) -> RefreshResult:
        if not refresh_token:
            return RefreshFailed("no refresh token")
        self.refresh_count += 1
        try:
            creds = await self.gateway.refresh(refresh_token)
        except AuthError as e:
            return RefreshFailed(e.message)
        return RefreshSucceeded(creds)
