"""OAuth 2.0 grant flows against the T1 identity endpoint.

Handles the two grants the client needs:
1. Password grant (initial login with username/password)
2. Refresh grant (renew the access token with a refresh token)

The gateway only maps requests to responses. It never caches or stores
credentials; that is the broker's job.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

import httpx

from ..config import T1Settings
from ..errors import AuthError
from .store import CredentialSet, now_ms

log = logging.getLogger(__name__)


class AuthGateway:
    """Password and refresh grants for the T1 identity endpoint.

    Usage:
        gateway = AuthGateway(settings)
        creds = await gateway.login()
        creds = await gateway.refresh(creds.refresh_token)
    """

    def __init__(
        self,
        settings: T1Settings,
        clock: Callable[[], int] = now_ms,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.settings = settings
        self._clock = clock
        self._transport = transport

    async def login(self) -> CredentialSet:
        """Exchange username/password for a credential set.

        Raises:
            AuthError: If credentials are missing or the endpoint rejects them
        """
        if not self.settings.has_credentials:
            raise AuthError(
                "T1_USERNAME and T1_PASSWORD must be set for password login",
                error_code="not_configured",
            )

        data = await self._post_grant(
            {
                "grant_type": "password",
                "client_id": self.settings.client_id,
                "username": self.settings.username,
                "password": self.settings.password.get_secret_value(),
            },
            failure_message="Authentication failed",
        )
        return self._parse_token_response(data)

    async def refresh(self, refresh_token: str | None) -> CredentialSet:
        """Exchange a refresh token for a new credential set.

        Raises:
            AuthError: If no refresh token is given, the endpoint rejects it,
                or the response has no access token
        """
        if not refresh_token:
            raise AuthError("No refresh token available", error_code="no_refresh_token")

        data = await self._post_grant(
            {
                "grant_type": "refresh_token",
                "client_id": self.settings.client_id,
                "refresh_token": refresh_token,
            },
            failure_message="Token refresh failed",
        )
        return self._parse_token_response(data, previous_refresh_token=refresh_token)

    async def _post_grant(self, form: dict[str, str], failure_message: str) -> dict[str, Any]:
        grant = form["grant_type"]
        try:
            async with httpx.AsyncClient(
                timeout=self.settings.timeout_seconds,
                transport=self._transport,
            ) as client:
                response = await client.post(
                    self.settings.auth_url,
                    data=form,
                    headers={
                        "Content-Type": "application/x-www-form-urlencoded",
                        "Accept": "application/json",
                        "User-Agent": self.settings.user_agent,
                    },
                )
        except httpx.TimeoutException as e:
            raise AuthError(f"{failure_message}: request timed out") from e
        except httpx.HTTPError as e:
            raise AuthError(f"{failure_message}: {e}") from e

        if not response.is_success:
            error_data = _safe_json(response)
            description = error_data.get("error_description") if error_data else None
            log.warning("%s grant rejected with status %s", grant, response.status_code)
            raise AuthError(
                description or f"{failure_message}: {response.status_code}",
                status=response.status_code,
                error_code=error_data.get("error") if error_data else None,
            )

        data = _safe_json(response)
        if data is None:
            raise AuthError(
                f"{failure_message}: invalid JSON response",
                status=response.status_code,
                error_code="invalid_response",
            )
        log.debug("%s grant succeeded", grant)
        return data

    def _parse_token_response(
        self,
        data: dict[str, Any],
        previous_refresh_token: str | None = None,
    ) -> CredentialSet:
        """Map a token response onto a CredentialSet.

        Raises:
            AuthError: If the response has no access token
        """
        access_token = data.get("access_token")
        if not access_token:
            raise AuthError(
                "Invalid token response: missing access_token",
                error_code="invalid_response",
            )

        try:
            expires_in = int(data.get("expires_in") or 0)
        except (TypeError, ValueError):
            expires_in = 0

        return CredentialSet(
            access_token=access_token,
            refresh_token=data.get("refresh_token") or previous_refresh_token,
            expires_at=compute_expires_at(
                self._clock(), expires_in, self.settings.expiry_skew_seconds
            ),
            token_type=data.get("token_type") or "Bearer",
            scope=data.get("scope"),
        )


def compute_expires_at(issued_at_ms: int, expires_in_seconds: int, margin_seconds: int) -> int:
    """``issued_at + max(0, expires_in - margin)`` in epoch milliseconds."""
    return issued_at_ms + max(0, expires_in_seconds * 1000 - margin_seconds * 1000)


def _safe_json(response: httpx.Response) -> dict[str, Any] | None:
    if not response.content:
        return None
    try:
        data = response.json()
    except ValueError:
        return None
    return data if isinstance(data, dict) else None
