"""Error types shared by the auth and API layers.

Every error that leaves the package has the same ``{status, message}`` shape,
regardless of whether it came from the identity endpoint or a business call.
"""

from __future__ import annotations

from typing import Any


class T1Error(Exception):
    """Base exception for T1Comercios client errors."""

    def __init__(self, message: str, status: int | None = None):
        self.message = message
        self.status = status
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Normalized error payload."""
        return {"status": self.status, "message": self.message}


class AuthError(T1Error):
    """Login or refresh rejected, malformed token response, or network failure."""

    def __init__(
        self,
        message: str,
        status: int | None = None,
        error_code: str | None = None,
    ):
        super().__init__(message, status)
        self.error_code = error_code


class ApiError(T1Error):
    """Normalized failure of a business call."""

    def __init__(
        self,
        message: str,
        status: int | None = None,
        response: Any = None,
    ):
        super().__init__(message, status)
        self.response = response
