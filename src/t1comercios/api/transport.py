"""Authenticated HTTP transport for the T1Comercios API.

Every request gets a fresh bearer token from the broker. A 401 answer
invalidates that token, forces one renewal and resends the request once;
a second 401 (or a failed renewal) ends the call with ``ApiError(401)``.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from ..auth.broker import TokenBroker
from ..config import T1Settings
from ..errors import ApiError, AuthError

log = logging.getLogger(__name__)


class TransportClient:
    """HTTP client that attaches credentials and retries once on 401.

    Usage:
        async with TransportClient(settings, broker) as transport:
            products = await transport.get("/cm/v2/product/commerce/1/product")
            await transport.post("/kidal/v1/order/pedido/cancel", json=body)
    """

    def __init__(
        self,
        settings: T1Settings,
        broker: TokenBroker,
        http_client: httpx.AsyncClient | None = None,
    ):
        self.settings = settings
        self.broker = broker
        self._client = http_client or httpx.AsyncClient(
            base_url=settings.base_url,
            timeout=settings.timeout_seconds,
            headers={
                "Accept": "application/json",
                "User-Agent": settings.user_agent,
            },
        )

    async def __aenter__(self) -> "TransportClient":
        return self

    async def __aexit__(self, *args):
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: Any = None,
        data: dict[str, Any] | None = None,
        files: dict[str, Any] | None = None,
        content: bytes | str | None = None,
        headers: dict[str, str] | None = None,
        raw: bool = False,
    ) -> Any:
        """Send an authenticated request and return the unwrapped body.

        Args:
            method: HTTP method
            path: Path relative to the base URL
            params: Query parameters
            json: JSON body
            data: Form fields (also sent alongside ``files``)
            files: Multipart files; values must be re-readable (bytes) for the retry
            content: Raw body
            headers: Extra headers (``Authorization`` is always overwritten)
            raw: Return the response bytes instead of decoding them

        Returns:
            Decoded JSON, text, bytes (``raw=True``) or ``{}`` for empty bodies

        Raises:
            ApiError: On any non-2xx outcome, transport failure, or failed renewal
        """
        method = method.upper()
        send_kwargs = {
            "params": params,
            "json": json,
            "data": data,
            "files": files,
            "content": content,
            "headers": headers,
        }

        try:
            token = await self.broker.ensure_valid_token()
        except AuthError as e:
            raise ApiError(f"Unauthorized: {e.message}", 401) from e

        response = await self._send(method, path, token, **send_kwargs)

        if response.status_code == 401:
            log.info("%s %s answered 401; renewing token and retrying once", method, path)
            self.broker.invalidate(token)
            try:
                token = await self.broker.ensure_valid_token()
            except AuthError as e:
                raise ApiError("Unauthorized (token could not be renewed)", 401) from e

            response = await self._send(method, path, token, **send_kwargs)
            if response.status_code == 401:
                raise ApiError(
                    "Unauthorized (retry failed)",
                    401,
                    response=_decode_body(response),
                )

        if not response.is_success:
            raise _normalize_error(response)

        if raw:
            return response.content
        return _decode_body(response)

    async def get(self, path: str, **kwargs) -> Any:
        return await self.request("GET", path, **kwargs)

    async def post(self, path: str, **kwargs) -> Any:
        return await self.request("POST", path, **kwargs)

    async def put(self, path: str, **kwargs) -> Any:
        return await self.request("PUT", path, **kwargs)

    async def patch(self, path: str, **kwargs) -> Any:
        return await self.request("PATCH", path, **kwargs)

    async def delete(self, path: str, **kwargs) -> Any:
        return await self.request("DELETE", path, **kwargs)

    async def _send(
        self,
        method: str,
        path: str,
        token: str,
        *,
        headers: dict[str, str] | None,
        **kwargs,
    ) -> httpx.Response:
        request_headers = dict(headers or {})
        request_headers["Authorization"] = f"Bearer {token}"
        log.debug("Sending %s %s", method, path)
        try:
            return await self._client.request(
                method,
                path,
                headers=request_headers,
                **kwargs,
            )
        except httpx.TimeoutException as e:
            raise ApiError(f"Request timed out: {method} {path}") from e
        except httpx.HTTPError as e:
            raise ApiError(str(e) or "Unknown transport error") from e


def _decode_body(response: httpx.Response) -> Any:
    if not response.content:
        return {}
    content_type = response.headers.get("content-type", "")
    if "json" in content_type:
        try:
            return response.json()
        except ValueError:
            return response.text
    return response.text


def _normalize_error(response: httpx.Response) -> ApiError:
    body = _decode_body(response)
    message = None
    if isinstance(body, dict):
        message = body.get("message") or body.get("error_description") or body.get("error")
    if not isinstance(message, str) or not message:
        message = response.reason_phrase or f"HTTP {response.status_code}"
    return ApiError(message, response.status_code, response=body)
