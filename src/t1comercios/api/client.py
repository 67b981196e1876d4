"""T1Comercios API client - wires settings, credentials and resource APIs.

Every piece is an explicit instance: two clients built from different
settings never share tokens or HTTP connections.
"""

from __future__ import annotations

from typing import Any

import httpx

from ..auth.broker import TokenBroker
from ..auth.gateway import AuthGateway
from ..auth.store import CredentialStore
from ..config import T1Settings, load_settings
from .catalogs import CatalogsAPI
from .files import FilesAPI
from .orders import OrdersAPI
from .products import ProductsAPI
from .transport import TransportClient


class T1Client:
    """T1Comercios API client with domain-specific sub-APIs.

    Usage:
        async with T1Client.from_settings() as t1:
            products = await t1.products.list(t1.settings.commerce_id)
            brands = await t1.catalogs.list_brands()

    Tokens are obtained lazily on the first request and renewed as needed.
    """

    def __init__(self, settings: T1Settings, broker: TokenBroker, transport: TransportClient):
        self.settings = settings
        self.broker = broker
        self.transport = transport

        self.products = ProductsAPI(transport)
        self.orders = OrdersAPI(transport)
        self.files = FilesAPI(transport)
        self.catalogs = CatalogsAPI(transport)

    @classmethod
    def from_settings(
        cls,
        settings: T1Settings | None = None,
        store: CredentialStore | None = None,
        auth_transport: httpx.AsyncBaseTransport | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> "T1Client":
        """Build a client and all its collaborators.

        Args:
            settings: Settings to use (loaded from env/.env/config.json if omitted)
            store: Credential store (a fresh in-memory store if omitted)
            auth_transport: httpx transport for the identity endpoint (tests)
            http_client: Preconfigured httpx client for API calls (tests)
        """
        settings = settings or load_settings()
        gateway = AuthGateway(settings, transport=auth_transport)
        broker = TokenBroker(store or CredentialStore(), gateway)
        transport = TransportClient(settings, broker, http_client=http_client)
        return cls(settings, broker, transport)

    async def __aenter__(self) -> "T1Client":
        return self

    async def __aexit__(self, *args):
        await self.close()

    async def close(self) -> None:
        await self.transport.aclose()

    async def get_token(self) -> str:
        """A currently valid access token (renewed if needed)."""
        return await self.broker.ensure_valid_token()

    def logout(self) -> None:
        self.broker.logout()

    def hello(self, name: str = "world") -> str:
        """Greeting with the active, secret-free configuration."""
        info = self.settings.describe()
        return " | ".join(
            [
                f"t1comercios says: hello, {name}!",
                f"baseUrl={info['base_url']}",
                f"authUrl={info['auth_url']}",
                f"clientId={info['client_id']}",
                f"commerceId={info['commerce_id']}",
                f"timeoutMs={info['timeout_ms']}",
                f"user={info['user']}",
            ]
        )

    async def ping(self) -> dict[str, Any]:
        """Local sanity check; makes no network call."""
        return {
            "ok": True,
            "base_url": self.settings.base_url,
            "commerce_id": self.settings.commerce_id,
            "timeout_ms": self.settings.http_timeout_ms,
        }
