"""Products API - catalog items of a commerce."""

from __future__ import annotations

from typing import Any, TYPE_CHECKING

from . import endpoints

if TYPE_CHECKING:
    from .transport import TransportClient

MERGE_PATCH_CONTENT_TYPE = "application/merge-patch+json"


class ProductsAPI:
    """Products API for T1Comercios.

    Usage:
        async with T1Client.from_settings() as t1:
            page = await t1.products.list(commerce_id, page=1, size=50)
            product = await t1.products.get(commerce_id, "999")
            await t1.products.update(commerce_id, "999", {"price": 25.5})
            await t1.products.pause(commerce_id, ["999"], ["LIVERPOOL"])
    """

    def __init__(self, transport: "TransportClient"):
        self._transport = transport

    async def create(self, commerce_id: str | int, product: dict[str, Any]) -> Any:
        """Create a product from a full product document."""
        return await self._transport.post(endpoints.product_collection(commerce_id), json=product)

    async def list(self, commerce_id: str | int, **query: Any) -> Any:
        """List products, with optional filters/pagination (page, size, status, search...)."""
        return await self._transport.get(
            endpoints.product_collection(commerce_id),
            params=query or None,
        )

    async def get(self, commerce_id: str | int, product_id: str | int) -> Any:
        return await self._transport.get(endpoints.product_item(commerce_id, product_id))

    async def update(
        self,
        commerce_id: str | int,
        product_id: str | int,
        patch: dict[str, Any],
    ) -> Any:
        """Partially update a product (RFC 7386 JSON merge patch).

        Only send the fields that change; ``null`` removes a field.
        """
        return await self._transport.patch(
            endpoints.product_item(commerce_id, product_id),
            json=patch,
            headers={"Content-Type": MERGE_PATCH_CONTENT_TYPE},
        )

    async def delete(self, commerce_id: str | int, product_id: str | int) -> Any:
        return await self._transport.delete(endpoints.product_item(commerce_id, product_id))

    async def pause(
        self,
        commerce_id: str | int,
        ids: list[str | int],
        sales_channels: list[str | int],
    ) -> Any:
        """Pause publication of several products on the given sales channels."""
        return await self._transport.post(
            endpoints.product_pause(commerce_id),
            json={"ids": ids, "salesChannels": sales_channels},
        )

    async def activate(
        self,
        commerce_id: str | int,
        ids: list[str | int],
        sales_channels: list[str | int],
    ) -> Any:
        """Publish several products on the given sales channels."""
        return await self._transport.post(
            endpoints.product_activate(commerce_id),
            json={"ids": ids, "salesChannels": sales_channels},
        )

    async def list_skus(self, commerce_id: str | int, product_id: str | int) -> Any:
        """Variations (SKUs) of a parent product."""
        return await self._transport.get(endpoints.product_skus(commerce_id, product_id))
