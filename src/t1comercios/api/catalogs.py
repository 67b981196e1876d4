"""Catalogs API - official brands, category trees and sales channels."""

from __future__ import annotations

from typing import Any, TYPE_CHECKING

from . import endpoints

if TYPE_CHECKING:
    from .transport import TransportClient


class CatalogsAPI:
    """Read-only catalog lookups.

    Usage:
        brands = await t1.catalogs.list_brands()
        tree = await t1.catalogs.category_tree(7)
        detail = await t1.catalogs.category_detail(7, 1234)
    """

    def __init__(self, transport: "TransportClient"):
        self._transport = transport

    async def list_brands(self) -> Any:
        return await self._transport.get(endpoints.BRANDS_LIST)

    async def category_tree(self, channel_id: str | int) -> Any:
        """Full category hierarchy for a sales channel."""
        return await self._transport.get(endpoints.category_tree(channel_id))

    async def category_detail(self, channel_id: str | int, category_id: str | int) -> Any:
        """Category detail including its attributes."""
        return await self._transport.get(endpoints.category_detail(channel_id, category_id))

    async def category_matches(self, category_id: str | int) -> Any:
        return await self._transport.get(endpoints.category_matches(category_id))

    async def sales_channels(self, commerce_id: str | int) -> Any:
        """Sales channels the commerce is connected to."""
        return await self._transport.get(endpoints.sales_channels(commerce_id))
