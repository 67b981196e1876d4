"""Orders API - order queries, documents, shipments and cancellations."""

from __future__ import annotations

from typing import Any, TYPE_CHECKING

from . import endpoints

if TYPE_CHECKING:
    from .transport import TransportClient


class OrdersAPI:
    """Orders API for T1Comercios.

    Usage:
        orders = await t1.orders.list(55, page=1, size=20, marketplace="LIVERPOOL")
        pdf = await t1.orders.download_shipping_label(55, "LIVERPOOL", 999, 12345)
        await t1.orders.upload_guide(55, "LIVERPOOL", 999, {"carrier": "DHL"})
    """

    def __init__(self, transport: "TransportClient"):
        self._transport = transport

    async def list(self, seller_id: str | int, **query: Any) -> Any:
        """List full orders of a seller.

        Args:
            seller_id: Seller ID
            **query: Filters such as fechaInicio, fechaFin, estado, marketplace, page, size

        Returns:
            Order collection as returned by the API
        """
        return await self._transport.get(endpoints.orders_list(seller_id), params=query or None)

    async def statistics(self, seller_id: str | int, **query: Any) -> Any:
        return await self._transport.get(
            endpoints.orders_statistics(seller_id),
            params=query or None,
        )

    async def download_purchase_order(
        self,
        seller_id: str | int,
        marketplace: str,
        order_id: str | int,
        payment_order: str | int,
    ) -> bytes:
        """Purchase order PDF as raw bytes."""
        return await self._transport.get(
            endpoints.purchase_order_download(seller_id, marketplace, order_id, payment_order),
            raw=True,
        )

    async def download_shipping_label(
        self,
        seller_id: str | int,
        marketplace: str,
        order_id: str | int,
        payment_order: str | int,
    ) -> bytes:
        """Shipping label PDF as raw bytes."""
        return await self._transport.get(
            endpoints.shipping_label_download(seller_id, marketplace, order_id, payment_order),
            raw=True,
        )

    async def upload_guide(
        self,
        seller_id: str | int,
        marketplace: str,
        order_id: str | int,
        details: dict[str, Any],
    ) -> Any:
        """Register a manual shipping guide (kind, carrier, trackingNumbers...)."""
        return await self._transport.post(
            endpoints.order_guide_upload(seller_id, marketplace, order_id),
            json=details,
        )

    async def upload_evidence(
        self,
        seller_id: str | int,
        marketplace: str,
        order_id: str | int,
        shipment_id: str | int,
        content: bytes,
        filename: str,
        mimetype: str,
        legacy_path: bool = False,
    ) -> Any:
        """Upload delivery evidence (image/PDF) for a manual shipment.

        Args:
            seller_id: Seller ID
            marketplace: Marketplace code
            order_id: Order ID
            shipment_id: Shipment ID
            content: File bytes
            filename: File name sent to the API
            mimetype: MIME type of the file
            legacy_path: Use the old path without the ``/kidal/v1`` prefix
        """
        build_path = (
            endpoints.order_evidence_upload_legacy if legacy_path
            else endpoints.order_evidence_upload
        )
        return await self._transport.post(
            build_path(seller_id, marketplace, order_id, shipment_id),
            files={"evidencia": (filename, content, mimetype)},
        )

    async def cancel_part(self, body: dict[str, Any]) -> Any:
        """Cancel an order line before dispatch.

        The body must carry pedido, relationId, idtienda, reasonId and marketplace.
        """
        return await self._transport.post(endpoints.ORDER_PART_CANCEL, json=body)

    async def get_colocation(
        self,
        seller_id: str | int,
        marketplace: str,
        colocation_id: str | int,
    ) -> Any:
        return await self._transport.get(
            endpoints.order_colocation(seller_id, marketplace, colocation_id)
        )

    async def get_shipment_status(
        self,
        seller_id: str | int,
        marketplace: str,
        order_id: str | int,
        shipment_id: str | int,
    ) -> Any:
        return await self._transport.get(
            endpoints.order_shipment_status(seller_id, marketplace, order_id, shipment_id)
        )
