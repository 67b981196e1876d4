"""Path templates for the T1Comercios API (relative to ``base_url``)."""

from __future__ import annotations

Id = str | int

# Catalogs
BRANDS_LIST = "/api-resource/api/v1/brands"


def category_tree(channel_id: Id) -> str:
    return f"/cm/v2/sales_channel/{channel_id}/category/"


def category_detail(channel_id: Id, category_id: Id) -> str:
    return f"/cm/v2/sales_channel/{channel_id}/category/{category_id}"


def category_matches(category_id: Id) -> str:
    return f"/cm/v2/sales_channel/category/{category_id}/matches"


def sales_channels(commerce_id: Id) -> str:
    return f"/identity/v1/sales_channel/commerce/{commerce_id}"


# Files
def file_upload(bucket_name: str) -> str:
    return f"/file/v1.1/{bucket_name}"


# Orders
ORDER_PART_CANCEL = "/kidal/v1/order/pedido/cancel"


def orders_list(seller_id: Id) -> str:
    return f"/kidal/v1/Ordersfull/seller/{seller_id}"


def orders_statistics(seller_id: Id) -> str:
    return f"/kidal/v1/Ordersfull/statistics/seller/{seller_id}"


def _order_base(seller_id: Id, marketplace: str) -> str:
    return f"/kidal/v1/order/seller/{seller_id}/marketplace/{marketplace}"


def purchase_order_download(seller_id: Id, marketplace: str, order_id: Id, payment_order: Id) -> str:
    return f"{_order_base(seller_id, marketplace)}/order/{order_id}/payment_order/{payment_order}"


def shipping_label_download(seller_id: Id, marketplace: str, order_id: Id, payment_order: Id) -> str:
    return f"{_order_base(seller_id, marketplace)}/order/{order_id}/shipping_label/{payment_order}"


def order_guide_upload(seller_id: Id, marketplace: str, order_id: Id) -> str:
    return f"{_order_base(seller_id, marketplace)}/order/{order_id}/shipment"


def order_evidence_upload(seller_id: Id, marketplace: str, order_id: Id, shipment_id: Id) -> str:
    return f"{_order_base(seller_id, marketplace)}/order/{order_id}/shipment/{shipment_id}/evidence/"


def order_evidence_upload_legacy(seller_id: Id, marketplace: str, order_id: Id, shipment_id: Id) -> str:
    # Older path without the /kidal/v1 prefix. Kept for servers that still route it.
    return (
        f"/order/seller/{seller_id}/marketplace/{marketplace}"
        f"/order/{order_id}/shipment/{shipment_id}/evidence/"
    )


def order_colocation(seller_id: Id, marketplace: str, colocation_id: Id) -> str:
    return f"{_order_base(seller_id, marketplace)}/colocation/{colocation_id}"


def order_shipment_status(seller_id: Id, marketplace: str, order_id: Id, shipment_id: Id) -> str:
    return f"{_order_base(seller_id, marketplace)}/order/{order_id}/shipment/{shipment_id}/status"


# Products
def product_collection(commerce_id: Id) -> str:
    return f"/cm/v2/product/commerce/{commerce_id}/product"


def product_item(commerce_id: Id, product_id: Id) -> str:
    return f"/cm/v2/product/commerce/{commerce_id}/product/{product_id}"


def product_pause(commerce_id: Id) -> str:
    return f"/cm/v2/product/commerce/{commerce_id}/pause/"


def product_activate(commerce_id: Id) -> str:
    return f"/cm/v2/product/commerce/{commerce_id}/active/"


def product_skus(commerce_id: Id, product_id: Id) -> str:
    return f"/cm/v2/product/commerce/{commerce_id}/product/{product_id}/sku"
