"""T1Comercios API client module.

Usage:
    from t1comercios.api import T1Client

    async with T1Client.from_settings() as t1:
        products = await t1.products.list(commerce_id)
        orders = await t1.orders.list(seller_id, page=1, size=20)
        brands = await t1.catalogs.list_brands()
"""

from .transport import TransportClient
from .client import T1Client
from .products import ProductsAPI
from .orders import OrdersAPI
from .files import FilesAPI
from .catalogs import CatalogsAPI

__all__ = [
    "TransportClient",
    "T1Client",
    "ProductsAPI",
    "OrdersAPI",
    "FilesAPI",
    "CatalogsAPI",
]
