"""Single-page product board backed by a remote /api/products resource."""

from product_board.clients.products_client import ProductsClient
from product_board.core.errors import (
    OperationInFlightError,
    ServerError,
    SyncError,
    TransportError,
    ValidationError,
)
from product_board.schemas.product import Draft, Product
from product_board.services.product_board import ProductBoard

__all__ = [
    "Draft",
    "OperationInFlightError",
    "Product",
    "ProductBoard",
    "ProductsClient",
    "ServerError",
    "SyncError",
    "TransportError",
    "ValidationError",
]
