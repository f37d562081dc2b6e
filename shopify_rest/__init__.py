"""
Shopify REST - A minimal Python client for the Shopify REST Admin API.

Builds authenticated URLs, serializes request bodies to JSON and returns raw
response bytes with a list of errors. Typed records are provided for the
order, product, transaction and count responses.
"""

from .client import ShopifyClient
from .config import Settings
from .exceptions import (
    ShopifyAPIError,
    ValidationError,
    SerializationError,
    DecodeError,
    ConnectionError as ShopifyConnectionError,
)
from .models import (
    Order,
    LineItem,
    Product,
    Variant,
    Image,
    Transaction,
    OrdersResponse,
    OrderResponse,
    TransactionsResponse,
    CountResponse,
    ProductsResponse,
    ProductResponse,
    decode,
)

__version__ = "0.1.0"
__description__ = "A minimal Python client for the Shopify REST Admin API"

__all__ = [
    "ShopifyClient",
    "Settings",
    "ShopifyAPIError",
    "ValidationError",
    "SerializationError",
    "DecodeError",
    "ShopifyConnectionError",
    "Order",
    "LineItem",
    "Product",
    "Variant",
    "Image",
    "Transaction",
    "OrdersResponse",
    "OrderResponse",
    "TransactionsResponse",
    "CountResponse",
    "ProductsResponse",
    "ProductResponse",
    "decode",
]
