"""
Response models for the Shopify REST client.

Plain records mirroring the JSON the Admin API returns for orders, products,
transactions and counts. Unknown keys are ignored and missing keys fall back
to defaults, so records stay usable when Shopify adds fields.
"""

import json
from dataclasses import dataclass, field, fields, asdict
from typing import Optional, Dict, Any, List, Type, TypeVar, Union

from .constants import ERROR_MESSAGES
from .exceptions import DecodeError

T = TypeVar("T")


def _known_fields(cls: type, data: Dict[str, Any], skip: tuple = ()) -> Dict[str, Any]:
    """Keep only the keys that map to fields of cls."""
    names = {f.name for f in fields(cls)}
    return {k: v for k, v in (data or {}).items() if k in names and k not in skip}


@dataclass
class LineItem:
    """A single line of an order."""
    id: Optional[int] = None
    variant_id: Optional[int] = None
    product_id: Optional[int] = None
    title: str = ""
    variant_title: Optional[str] = None
    name: str = ""
    sku: Optional[str] = None
    vendor: Optional[str] = None
    quantity: int = 0
    price: Optional[str] = None
    grams: int = 0
    fulfillment_status: Optional[str] = None
    requires_shipping: bool = False
    taxable: bool = False
    gift_card: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LineItem":
        return cls(**_known_fields(cls, data))

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class Order:
    """
    An order as returned by /orders.

    Monetary amounts stay strings, exactly as Shopify sends them.
    """
    id: Optional[int] = None
    name: str = ""
    email: str = ""
    order_number: Optional[int] = None
    token: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    processed_at: Optional[str] = None
    closed_at: Optional[str] = None
    cancelled_at: Optional[str] = None
    cancel_reason: Optional[str] = None
    currency: Optional[str] = None
    total_price: Optional[str] = None
    subtotal_price: Optional[str] = None
    total_tax: Optional[str] = None
    total_discounts: Optional[str] = None
    total_weight: int = 0
    financial_status: Optional[str] = None
    fulfillment_status: Optional[str] = None
    gateway: Optional[str] = None
    test: bool = False
    confirmed: bool = False
    note: Optional[str] = None
    tags: str = ""
    line_items: List[LineItem] = field(default_factory=list)
    customer: Dict[str, Any] = field(default_factory=dict)
    shipping_address: Dict[str, Any] = field(default_factory=dict)
    billing_address: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Order":
        values = _known_fields(cls, data, skip=("line_items", "customer",
                                                "shipping_address", "billing_address"))
        data = data or {}
        return cls(
            line_items=[LineItem.from_dict(item) for item in data.get("line_items") or []],
            # Shopify sends null for guest checkouts and digital orders
            customer=data.get("customer") or {},
            shipping_address=data.get("shipping_address") or {},
            billing_address=data.get("billing_address") or {},
            **values
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class Variant:
    """A product variant."""
    id: Optional[int] = None
    product_id: Optional[int] = None
    title: str = ""
    price: Optional[str] = None
    compare_at_price: Optional[str] = None
    sku: Optional[str] = None
    barcode: Optional[str] = None
    position: int = 0
    option1: Optional[str] = None
    option2: Optional[str] = None
    option3: Optional[str] = None
    inventory_policy: Optional[str] = None
    inventory_management: Optional[str] = None
    inventory_item_id: Optional[int] = None
    inventory_quantity: int = 0
    fulfillment_service: Optional[str] = None
    grams: int = 0
    weight: float = 0.0
    weight_unit: Optional[str] = None
    requires_shipping: bool = True
    taxable: bool = True
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Variant":
        return cls(**_known_fields(cls, data))

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class Image:
    """A product image."""
    id: Optional[int] = None
    product_id: Optional[int] = None
    position: int = 0
    src: str = ""
    alt: Optional[str] = None
    width: int = 0
    height: int = 0
    variant_ids: List[int] = field(default_factory=list)
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Image":
        return cls(**_known_fields(cls, data))

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class Product:
    """
    A product as returned by /products.

    Attributes:
        tags: Comma separated, as Shopify stores them
        options: Raw option definitions (name, position, values)
    """
    id: Optional[int] = None
    title: str = ""
    body_html: Optional[str] = None
    vendor: str = ""
    product_type: str = ""
    handle: str = ""
    status: Optional[str] = None
    tags: str = ""
    template_suffix: Optional[str] = None
    published_scope: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    published_at: Optional[str] = None
    variants: List[Variant] = field(default_factory=list)
    images: List[Image] = field(default_factory=list)
    image: Optional[Image] = None
    options: List[Dict[str, Any]] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Product":
        values = _known_fields(cls, data, skip=("variants", "images", "image", "options"))
        data = data or {}
        image = data.get("image")
        return cls(
            variants=[Variant.from_dict(v) for v in data.get("variants") or []],
            images=[Image.from_dict(i) for i in data.get("images") or []],
            image=Image.from_dict(image) if image else None,
            options=list(data.get("options") or []),
            **values
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class Transaction:
    """A payment transaction on an order (/orders/{id}/transactions)."""
    id: Optional[int] = None
    order_id: Optional[int] = None
    parent_id: Optional[int] = None
    kind: Optional[str] = None
    gateway: Optional[str] = None
    status: Optional[str] = None
    message: Optional[str] = None
    amount: Optional[str] = None
    currency: Optional[str] = None
    authorization: Optional[str] = None
    source_name: Optional[str] = None
    error_code: Optional[str] = None
    test: bool = False
    created_at: Optional[str] = None
    processed_at: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Transaction":
        return cls(**_known_fields(cls, data))

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# ===== RESPONSE WRAPPERS =====

@dataclass
class OrdersResponse:
    """Response to /orders."""
    orders: List[Order] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "OrdersResponse":
        return cls(orders=[Order.from_dict(o) for o in (data or {}).get("orders") or []])

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class OrderResponse:
    """Response to /orders/{id}."""
    order: Order = field(default_factory=Order)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "OrderResponse":
        return cls(order=Order.from_dict((data or {}).get("order") or {}))

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class TransactionsResponse:
    """Response to /orders/{id}/transactions."""
    transactions: List[Transaction] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TransactionsResponse":
        items = (data or {}).get("transactions") or []
        return cls(transactions=[Transaction.from_dict(t) for t in items])

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class CountResponse:
    """Response to any */count endpoint."""
    count: int = 0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CountResponse":
        return cls(count=int((data or {}).get("count") or 0))

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class ProductsResponse:
    """Response to /products."""
    products: List[Product] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ProductsResponse":
        return cls(products=[Product.from_dict(p) for p in (data or {}).get("products") or []])

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class ProductResponse:
    """Response to /products/{id}."""
    product: Product = field(default_factory=Product)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ProductResponse":
        return cls(product=Product.from_dict((data or {}).get("product") or {}))

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def decode(body: Union[bytes, str], response_type: Type[T]) -> T:
    """
    Decode a raw response body into one of the response wrappers.

    Args:
        body (Union[bytes, str]): Body returned by a client call
        response_type (Type[T]): e.g. ProductResponse, CountResponse

    Returns:
        T: Populated response record

    Raises:
        DecodeError: If the body is empty, not JSON, or does not fit response_type

    Examples:
        >>> decode(b'{"count": 3}', CountResponse)
        CountResponse(count=3)
    """
    if not body:
        raise DecodeError("Response body is empty", body=body)

    try:
        data = json.loads(body)
    except ValueError as e:
        raise DecodeError(f"{ERROR_MESSAGES['invalid_json']}: {e}", body=body)

    if not isinstance(data, dict):
        raise DecodeError(f"Expected a JSON object, got {type(data).__name__}", body=body)

    try:
        return response_type.from_dict(data)
    except (TypeError, ValueError, AttributeError) as e:
        raise DecodeError(f"Unexpected {response_type.__name__} shape: {e}", body=body)
