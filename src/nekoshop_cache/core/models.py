from __future__ import annotations

import enum
import typing as t
from dataclasses import dataclass, field
from datetime import datetime

from .expiry import format_timestamp, parse_timestamp

JSON = t.Dict[str, t.Any]


def _number(value: t.Any) -> float:
    # bool is an int subclass but never a valid amount
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"expected a number, got {type(value).__name__}")
    return value


class OrderStatus(str, enum.Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class PaymentStatus(str, enum.Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    CANCELLED = "cancelled"
    REFUNDED = "refunded"


@dataclass
class OrderItem:
    product_id: str
    product_name: str
    quantity: int
    price: float
    product_type: t.Optional[str] = None  # NORMAL | CARD_KEY

    def to_dict(self) -> JSON:
        data: JSON = {
            "productId": self.product_id,
            "productName": self.product_name,
            "quantity": self.quantity,
            "price": self.price,
        }
        if self.product_type is not None:
            data["productType"] = self.product_type
        return data

    @classmethod
    def from_dict(cls, data: JSON) -> "OrderItem":
        return cls(
            product_id=data["productId"],
            product_name=data["productName"],
            quantity=int(data["quantity"]),
            price=_number(data["price"]),
            product_type=data.get("productType"),
        )


_ORDER_FIELDS = (
    "id",
    "customerContact",
    "items",
    "totalAmount",
    "status",
    "paymentStatus",
    "hasCardKeys",
    "createdAt",
    "updatedAt",
)


@dataclass
class Order:
    """Snapshot of a backend order as returned at cache-write time.

    Not kept in sync with the backend. Fields the backend sends that are not
    modeled here are kept in `extra` so the snapshot round-trips.
    """

    id: str
    customer_contact: str
    total_amount: float
    status: OrderStatus
    created_at: str
    updated_at: str
    items: t.List[OrderItem] = field(default_factory=list)
    payment_status: t.Optional[PaymentStatus] = None
    has_card_keys: t.Optional[bool] = None
    extra: JSON = field(default_factory=dict)

    def to_dict(self) -> JSON:
        data: JSON = dict(self.extra)
        data.update(
            {
                "id": self.id,
                "customerContact": self.customer_contact,
                "items": [item.to_dict() for item in self.items],
                "totalAmount": self.total_amount,
                "status": self.status.value,
                "createdAt": self.created_at,
                "updatedAt": self.updated_at,
            }
        )
        if self.payment_status is not None:
            data["paymentStatus"] = self.payment_status.value
        if self.has_card_keys is not None:
            data["hasCardKeys"] = self.has_card_keys
        return data

    @classmethod
    def from_dict(cls, data: JSON) -> "Order":
        payment_status = data.get("paymentStatus")
        return cls(
            id=data["id"],
            customer_contact=data["customerContact"],
            total_amount=_number(data["totalAmount"]),
            status=OrderStatus(data["status"]),
            created_at=data["createdAt"],
            updated_at=data["updatedAt"],
            items=[OrderItem.from_dict(item) for item in data.get("items", [])],
            payment_status=PaymentStatus(payment_status) if payment_status is not None else None,
            has_card_keys=data.get("hasCardKeys"),
            extra={k: v for k, v in data.items() if k not in _ORDER_FIELDS},
        )


@dataclass
class CachedOrder:
    order: Order
    cached_at: datetime
    query_password: str

    def to_dict(self) -> JSON:
        return {
            "order": self.order.to_dict(),
            "cachedAt": format_timestamp(self.cached_at),
            "queryPassword": self.query_password,
        }

    @classmethod
    def from_dict(cls, data: JSON) -> "CachedOrder":
        return cls(
            order=Order.from_dict(data["order"]),
            cached_at=parse_timestamp(data["cachedAt"]),
            query_password=data["queryPassword"],
        )


@dataclass
class PurchaseInfo:
    """What the shop knows right after a purchase; the cache adds the time."""

    order_id: str
    customer_contact: str
    query_password: str
    product_name: str
    total_amount: float

    def stamp(self, purchase_time: datetime) -> "PurchaseRecord":
        return PurchaseRecord(
            order_id=self.order_id,
            customer_contact=self.customer_contact,
            query_password=self.query_password,
            product_name=self.product_name,
            total_amount=self.total_amount,
            purchase_time=purchase_time,
        )


@dataclass
class PurchaseRecord:
    order_id: str
    customer_contact: str
    query_password: str
    product_name: str
    total_amount: float
    purchase_time: datetime

    def to_dict(self) -> JSON:
        return {
            "orderId": self.order_id,
            "customerContact": self.customer_contact,
            "queryPassword": self.query_password,
            "productName": self.product_name,
            "totalAmount": self.total_amount,
            "purchaseTime": format_timestamp(self.purchase_time),
        }

    @classmethod
    def from_dict(cls, data: JSON) -> "PurchaseRecord":
        return cls(
            order_id=data["orderId"],
            customer_contact=data["customerContact"],
            query_password=data["queryPassword"],
            product_name=data["productName"],
            total_amount=_number(data["totalAmount"]),
            purchase_time=parse_timestamp(data["purchaseTime"]),
        )


@dataclass(frozen=True)
class StoreStats:
    count: int
    oldest: t.Optional[datetime] = None
    newest: t.Optional[datetime] = None


@dataclass(frozen=True)
class PurchaseStats:
    count: int
    total_amount: float = 0
    oldest: t.Optional[datetime] = None
    newest: t.Optional[datetime] = None
