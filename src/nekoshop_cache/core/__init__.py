"""Core module: record models, the generic store and its two cache instances."""

from .codec import decode_secret, encode_secret
from .contact import contact_validation_error, is_valid_contact, normalize_contact
from .expiry import format_timestamp, is_expired, parse_timestamp, utc_now
from .models import (
    CachedOrder,
    Order,
    OrderItem,
    OrderStatus,
    PaymentStatus,
    PurchaseInfo,
    PurchaseRecord,
    PurchaseStats,
    StoreStats,
)
from .order_cache import ORDER_SCHEMA, OrderCache
from .purchase_cache import PURCHASE_SCHEMA, PurchaseRecordCache
from .shop import ShopCaches
from .store import RecordSchema, RecordStore

__all__ = [
    # Store
    "RecordStore",
    "RecordSchema",
    "OrderCache",
    "PurchaseRecordCache",
    "ShopCaches",
    "ORDER_SCHEMA",
    "PURCHASE_SCHEMA",
    # Codec / expiry
    "encode_secret",
    "decode_secret",
    "is_expired",
    "utc_now",
    "format_timestamp",
    "parse_timestamp",
    # Contact rules
    "normalize_contact",
    "is_valid_contact",
    "contact_validation_error",
    # Models
    "Order",
    "OrderItem",
    "OrderStatus",
    "PaymentStatus",
    "CachedOrder",
    "PurchaseInfo",
    "PurchaseRecord",
    "StoreStats",
    "PurchaseStats",
]
