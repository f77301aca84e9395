"""nekoshop_cache

Client-local persistence for the NekoShop storefront: a bounded, TTL-based
record store backing the "recent orders" and "my purchases" panels.

Everything here is convenience state. Storage faults and corrupt data are
logged and absorbed, never raised to the caller.
"""

from .core.codec import decode_secret, encode_secret
from .core.contact import contact_validation_error, is_valid_contact, normalize_contact
from .core.models import (
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
from .core.order_cache import OrderCache
from .core.purchase_cache import PurchaseRecordCache
from .core.shop import ShopCaches
from .core.store import RecordSchema, RecordStore
from .storage import (
    InMemoryStorage,
    JsonFileStorage,
    RedisStorage,
    StorageBackend,
    StorageError,
    StorageQuotaExceededError,
    StorageUnavailableError,
    create_storage,
)
from .utils.config import CacheConfig, StorageConfig, StoreConfig

__all__ = [
    "RecordStore",
    "RecordSchema",
    "OrderCache",
    "PurchaseRecordCache",
    "ShopCaches",
    "StorageBackend",
    "InMemoryStorage",
    "JsonFileStorage",
    "RedisStorage",
    "StorageError",
    "StorageUnavailableError",
    "StorageQuotaExceededError",
    "create_storage",
    "CacheConfig",
    "StorageConfig",
    "StoreConfig",
    "Order",
    "OrderItem",
    "OrderStatus",
    "PaymentStatus",
    "CachedOrder",
    "PurchaseInfo",
    "PurchaseRecord",
    "StoreStats",
    "PurchaseStats",
    "encode_secret",
    "decode_secret",
    "normalize_contact",
    "is_valid_contact",
    "contact_validation_error",
]

__version__ = "0.1.0"
