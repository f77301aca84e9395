from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Dict, Optional

ORDER_CACHE_KEY = "nekoshop_cached_orders"
PURCHASE_CACHE_KEY = "nekoshop_purchase_records"


@dataclass
class StoreConfig:
    storage_key: str
    ttl_days: float
    max_entries: int

    def __post_init__(self) -> None:
        if not self.storage_key:
            raise ValueError("storage_key must not be empty")
        if self.ttl_days <= 0:
            raise ValueError("ttl_days must be positive")
        if self.max_entries < 1:
            raise ValueError("max_entries must be at least 1")


def _order_defaults() -> StoreConfig:
    return StoreConfig(storage_key=ORDER_CACHE_KEY, ttl_days=7, max_entries=10)


def _purchase_defaults() -> StoreConfig:
    return StoreConfig(storage_key=PURCHASE_CACHE_KEY, ttl_days=30, max_entries=20)


@dataclass
class StorageConfig:
    type: str = "memory"  # memory | file | redis
    path: Optional[str] = None
    connection_string: Optional[str] = None
    prefix: str = "nekoshop"


@dataclass
class CacheConfig:
    storage: StorageConfig = dataclasses.field(default_factory=StorageConfig)
    orders: StoreConfig = dataclasses.field(default_factory=_order_defaults)
    purchases: StoreConfig = dataclasses.field(default_factory=_purchase_defaults)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CacheConfig":
        def build_store(key: str, defaults: StoreConfig) -> StoreConfig:
            values = {**dataclasses.asdict(defaults), **data.get(key, {})}
            return StoreConfig(**values)

        return cls(
            storage=StorageConfig(**data.get("storage", {})),
            orders=build_store("orders", _order_defaults()),
            purchases=build_store("purchases", _purchase_defaults()),
        )
