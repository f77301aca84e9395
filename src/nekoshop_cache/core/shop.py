from __future__ import annotations

import typing as t
from dataclasses import dataclass

from ..storage.base import StorageBackend
from ..storage.factory import create_storage
from ..utils.config import CacheConfig
from .order_cache import OrderCache
from .purchase_cache import PurchaseRecordCache
from .store import Clock


@dataclass
class ShopCaches:
    """Both client-local caches, sharing one storage backend under separate keys."""

    storage: StorageBackend
    orders: OrderCache
    purchases: PurchaseRecordCache

    @classmethod
    def from_config(
        cls,
        config: t.Optional[CacheConfig] = None,
        storage: t.Optional[StorageBackend] = None,
        clock: t.Optional[Clock] = None,
    ) -> "ShopCaches":
        config = config or CacheConfig()
        if config.orders.storage_key == config.purchases.storage_key:
            raise ValueError("order and purchase caches need distinct storage keys")
        backend = storage if storage is not None else create_storage(config.storage)
        return cls(
            storage=backend,
            orders=OrderCache(backend, config.orders, clock=clock),
            purchases=PurchaseRecordCache(backend, config.purchases, clock=clock),
        )

    def clear_all(self) -> None:
        self.orders.clear()
        self.purchases.clear()
