from __future__ import annotations

import typing as t

from ..storage.base import StorageBackend
from ..utils.config import ORDER_CACHE_KEY, StoreConfig
from .models import CachedOrder, Order, StoreStats
from .store import Clock, RecordSchema, RecordStore

ORDER_SCHEMA: RecordSchema[CachedOrder] = RecordSchema(
    key=lambda entry: entry.order.id,
    timestamp=lambda entry: entry.cached_at,
    to_dict=CachedOrder.to_dict,
    from_dict=CachedOrder.from_dict,
)


class OrderCache:
    """Recently looked-up orders, kept for the "recent orders" panel."""

    def __init__(
        self,
        storage: StorageBackend,
        config: t.Optional[StoreConfig] = None,
        clock: t.Optional[Clock] = None,
    ) -> None:
        config = config or StoreConfig(storage_key=ORDER_CACHE_KEY, ttl_days=7, max_entries=10)
        self._store: RecordStore[CachedOrder] = RecordStore(storage, config, ORDER_SCHEMA, clock=clock)

    @property
    def store(self) -> RecordStore[CachedOrder]:
        return self._store

    def add(self, order: Order, query_password: str) -> None:
        self._store.upsert(CachedOrder(order=order, cached_at=self._store.now(), query_password=query_password))

    def list(self) -> t.List[CachedOrder]:
        return self._store.list()

    def get(self, order_id: str) -> t.Optional[CachedOrder]:
        return self._store.get(order_id)

    def get_password(self, order_id: str) -> t.Optional[str]:
        return self._store.get_secret(order_id)

    def remove(self, order_id: str) -> None:
        self._store.remove(order_id)

    def clear(self) -> None:
        self._store.clear()

    def stats(self) -> StoreStats:
        return self._store.stats()
