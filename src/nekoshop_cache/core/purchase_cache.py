from __future__ import annotations

import dataclasses
import typing as t

from ..storage.base import StorageBackend
from ..utils.config import PURCHASE_CACHE_KEY, StoreConfig
from .models import PurchaseInfo, PurchaseRecord, PurchaseStats
from .store import Clock, RecordSchema, RecordStore

PURCHASE_SCHEMA: RecordSchema[PurchaseRecord] = RecordSchema(
    key=lambda record: record.order_id,
    timestamp=lambda record: record.purchase_time,
    to_dict=PurchaseRecord.to_dict,
    from_dict=PurchaseRecord.from_dict,
)


class PurchaseRecordCache:
    """Receipts for purchases made on this device ("my purchases")."""

    def __init__(
        self,
        storage: StorageBackend,
        config: t.Optional[StoreConfig] = None,
        clock: t.Optional[Clock] = None,
    ) -> None:
        config = config or StoreConfig(storage_key=PURCHASE_CACHE_KEY, ttl_days=30, max_entries=20)
        self._store: RecordStore[PurchaseRecord] = RecordStore(storage, config, PURCHASE_SCHEMA, clock=clock)

    @property
    def store(self) -> RecordStore[PurchaseRecord]:
        return self._store

    def add(self, purchase: PurchaseInfo) -> None:
        """Save a purchase; the purchase time is always the current time."""
        self._store.upsert(purchase.stamp(self._store.now()))

    def list(self) -> t.List[PurchaseRecord]:
        return self._store.list()

    def latest(self) -> t.Optional[PurchaseRecord]:
        records = self._store.list()
        return records[0] if records else None

    def get_by_order_id(self, order_id: str) -> t.Optional[PurchaseRecord]:
        """Return the record with its query password decoded, or None."""
        record = self._store.get(order_id)
        if record is None:
            return None
        password = self._store.get_secret(order_id)
        if password is None:
            return None
        return dataclasses.replace(record, query_password=password)

    def get_password(self, order_id: str) -> t.Optional[str]:
        return self._store.get_secret(order_id)

    def remove(self, order_id: str) -> None:
        self._store.remove(order_id)

    def clear(self) -> None:
        self._store.clear()

    def stats(self) -> PurchaseStats:
        records = self._store.list()
        if not records:
            return PurchaseStats(count=0)
        return PurchaseStats(
            count=len(records),
            total_amount=sum(r.total_amount for r in records),
            oldest=records[-1].purchase_time,
            newest=records[0].purchase_time,
        )
