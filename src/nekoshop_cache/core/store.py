"""Bounded, TTL-based record store persisted as a single JSON blob.

One storage key holds the whole collection as a JSON array. Every operation
is a read-modify-write of that array:

- reads drop expired entries and write the survivors back,
- upserts dedupe by key, put the new entry first and keep the first
  `max_entries`,
- storage faults and corrupt blobs are logged and absorbed; reads degrade to
  an empty list and writes are dropped.
"""

from __future__ import annotations

import dataclasses
import json
import logging
import typing as t
from dataclasses import dataclass
from datetime import datetime

from ..monitoring.metrics import (
    cache_corrupt_reads_total,
    cache_evicted_total,
    cache_expired_total,
    cache_operations_total,
    cache_storage_errors_total,
)
from ..storage.base import StorageBackend
from ..utils.config import StoreConfig
from .codec import decode_secret, encode_secret
from .expiry import is_expired, utc_now
from .models import JSON, StoreStats

_logger = logging.getLogger(__name__)

R = t.TypeVar("R")

Clock = t.Callable[[], datetime]


@dataclass(frozen=True)
class RecordSchema(t.Generic[R]):
    """How a store sees one record type: identity, age, secret and JSON shape."""

    key: t.Callable[[R], str]
    timestamp: t.Callable[[R], datetime]
    to_dict: t.Callable[[R], JSON]
    from_dict: t.Callable[[JSON], R]
    secret_field: str = "query_password"


class RecordStore(t.Generic[R]):
    def __init__(
        self,
        storage: StorageBackend,
        config: StoreConfig,
        schema: RecordSchema[R],
        clock: t.Optional[Clock] = None,
    ) -> None:
        self._storage = storage
        self._config = config
        self._schema = schema
        self._clock = clock or utc_now

    @property
    def storage_key(self) -> str:
        return self._config.storage_key

    @property
    def config(self) -> StoreConfig:
        return self._config

    def now(self) -> datetime:
        return self._clock()

    def _read(self) -> t.List[R]:
        try:
            raw = self._storage.get(self.storage_key)
        except Exception:  # noqa: BLE001 - cache reads never fail the caller
            _logger.error("Reading %s failed; treating as empty", self.storage_key, exc_info=True)
            cache_storage_errors_total.inc(store=self.storage_key, op="read")
            return []
        if raw is None:
            return []
        try:
            data = json.loads(raw)
            if not isinstance(data, list):
                raise ValueError(f"expected a JSON array, got {type(data).__name__}")
            return [self._schema.from_dict(item) for item in data]
        except (ValueError, KeyError, TypeError, AttributeError, OverflowError, RecursionError) as exc:
            _logger.warning("Ignoring corrupt data under %s: %s", self.storage_key, exc)
            cache_corrupt_reads_total.inc(store=self.storage_key)
            return []

    def _write(self, records: t.Sequence[R]) -> bool:
        try:
            payload = json.dumps([self._schema.to_dict(r) for r in records], ensure_ascii=False)
            self._storage.set(self.storage_key, payload)
        except Exception:  # noqa: BLE001 - cache writes are best effort
            _logger.error("Writing %s failed; change dropped", self.storage_key, exc_info=True)
            cache_storage_errors_total.inc(store=self.storage_key, op="write")
            return False
        return True

    def _live(self) -> t.List[R]:
        records = self._read()
        now = self._clock()
        live = [r for r in records if not is_expired(self._schema.timestamp(r), self._config.ttl_days, now)]
        if len(live) != len(records):
            expired = len(records) - len(live)
            _logger.debug("Purging %d expired entries from %s", expired, self.storage_key)
            cache_expired_total.inc(expired, store=self.storage_key)
            self._write(live)
        return sorted(live, key=self._schema.timestamp, reverse=True)

    def list(self) -> t.List[R]:
        """Return live records, most recent first."""
        cache_operations_total.inc(store=self.storage_key, op="list")
        return self._live()

    def upsert(self, record: R) -> None:
        """Store `record` as the most recent entry, replacing any with the same key.

        The secret field is passed in plaintext and stored encoded.
        """
        cache_operations_total.inc(store=self.storage_key, op="upsert")
        secret_field = self._schema.secret_field
        stored = dataclasses.replace(record, **{secret_field: encode_secret(getattr(record, secret_field))})
        key = self._schema.key(stored)
        updated = [stored] + [r for r in self._live() if self._schema.key(r) != key]
        limit = self._config.max_entries
        if len(updated) > limit:
            evicted = len(updated) - limit
            _logger.debug("Evicting %d oldest entries from %s", evicted, self.storage_key)
            cache_evicted_total.inc(evicted, store=self.storage_key)
            updated = updated[:limit]
        self._write(updated)

    def remove(self, key: str) -> None:
        cache_operations_total.inc(store=self.storage_key, op="remove")
        records = self._live()
        remaining = [r for r in records if self._schema.key(r) != key]
        if len(remaining) == len(records):
            return
        self._write(remaining)

    def clear(self) -> None:
        cache_operations_total.inc(store=self.storage_key, op="clear")
        try:
            self._storage.delete(self.storage_key)
        except Exception:  # noqa: BLE001 - cache writes are best effort
            _logger.error("Clearing %s failed", self.storage_key, exc_info=True)
            cache_storage_errors_total.inc(store=self.storage_key, op="clear")

    def get(self, key: str) -> t.Optional[R]:
        """Return the stored form of the record (secret still encoded)."""
        for record in self.list():
            if self._schema.key(record) == key:
                return record
        return None

    def get_secret(self, key: str) -> t.Optional[str]:
        record = self.get(key)
        if record is None:
            return None
        try:
            return decode_secret(getattr(record, self._schema.secret_field))
        except (ValueError, AttributeError):
            _logger.warning("Secret for %s in %s could not be decoded", key, self.storage_key)
            return None

    def stats(self) -> StoreStats:
        records = self.list()
        if not records:
            return StoreStats(count=0)
        return StoreStats(
            count=len(records),
            oldest=self._schema.timestamp(records[-1]),
            newest=self._schema.timestamp(records[0]),
        )
