from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple


@dataclass
class Counter:
    name: str
    help: str
    values: Dict[Tuple, float] = field(default_factory=dict)

    def inc(self, value: float = 1.0, **labels: Any) -> None:
        key = tuple(sorted(labels.items()))
        self.values[key] = self.values.get(key, 0.0) + value

    def get(self, **labels: Any) -> float:
        return self.values.get(tuple(sorted(labels.items())), 0.0)

    def reset(self) -> None:
        self.values.clear()


# Predefined metrics
cache_operations_total = Counter("cache_operations_total", "Store operations by store and op")
cache_expired_total = Counter("cache_expired_total", "Entries purged on read after their TTL")
cache_evicted_total = Counter("cache_evicted_total", "Entries dropped by the capacity cap")
cache_corrupt_reads_total = Counter("cache_corrupt_reads_total", "Reads that found an unparseable blob")
cache_storage_errors_total = Counter("cache_storage_errors_total", "Backend failures absorbed by a store")

ALL_COUNTERS = (
    cache_operations_total,
    cache_expired_total,
    cache_evicted_total,
    cache_corrupt_reads_total,
    cache_storage_errors_total,
)


def reset_all() -> None:
    for counter in ALL_COUNTERS:
        counter.reset()
