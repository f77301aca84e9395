from .metrics import (
    ALL_COUNTERS,
    Counter,
    cache_corrupt_reads_total,
    cache_evicted_total,
    cache_expired_total,
    cache_operations_total,
    cache_storage_errors_total,
    reset_all,
)

__all__ = [
    "Counter",
    "ALL_COUNTERS",
    "cache_operations_total",
    "cache_expired_total",
    "cache_evicted_total",
    "cache_corrupt_reads_total",
    "cache_storage_errors_total",
    "reset_all",
]
