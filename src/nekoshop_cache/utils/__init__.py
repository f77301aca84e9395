"""Utility module for configuration."""

from .config import ORDER_CACHE_KEY, PURCHASE_CACHE_KEY, CacheConfig, StorageConfig, StoreConfig

__all__ = [
    "CacheConfig",
    "StorageConfig",
    "StoreConfig",
    "ORDER_CACHE_KEY",
    "PURCHASE_CACHE_KEY",
]
