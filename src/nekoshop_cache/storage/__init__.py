from .base import (
    InMemoryStorage,
    StorageBackend,
    StorageError,
    StorageQuotaExceededError,
    StorageUnavailableError,
)
from .factory import create_storage
from .file_adapter import JsonFileStorage
from .redis_adapter import RedisStorage

__all__ = [
    "StorageBackend",
    "InMemoryStorage",
    "JsonFileStorage",
    "RedisStorage",
    "StorageError",
    "StorageUnavailableError",
    "StorageQuotaExceededError",
    "create_storage",
]
