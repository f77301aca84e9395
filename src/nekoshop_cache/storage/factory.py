from __future__ import annotations

from ..utils.config import StorageConfig
from .base import InMemoryStorage, StorageBackend
from .file_adapter import JsonFileStorage
from .redis_adapter import RedisStorage


def create_storage(config: StorageConfig) -> StorageBackend:
    kind = config.type.lower()
    if kind == "memory":
        return InMemoryStorage()
    if kind == "file":
        if not config.path:
            raise ValueError("file storage requires a path")
        return JsonFileStorage(config.path)
    if kind == "redis":
        return RedisStorage(config.connection_string or "redis://localhost:6379/0", prefix=config.prefix)
    raise ValueError(f"unknown storage type: {config.type!r}")
