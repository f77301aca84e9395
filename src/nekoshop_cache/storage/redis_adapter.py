from __future__ import annotations

import typing as t

import redis

from .base import StorageBackend, StorageUnavailableError


class RedisStorage(StorageBackend):
    """Redis-backed storage.

    Blobs are plain strings at key `{prefix}:{key}`.
    """

    def __init__(
        self,
        url: str = "redis://localhost:6379/0",
        *,
        prefix: str = "nekoshop",
        client: t.Optional[redis.Redis] = None,
    ) -> None:
        self._url = url
        self._prefix = prefix.rstrip(":")
        self._redis = client if client is not None else redis.Redis.from_url(url, decode_responses=True)

    def _key(self, key: str) -> str:
        return f"{self._prefix}:{key}"

    def get(self, key: str) -> t.Optional[str]:
        try:
            value = self._redis.get(self._key(key))
        except redis.RedisError as exc:
            raise StorageUnavailableError(f"redis get failed for {key!r}: {exc}") from exc
        if isinstance(value, (bytes, bytearray)):
            return value.decode("utf-8")
        return value

    def set(self, key: str, value: str) -> None:
        try:
            self._redis.set(self._key(key), value)
        except redis.RedisError as exc:
            raise StorageUnavailableError(f"redis set failed for {key!r}: {exc}") from exc

    def delete(self, key: str) -> None:
        try:
            self._redis.delete(self._key(key))
        except redis.RedisError as exc:
            raise StorageUnavailableError(f"redis delete failed for {key!r}: {exc}") from exc

    def is_healthy(self) -> bool:
        try:
            return bool(self._redis.ping())
        except redis.RedisError:
            return False
