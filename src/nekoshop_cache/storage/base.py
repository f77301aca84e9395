from __future__ import annotations

import typing as t
from abc import ABC, abstractmethod


class StorageError(Exception):
    """Base error for storage backend failures."""


class StorageUnavailableError(StorageError):
    """Raised when the backend cannot be reached or is not usable."""


class StorageQuotaExceededError(StorageError):
    """Raised when a write would exceed the backend's size quota."""


class StorageBackend(ABC):
    """Client-local key-value storage holding one string blob per key."""

    @abstractmethod
    def get(self, key: str) -> t.Optional[str]:  # pragma: no cover - interface
        raise NotImplementedError

    @abstractmethod
    def set(self, key: str, value: str) -> None:  # pragma: no cover - interface
        raise NotImplementedError

    @abstractmethod
    def delete(self, key: str) -> None:  # pragma: no cover - interface
        raise NotImplementedError

    @abstractmethod
    def is_healthy(self) -> bool:  # pragma: no cover - interface
        raise NotImplementedError


class InMemoryStorage(StorageBackend):
    """A simple in-memory backend for dev/test.

    `quota_bytes` caps the summed size of all stored values, mimicking the
    quota errors a browser raises from localStorage.
    """

    def __init__(self, quota_bytes: t.Optional[int] = None) -> None:
        self._data: t.Dict[str, str] = {}
        self._quota_bytes = quota_bytes

    def _size_with(self, key: str, value: str) -> int:
        total = len(key.encode("utf-8")) + len(value.encode("utf-8"))
        for k, v in self._data.items():
            if k != key:
                total += len(k.encode("utf-8")) + len(v.encode("utf-8"))
        return total

    def get(self, key: str) -> t.Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        if self._quota_bytes is not None and self._size_with(key, value) > self._quota_bytes:
            raise StorageQuotaExceededError(f"quota of {self._quota_bytes} bytes exceeded writing {key!r}")
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> t.List[str]:
        return list(self._data)

    def is_healthy(self) -> bool:
        return True
