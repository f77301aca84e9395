from __future__ import annotations

import os
import re
import typing as t
from pathlib import Path

from .base import StorageBackend, StorageUnavailableError

_KEY_RE = re.compile(r"^[A-Za-z0-9_.-]+$")


class JsonFileStorage(StorageBackend):
    """Directory-backed storage.

    - Each key is stored as `{directory}/{key}.json`
    - Writes go to a temp file first and are moved into place with `os.replace`
    """

    def __init__(self, directory: t.Union[str, Path]) -> None:
        self._dir = Path(directory)

    @property
    def directory(self) -> Path:
        return self._dir

    def _path(self, key: str) -> Path:
        if not _KEY_RE.match(key):
            raise ValueError(f"invalid storage key: {key!r}")
        return self._dir / f"{key}.json"

    def get(self, key: str) -> t.Optional[str]:
        path = self._path(key)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except OSError as exc:
            raise StorageUnavailableError(f"cannot read {path}: {exc}") from exc

    def set(self, key: str, value: str) -> None:
        path = self._path(key)
        tmp = path.with_suffix(path.suffix + ".tmp")
        try:
            self._dir.mkdir(parents=True, exist_ok=True)
            with tmp.open("w", encoding="utf-8") as f:
                f.write(value)
            os.replace(tmp, path)
        except OSError as exc:
            raise StorageUnavailableError(f"cannot write {path}: {exc}") from exc

    def delete(self, key: str) -> None:
        path = self._path(key)
        try:
            path.unlink()
        except FileNotFoundError:
            return
        except OSError as exc:
            raise StorageUnavailableError(f"cannot delete {path}: {exc}") from exc

    def is_healthy(self) -> bool:
        if self._dir.exists():
            return self._dir.is_dir() and os.access(self._dir, os.W_OK)
        return True
