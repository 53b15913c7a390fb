"""
Local Storage Implementations

JsonFileStorage is the persistent backend: the whole key space lives in one
JSON object in a local file, the way a browser keeps local storage for an
origin. InMemoryStorage has the same behaviour without touching disk.

TRADEOFFS:
- Every write rewrites the whole file (fine for a personal expense list)
- No cross-process locking; the last writer wins
"""

import json
import os
import shutil
import tempfile
from pathlib import Path
from typing import Optional, Union

import structlog

from expense_tracker.services.storage.interface import (
    KeyValueStorageInterface,
    StorageCorruptedError,
    StorageError,
)


logger = structlog.get_logger(__name__)


class InMemoryStorage(KeyValueStorageInterface):
    """Dict-backed storage. Nothing survives the process."""

    def __init__(self, initial: Optional[dict[str, str]] = None):
        self._items: dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def clear(self) -> None:
        self._items.clear()

    def snapshot(self) -> dict[str, str]:
        """Copy of everything stored."""
        return dict(self._items)


class JsonFileStorage(KeyValueStorageInterface):
    """
    Key-value storage in a single JSON file.

    The file holds one JSON object mapping keys to string values.
    A missing file is an empty key space. Writes are atomic: the new
    content goes to a temp file in the same directory which then
    replaces the target.
    """

    def __init__(self, path: Union[str, Path]):
        self._path = Path(path)

    def _read_all(self) -> dict[str, str]:
        """Read the whole key space from disk."""
        if not self._path.exists():
            return {}

        try:
            raw = self._path.read_text(encoding="utf-8")
        except OSError as e:
            raise StorageError(f"Failed to read {self._path}: {e}")

        if not raw.strip():
            return {}

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise StorageCorruptedError(f"{self._path} is not valid JSON: {e}")

        if not isinstance(data, dict) or not all(
            isinstance(k, str) and isinstance(v, str) for k, v in data.items()
        ):
            raise StorageCorruptedError(
                f"{self._path} must contain a JSON object of string values"
            )
        return data

    def _write_all(self, data: dict[str, str]) -> None:
        """Atomically replace the file with the given key space."""
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(
            prefix=".tmp_storage_", dir=self._path.parent, text=True
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False, indent=2)
                f.flush()
                os.fsync(f.fileno())
            shutil.move(tmp_path, self._path)
        except OSError as e:
            logger.error("storage_write_failed", path=str(self._path), error=str(e))
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise StorageError(f"Failed to write {self._path}: {e}")

    def get_item(self, key: str) -> Optional[str]:
        return self._read_all().get(key)

    def set_item(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = value
        self._write_all(data)

    def remove_item(self, key: str) -> None:
        data = self._read_all()
        if key in data:
            del data[key]
            self._write_all(data)

    def clear(self) -> None:
        # Does not read first, so an unreadable file can still be replaced
        self._write_all({})
