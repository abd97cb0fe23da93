"""
Local File Storage Implementation

Each key is one file, ``<data_dir>/<key>.json``. Writes go to a temporary
file first and are then renamed over the target, so a crash mid-write
leaves the previous document intact.

File I/O runs in a worker thread so the event loop is never blocked.
"""

import asyncio
import os
from pathlib import Path
from typing import Optional

import structlog

from fintrack.config import get_settings
from fintrack.services.storage.interface import (
    CorruptStateError,
    KeyValueStoreInterface,
    StoreUnavailableError,
)


class LocalFileStore(KeyValueStoreInterface):
    """Key-value store backed by a directory of JSON files."""

    def __init__(self, data_dir: Optional[Path] = None):
        self._data_dir = Path(data_dir or get_settings().storage.data_dir)
        self._logger = structlog.get_logger(__name__)

    @property
    def data_dir(self) -> Path:
        return self._data_dir

    def _path_for(self, key: str) -> Path:
        return self._data_dir / f"{key}.json"

    def _read(self, key: str) -> Optional[str]:
        path = self._path_for(key)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None

    def _write(self, key: str, value: str) -> None:
        self._data_dir.mkdir(parents=True, exist_ok=True)
        path = self._path_for(key)
        tmp_path = path.with_suffix(".json.tmp")
        tmp_path.write_text(value, encoding="utf-8")
        os.replace(tmp_path, path)

    def _remove(self, key: str) -> bool:
        try:
            self._path_for(key).unlink()
            return True
        except FileNotFoundError:
            return False

    async def get(self, key: str) -> Optional[str]:
        """Read ``<key>.json``; None when the file does not exist."""
        try:
            value = await asyncio.to_thread(self._read, key)
        except OSError as e:
            raise StoreUnavailableError(f"Failed to read {key}: {e}") from e
        except UnicodeDecodeError as e:
            raise CorruptStateError(f"Stored value under {key} is not UTF-8 text: {e}") from e
        self._logger.debug("store_read", key=key, found=value is not None)
        return value

    async def set(self, key: str, value: str) -> None:
        """Atomically replace ``<key>.json``."""
        try:
            await asyncio.to_thread(self._write, key, value)
        except OSError as e:
            raise StoreUnavailableError(f"Failed to write {key}: {e}") from e
        self._logger.debug("store_write", key=key, size=len(value))

    async def delete(self, key: str) -> bool:
        try:
            return await asyncio.to_thread(self._remove, key)
        except OSError as e:
            raise StoreUnavailableError(f"Failed to delete {key}: {e}") from e
