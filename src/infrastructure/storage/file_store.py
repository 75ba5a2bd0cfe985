"""
File-backed key-value store.

Each key is stored as ``<data_dir>/<key>.json``. Writes go to a temp file in
the same directory and are moved into place with ``os.replace`` so readers
never observe a half-written payload.
"""

import asyncio
import os
import re
import tempfile
from pathlib import Path

from src.config import get_logger
from src.core.exceptions import StorageBackendError
from src.core.interfaces.key_value_store import IKeyValueStore

logger = get_logger(__name__)

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9_.-]")


class FileKeyValueStore(IKeyValueStore):
    """Key-value store keeping one UTF-8 file per key."""

    name = "file"

    def __init__(self, data_dir: Path):
        self.data_dir = Path(data_dir)

    def path_for(self, key: str) -> Path:
        """File path holding the given key."""
        return self.data_dir / f"{_UNSAFE_CHARS.sub('_', key)}.json"

    async def get(self, key: str) -> str | None:
        loop = asyncio.get_running_loop()
        try:
            return await loop.run_in_executor(None, self._read_sync, key)
        except OSError as e:
            raise StorageBackendError(self.name, "read", key, str(e)) from e

    async def set(self, key: str, value: str) -> None:
        loop = asyncio.get_running_loop()
        try:
            await loop.run_in_executor(None, self._write_sync, key, value)
        except OSError as e:
            raise StorageBackendError(self.name, "write", key, str(e)) from e

    def _read_sync(self, key: str) -> str | None:
        path = self.path_for(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def _write_sync(self, key: str, value: str) -> None:
        self.data_dir.mkdir(parents=True, exist_ok=True)
        path = self.path_for(key)
        fd, tmp = tempfile.mkstemp(prefix=".tmp-", dir=self.data_dir)
        os.close(fd)
        try:
            Path(tmp).write_text(value, encoding="utf-8", newline="")
            os.replace(tmp, path)
        finally:
            if os.path.exists(tmp):
                os.remove(tmp)
        logger.debug("file_store_written", key=key, path=str(path), size=len(value))
