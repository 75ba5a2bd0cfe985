"""SQLite implementation of key-value storage."""

from datetime import UTC, datetime

import aiosqlite

from src.config import get_logger
from src.core.exceptions import StorageBackendError
from src.core.interfaces.key_value_store import IKeyValueStore
from src.infrastructure.storage.sqlite.connection import SQLiteDatabase, get_database

logger = get_logger(__name__)


class SQLiteKeyValueStore(IKeyValueStore):
    """Stores values in a single ``kv_store`` table, one row per key."""

    name = "sqlite"

    def __init__(self, database: SQLiteDatabase | None = None):
        self._database = database

    @property
    def database(self) -> SQLiteDatabase:
        """Injected database, or the configured one on first use."""
        if self._database is None:
            self._database = get_database()
        return self._database

    async def get(self, key: str) -> str | None:
        try:
            conn = await self.database.connect()
            cursor = await conn.execute(
                "SELECT value FROM kv_store WHERE key = ?", (key,)
            )
            row = await cursor.fetchone()
        except aiosqlite.Error as e:
            raise StorageBackendError(self.name, "read", key, str(e)) from e
        if row is None:
            return None
        return row["value"]

    async def set(self, key: str, value: str) -> None:
        try:
            async with self.database.transaction() as conn:
                await conn.execute(
                    """
                    INSERT INTO kv_store (key, value, updated_at) VALUES (?, ?, ?)
                    ON CONFLICT(key) DO UPDATE SET
                        value = excluded.value,
                        updated_at = excluded.updated_at
                    """,
                    (key, value, datetime.now(UTC).isoformat()),
                )
        except aiosqlite.Error as e:
            raise StorageBackendError(self.name, "write", key, str(e)) from e
        logger.debug("kv_store_written", key=key, size=len(value))
