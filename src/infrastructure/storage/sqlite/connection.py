"""
SQLite database holding the inventory key-value table.

The inventory persists two keys, so a single aiosqlite connection is enough.
It is opened on first use; writes are serialized so one transaction never
interleaves with another.
"""

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

import aiosqlite

from src.config import get_logger, get_settings

logger = get_logger(__name__)

SCHEMA = """
CREATE TABLE IF NOT EXISTS kv_store (
    key TEXT PRIMARY KEY,
    value TEXT NOT NULL,
    updated_at TEXT NOT NULL
)
"""


class SQLiteDatabase:
    """Lazily opened connection to the key-value database file."""

    def __init__(self, db_path: Path, busy_timeout: int = 30000):
        self.db_path = db_path
        self.busy_timeout = busy_timeout

        self._conn: aiosqlite.Connection | None = None
        self._open_lock = asyncio.Lock()
        self._write_lock = asyncio.Lock()

    @property
    def is_open(self) -> bool:
        return self._conn is not None

    async def connect(self) -> aiosqlite.Connection:
        """Open the database and create the table on first call."""
        if self._conn is not None:
            return self._conn

        async with self._open_lock:
            if self._conn is None:
                self.db_path.parent.mkdir(parents=True, exist_ok=True)
                conn = await aiosqlite.connect(self.db_path)
                conn.row_factory = aiosqlite.Row
                await conn.execute("PRAGMA journal_mode=WAL")
                await conn.execute(f"PRAGMA busy_timeout={self.busy_timeout}")
                await conn.execute(SCHEMA)
                await conn.commit()
                self._conn = conn
                logger.info("sqlite_database_opened", db_path=str(self.db_path))
        return self._conn

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[aiosqlite.Connection]:
        """Commit on success, roll back on exception."""
        conn = await self.connect()
        async with self._write_lock:
            try:
                yield conn
                await conn.commit()
            except Exception:
                await conn.rollback()
                raise

    async def close(self) -> None:
        async with self._open_lock:
            if self._conn is not None:
                await self._conn.close()
                self._conn = None
                logger.info("sqlite_database_closed", db_path=str(self.db_path))


# Database shared by the configured SQLite backend
_database: SQLiteDatabase | None = None


def get_database() -> SQLiteDatabase:
    """Database at the configured path. Not opened until first use."""
    global _database
    if _database is None:
        settings = get_settings()
        _database = SQLiteDatabase(
            db_path=settings.storage.db_path,
            busy_timeout=settings.storage.busy_timeout,
        )
    return _database


async def close_database() -> None:
    global _database
    if _database is not None:
        await _database.close()
        _database = None
