"""SQLite storage implementations."""

from src.infrastructure.storage.sqlite.connection import (
    SQLiteDatabase,
    close_database,
    get_database,
)
from src.infrastructure.storage.sqlite.kv_store import SQLiteKeyValueStore

__all__ = [
    # Connection
    "SQLiteDatabase",
    "get_database",
    "close_database",
    # Store classes
    "SQLiteKeyValueStore",
]
