"""Storage infrastructure implementations."""

from src.infrastructure.storage.factory import get_key_value_store
from src.infrastructure.storage.file_store import FileKeyValueStore
from src.infrastructure.storage.memory_store import InMemoryKeyValueStore
from src.infrastructure.storage.sqlite import (
    SQLiteDatabase,
    SQLiteKeyValueStore,
    close_database,
    get_database,
)

__all__ = [
    # Backends
    "InMemoryKeyValueStore",
    "FileKeyValueStore",
    "SQLiteKeyValueStore",
    # SQLite database
    "SQLiteDatabase",
    "get_database",
    "close_database",
    # Factory
    "get_key_value_store",
]
