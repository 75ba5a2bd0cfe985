"""Pytest fixtures for SQLite storage tests."""

from collections.abc import AsyncGenerator
from pathlib import Path

import pytest

from src.infrastructure.storage.sqlite.connection import SQLiteDatabase


@pytest.fixture
def temp_db_path(tmp_path: Path) -> Path:
    """Create a temporary database path."""
    return tmp_path / "test.db"


@pytest.fixture
async def database(temp_db_path: Path) -> AsyncGenerator[SQLiteDatabase, None]:
    """Opened database over a temporary file."""
    database = SQLiteDatabase(db_path=temp_db_path)
    await database.connect()
    yield database
    await database.close()
