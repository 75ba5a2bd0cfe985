"""Tests for the file-backed key-value store."""

import os
import tempfile
from pathlib import Path

import pytest

from src.core.exceptions import StorageBackendError
from src.infrastructure.storage.file_store import FileKeyValueStore


@pytest.fixture
def store(tmp_path: Path) -> FileKeyValueStore:
    return FileKeyValueStore(tmp_path / "kv")


class TestFileKeyValueStore:
    async def test_get_missing(self, store):
        assert await store.get("materials") is None

    async def test_set_creates_directory_and_file(self, store):
        await store.set("materials", "[]")
        path = store.path_for("materials")
        assert path == store.data_dir / "materials.json"
        assert path.read_text(encoding="utf-8") == "[]"

    async def test_round_trip_unicode(self, store):
        await store.set("materials", '[{"tipo": "Eléctrico"}]')
        assert await store.get("materials") == '[{"tipo": "Eléctrico"}]'

    async def test_overwrite_leaves_no_temp_files(self, store):
        await store.set("movements", "[1]")
        await store.set("movements", "[2]")
        assert await store.get("movements") == "[2]"
        assert sorted(p.name for p in store.data_dir.iterdir()) == ["movements.json"]

    async def test_unsafe_key_characters_are_replaced(self, store):
        await store.set("../inv:materials", "[]")
        path = store.path_for("../inv:materials")
        assert path.parent == store.data_dir
        assert path.name == ".._inv_materials.json"
        assert await store.get("../inv:materials") == "[]"

    async def test_write_error_is_wrapped(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        store = FileKeyValueStore(blocker)

        with pytest.raises(StorageBackendError) as exc_info:
            await store.set("materials", "[]")
        assert exc_info.value.details["operation"] == "write"
        assert exc_info.value.details["backend"] == "file"

    async def test_failed_write_closes_temp_file(self, store, monkeypatch):
        opened: list[int] = []
        closed: list[int] = []
        real_mkstemp = tempfile.mkstemp
        real_close = os.close

        def tracking_mkstemp(*args, **kwargs):
            fd, tmp = real_mkstemp(*args, **kwargs)
            opened.append(fd)
            return fd, tmp

        def tracking_close(fd):
            closed.append(fd)
            real_close(fd)

        def failing_write_text(self, *args, **kwargs):
            raise OSError("disk full")

        monkeypatch.setattr(tempfile, "mkstemp", tracking_mkstemp)
        monkeypatch.setattr(os, "close", tracking_close)
        monkeypatch.setattr(Path, "write_text", failing_write_text)

        with pytest.raises(StorageBackendError):
            await store.set("materials", "[]")

        assert opened and set(opened) <= set(closed)
        assert list(store.data_dir.iterdir()) == []
