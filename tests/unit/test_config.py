"""Tests for settings and logging configuration."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from src.config import Settings, StorageSettings, configure_logging, get_logger, get_settings, reset_settings
from src.config.logging import add_app_context


class TestStorageSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("STORAGE_DATA_DIR", raising=False)
        storage = StorageSettings()
        assert storage.backend == "file"
        assert storage.materials_key == "materials"
        assert storage.movements_key == "movements"
        assert storage.db_path == Path("data") / "inventario.db"

    def test_env_prefix(self, monkeypatch, tmp_path):
        monkeypatch.setenv("STORAGE_BACKEND", "sqlite")
        monkeypatch.setenv("STORAGE_DATA_DIR", str(tmp_path))
        monkeypatch.setenv("STORAGE_DB_NAME", "stock.db")

        storage = Settings().storage
        assert storage.backend == "sqlite"
        assert storage.db_path == tmp_path / "stock.db"

    def test_unknown_backend_rejected(self, monkeypatch):
        monkeypatch.setenv("STORAGE_BACKEND", "redis")
        with pytest.raises(ValidationError):
            StorageSettings()


class TestGetSettings:
    def test_cached_until_reset(self):
        first = get_settings()
        assert get_settings() is first
        reset_settings()
        assert get_settings() is not first


class TestConfigureLogging:
    @pytest.mark.parametrize("environment", ["development", "production"])
    def test_configure_and_log(self, monkeypatch, environment):
        monkeypatch.setenv("ENVIRONMENT", environment)
        reset_settings()

        configure_logging()
        get_logger("tests.config").info("logging_configured", environment=environment)

    def test_events_carry_storage_backend(self, monkeypatch):
        monkeypatch.setenv("STORAGE_BACKEND", "sqlite")
        reset_settings()

        event = add_app_context(None, "info", {"event": "material_created"})

        assert event["storage_backend"] == "sqlite"
        assert event["app"] == "Inventario"
        assert event["event"] == "material_created"
