"""Pytest configuration and fixtures."""

from collections.abc import Generator
from decimal import Decimal

import pytest

from src.application.services import reset_services
from src.config import reset_settings
from src.core.entities import Material
from src.core.services import (
    InventoryEngine,
    MaterialStore,
    MovementLedger,
    PersistenceGateway,
)
from src.infrastructure.storage.memory_store import InMemoryKeyValueStore


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch, tmp_path) -> Generator[None, None, None]:
    """Isolate settings and singletons between tests."""
    monkeypatch.setenv("STORAGE_DATA_DIR", str(tmp_path / "data"))
    reset_settings()
    reset_services()
    yield
    reset_settings()
    reset_services()


@pytest.fixture
def backend() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def gateway(backend) -> PersistenceGateway:
    return PersistenceGateway(backend)


@pytest.fixture
def material_store(gateway) -> MaterialStore:
    return MaterialStore(gateway)


@pytest.fixture
def movement_ledger(gateway) -> MovementLedger:
    return MovementLedger(gateway)


@pytest.fixture
def engine(material_store, movement_ledger) -> InventoryEngine:
    return InventoryEngine(material_store=material_store, movement_ledger=movement_ledger)


@pytest.fixture
def cable() -> Material:
    """Draft material used across tests."""
    return Material(name="Cable", type="Eléctrico", quantity=Decimal("0"), price=Decimal("10.0"))
