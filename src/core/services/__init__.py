"""
Core business logic services.

Layer-pure services that depend only on:
- src/core/entities/*
- src/core/interfaces/*
- src/core/exceptions.py

NO infrastructure imports. All dependencies injected via constructor.
"""

from src.core.services.inventory_engine import InventoryEngine
from src.core.services.material_store import MaterialStore
from src.core.services.movement_ledger import MovementLedger
from src.core.services.persisted_collection import PersistedCollection
from src.core.services.persistence_gateway import PersistenceGateway

__all__ = [
    # Persistence
    "PersistenceGateway",
    "PersistedCollection",
    # Stores
    "MaterialStore",
    "MovementLedger",
    # Engine
    "InventoryEngine",
]
