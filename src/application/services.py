"""
Service factory functions for dependency injection.

This module wires infrastructure backends to the core inventory services.
UI code should obtain the engine from here.

Clean Architecture: Application layer orchestrates DI, not core layer.
"""

from typing import TYPE_CHECKING

from src.config import configure_logging, get_logger, get_settings
from src.core.services import (
    InventoryEngine,
    MaterialStore,
    MovementLedger,
    PersistenceGateway,
)

if TYPE_CHECKING:
    from src.core.interfaces import IKeyValueStore

logger = get_logger(__name__)


# Singleton engine instance
_inventory_engine: InventoryEngine | None = None


def build_inventory_engine(backend: "IKeyValueStore") -> InventoryEngine:
    """
    Assemble an InventoryEngine over a key-value backend.

    Both collections share one gateway; their keys come from settings.

    Args:
        backend: Storage backend to persist to

    Returns:
        Unloaded InventoryEngine
    """
    settings = get_settings()
    gateway = PersistenceGateway(backend)
    return InventoryEngine(
        material_store=MaterialStore(gateway, key=settings.storage.materials_key),
        movement_ledger=MovementLedger(gateway, key=settings.storage.movements_key),
    )


def get_inventory_engine(backend: "IKeyValueStore | None" = None) -> InventoryEngine:
    """
    Get or create the InventoryEngine instance.

    Creates the configured backend if none is provided and configures
    logging when the shared engine is first built. Passing a backend builds
    a fresh engine and leaves the singleton and logging untouched.

    Args:
        backend: Optional storage backend override

    Returns:
        Configured InventoryEngine
    """
    global _inventory_engine

    if backend is not None:
        return build_inventory_engine(backend)

    if _inventory_engine is None:
        configure_logging()

        # Lazy import infrastructure to avoid circular imports
        from src.infrastructure.storage import get_key_value_store

        _inventory_engine = build_inventory_engine(get_key_value_store())

    return _inventory_engine


async def close_services() -> None:
    """Release storage resources held by the services."""
    from src.infrastructure.storage import close_database

    await close_database()
    reset_services()
    logger.info("services_closed")


def reset_services() -> None:
    """Reset singleton instances (for testing)."""
    global _inventory_engine
    _inventory_engine = None
