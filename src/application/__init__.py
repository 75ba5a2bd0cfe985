"""
Application layer - service factories.

Wires configured storage backends into the core inventory engine.
"""

from src.application.services import (
    build_inventory_engine,
    close_services,
    get_inventory_engine,
    reset_services,
)

__all__ = [
    "build_inventory_engine",
    "get_inventory_engine",
    "close_services",
    "reset_services",
]
