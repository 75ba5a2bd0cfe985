"""Core domain entities."""

from src.core.entities.material import Material
from src.core.entities.movement import Movement, MovementType
from src.core.entities.result import InventoryResult

__all__ = [
    "Material",
    "Movement",
    "MovementType",
    "InventoryResult",
]
