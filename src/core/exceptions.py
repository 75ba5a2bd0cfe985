"""
Domain exceptions for the Inventario application.

Provides specific exception types for different error scenarios.
"""

from enum import Enum
from typing import Any, ClassVar


class InventarioError(Exception):
    """Base exception for all Inventario errors."""

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict:
        """Convert to dictionary for UI/API consumers."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


# Storage Exceptions
class StorageError(InventarioError):
    """Base exception for storage operations."""

    pass


class StorageBackendError(StorageError):
    """Key-value backend operation failed."""

    def __init__(self, backend: str, operation: str, key: str, error: str):
        super().__init__(
            f"Storage backend '{backend}' failed during {operation} of '{key}': {error}",
            code="STORAGE_BACKEND_ERROR",
            details={
                "backend": backend,
                "operation": operation,
                "key": key,
                "error": error,
            },
        )


# Inventory Exceptions
class InventoryErrorKind(str, Enum):
    """Kinds of business-rule failures reported by the inventory engine."""

    MATERIAL_NOT_FOUND = "material_not_found"
    INSUFFICIENT_STOCK = "insufficient_stock"
    NOT_FOUND = "not_found"


class InventoryError(InventarioError):
    """Base exception for inventory business-rule violations."""

    kind: ClassVar[InventoryErrorKind]


class MaterialNotFoundError(InventoryError):
    """A movement references a material that does not exist."""

    kind = InventoryErrorKind.MATERIAL_NOT_FOUND

    def __init__(self, material_id: int):
        super().__init__(
            f"Material not found: {material_id}",
            code="MATERIAL_NOT_FOUND",
            details={"material_id": material_id},
        )


class InsufficientStockError(InventoryError):
    """An outbound movement would drive the material quantity negative."""

    kind = InventoryErrorKind.INSUFFICIENT_STOCK

    def __init__(self, material_id: int, requested: Any, available: Any):
        super().__init__(
            f"Insufficient stock for outbound movement: requested {requested}, "
            f"available {available}",
            code="INSUFFICIENT_STOCK",
            details={
                "material_id": material_id,
                "requested": str(requested),
                "available": str(available),
            },
        )


class NotFoundError(InventoryError):
    """A material or movement addressed by ID does not exist."""

    kind = InventoryErrorKind.NOT_FOUND

    def __init__(self, entity: str, entity_id: int | None):
        super().__init__(
            f"{entity} not found: {entity_id}",
            code="NOT_FOUND",
            details={"entity": entity, "entity_id": entity_id},
        )


class ConfigurationError(InventarioError):
    """Configuration error."""

    pass
