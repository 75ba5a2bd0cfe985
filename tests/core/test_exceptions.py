"""Unit tests for domain exceptions."""

import pytest

from src.core.exceptions import (
    ConfigurationError,
    InsufficientStockError,
    InventarioError,
    InventoryError,
    InventoryErrorKind,
    MaterialNotFoundError,
    NotFoundError,
    StorageBackendError,
    StorageError,
)


class TestInventarioError:
    """Tests for base InventarioError exception."""

    def test_basic_initialization(self):
        error = InventarioError("Something went wrong")
        assert str(error) == "Something went wrong"
        assert error.message == "Something went wrong"
        assert error.code == "InventarioError"
        assert error.details == {}

    def test_with_custom_code(self):
        error = InventarioError("Error message", code="CUSTOM_ERROR")
        assert error.code == "CUSTOM_ERROR"

    def test_to_dict(self):
        error = InventarioError("Test error", code="TEST_CODE", details={"extra": "info"})
        assert error.to_dict() == {
            "error": "TEST_CODE",
            "message": "Test error",
            "details": {"extra": "info"},
        }


class TestInventoryErrors:
    def test_material_not_found(self):
        error = MaterialNotFoundError(7)
        assert isinstance(error, InventoryError)
        assert error.kind is InventoryErrorKind.MATERIAL_NOT_FOUND
        assert error.code == "MATERIAL_NOT_FOUND"
        assert error.message == "Material not found: 7"
        assert error.details == {"material_id": 7}

    def test_insufficient_stock_message_is_actionable(self):
        error = InsufficientStockError(material_id=1, requested=10, available=5)
        assert error.kind is InventoryErrorKind.INSUFFICIENT_STOCK
        assert "Insufficient stock for outbound movement" in error.message
        assert "requested 10" in error.message
        assert "available 5" in error.message
        assert error.details["requested"] == "10"

    def test_not_found(self):
        error = NotFoundError("Movement", 3)
        assert error.kind is InventoryErrorKind.NOT_FOUND
        assert error.message == "Movement not found: 3"
        assert error.details == {"entity": "Movement", "entity_id": 3}

    @pytest.mark.parametrize(
        "error",
        [
            MaterialNotFoundError(1),
            InsufficientStockError(1, 2, 1),
            NotFoundError("Material", 1),
        ],
    )
    def test_inventory_errors_are_catchable_as_base(self, error):
        with pytest.raises(InventarioError):
            raise error


class TestStorageErrors:
    def test_backend_error(self):
        error = StorageBackendError("sqlite", "write", "materials", "disk full")
        assert isinstance(error, StorageError)
        assert error.code == "STORAGE_BACKEND_ERROR"
        assert "disk full" in error.message
        assert error.details["key"] == "materials"

    def test_configuration_error(self):
        error = ConfigurationError("bad backend")
        assert error.code == "ConfigurationError"
