"""Typed outcome of inventory engine operations."""

from dataclasses import dataclass
from typing import Generic, TypeVar

from src.core.exceptions import InventoryError, InventoryErrorKind

T = TypeVar("T")


@dataclass
class InventoryResult(Generic[T]):
    """
    Value of a successful operation, or the business-rule error that stopped it.

    Lets callers branch on ``error_kind`` instead of catching exceptions.
    ``unwrap()`` is there for callers that prefer raising.
    """

    value: T | None = None
    error: InventoryError | None = None

    @classmethod
    def success(cls, value: T) -> "InventoryResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: InventoryError) -> "InventoryResult[T]":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def error_kind(self) -> InventoryErrorKind | None:
        return self.error.kind if self.error is not None else None

    @property
    def message(self) -> str | None:
        """User-facing description of the failure, if any."""
        return self.error.message if self.error is not None else None

    def unwrap(self) -> T:
        """Return the value, raising the carried error on failure."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]

    def __bool__(self) -> bool:
        return self.ok
