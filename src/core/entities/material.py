"""
Material domain entity.

A stocked item with its current quantity and unit price.
"""

from datetime import UTC, datetime
from decimal import Decimal

from pydantic import Field

from src.core.entities.base import InventoryModel


def utc_now() -> datetime:
    return datetime.now(UTC)


class Material(InventoryModel):
    """
    A material held in inventory.

    ``quantity`` is kept in step with the movement ledger by the inventory
    engine; ``price`` follows the most recent inbound movement.
    """

    id: int | None = None
    name: str = Field(default="", alias="nombre")
    type: str = Field(default="", alias="tipo")
    quantity: Decimal = Field(default=Decimal("0"), ge=0, alias="cantidad")
    price: Decimal = Field(default=Decimal("0"), ge=0, alias="precio")
    created_at: datetime = Field(default_factory=utc_now, alias="fechaCreacion")
    updated_at: datetime = Field(default_factory=utc_now, alias="fechaActualizacion")

    @property
    def total_value(self) -> Decimal:
        """Total stock value = quantity * price."""
        return self.quantity * self.price
