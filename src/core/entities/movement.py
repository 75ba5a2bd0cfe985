"""Stock movement domain entities."""

from datetime import datetime
from decimal import Decimal
from enum import IntEnum
from typing import Any

from pydantic import Field, field_serializer, field_validator

from src.core.entities.base import InventoryModel
from src.core.entities.material import utc_now


class MovementType(IntEnum):
    """Direction of a stock movement. Persisted as its integer value."""

    ENTRADA = 0  # inbound
    SALIDA = 1  # outbound

    @property
    def sign(self) -> int:
        """+1 for inbound, -1 for outbound."""
        return 1 if self is MovementType.ENTRADA else -1


class Movement(InventoryModel):
    """Records a single inbound or outbound stock movement."""

    id: int | None = None
    material_id: int = Field(alias="materialId")
    movement_type: MovementType = Field(alias="tipo")
    quantity: Decimal = Field(gt=0, alias="cantidad")
    price: Decimal = Field(default=Decimal("0"), ge=0, alias="precio")
    notes: str = Field(default="", alias="observaciones")
    timestamp: datetime = Field(default_factory=utc_now, alias="fecha")

    @field_validator("movement_type", mode="before")
    @classmethod
    def parse_movement_type(cls, v: Any) -> Any:
        """Accept ``"Entrada"`` / ``"Salida"`` as well as 0 / 1."""
        if isinstance(v, str):
            name = v.strip().upper()
            if name in MovementType.__members__:
                return MovementType[name]
            if name.isdigit():
                return int(name)
        return v

    @field_serializer("movement_type")
    def serialize_movement_type(self, v: MovementType) -> int:
        return int(v)

    @field_validator("notes", mode="before")
    @classmethod
    def ensure_notes(cls, v: Any) -> str:
        return v or ""

    @property
    def total(self) -> Decimal:
        """Movement value = quantity * price."""
        return self.quantity * self.price
