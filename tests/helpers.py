"""Builders for movement drafts."""

from decimal import Decimal

from src.core.entities import Movement, MovementType


def inbound(material_id: int, quantity: str, price: str = "0", notes: str = "") -> Movement:
    return Movement(
        material_id=material_id,
        movement_type=MovementType.ENTRADA,
        quantity=Decimal(quantity),
        price=Decimal(price),
        notes=notes,
    )


def outbound(material_id: int, quantity: str, price: str = "0", notes: str = "") -> Movement:
    return Movement(
        material_id=material_id,
        movement_type=MovementType.SALIDA,
        quantity=Decimal(quantity),
        price=Decimal(price),
        notes=notes,
    )
