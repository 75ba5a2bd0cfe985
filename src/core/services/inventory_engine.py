"""
Inventory engine.

Orchestrates the material store and the movement ledger and keeps every
material's quantity equal to the net effect of its movements. All state
changes for an operation happen before its first persistence await, so no
other operation can observe a half-applied movement or cascade.
"""

import asyncio
from decimal import Decimal

from src.config import get_logger
from src.core.entities.material import Material
from src.core.entities.movement import Movement, MovementType
from src.core.entities.result import InventoryResult
from src.core.exceptions import (
    InsufficientStockError,
    InventoryError,
    MaterialNotFoundError,
    NotFoundError,
)
from src.core.services.material_store import MaterialStore
from src.core.services.movement_ledger import MovementLedger

logger = get_logger(__name__)


class InventoryEngine:
    """
    Public inventory API consumed by the UI layer.

    Pure service: stores are injected via the constructor. Every operation
    loads persisted state on first use; ``initialize()`` may also be awaited
    up front.
    """

    def __init__(
        self,
        material_store: MaterialStore,
        movement_ledger: MovementLedger,
    ):
        self._materials = material_store
        self._movements = movement_ledger
        self._initialized = False
        self._lock = asyncio.Lock()

    async def initialize(self) -> None:
        """
        Load materials, then movements, exactly once.

        Concurrent callers wait for the same load. A failed load is logged
        and the engine carries on with whatever state resulted; it is not
        retried.
        """
        if self._initialized:
            return

        async with self._lock:
            if self._initialized:
                return

            try:
                await self._materials.load()
                await self._movements.load()
            except Exception as e:
                logger.error("inventory_initialization_failed", error=str(e))

            self._initialized = True
            logger.info(
                "inventory_initialized",
                materials=len(self._materials),
                movements=len(self._movements),
            )

    # Materials

    async def list_materials(self) -> list[Material]:
        """All materials, live. Mutate only through engine operations."""
        await self.initialize()
        return self._materials.list_all()

    async def get_material(self, material_id: int) -> InventoryResult[Material]:
        await self.initialize()
        material = self._materials.get(material_id)
        if material is None:
            return InventoryResult.failure(NotFoundError("Material", material_id))
        return InventoryResult.success(material)

    async def add_material(self, draft: Material) -> InventoryResult[Material]:
        await self.initialize()
        material = await self._materials.add(draft)
        return InventoryResult.success(material)

    async def update_material(self, material: Material) -> InventoryResult[Material]:
        """
        Overwrite name, type, quantity and price of an existing material.

        Setting quantity here bypasses the ledger; callers own that choice.
        """
        await self.initialize()
        if not await self._materials.update(material):
            return InventoryResult.failure(NotFoundError("Material", material.id))
        return InventoryResult.success(self._materials.get(material.id))  # type: ignore[arg-type]

    async def delete_material(self, material_id: int) -> InventoryResult[Material]:
        """Delete a material and every movement that references it."""
        await self.initialize()
        material = self._materials.discard(material_id)
        if material is None:
            return InventoryResult.failure(NotFoundError("Material", material_id))

        removed = self._movements.remove_by_material(material_id)

        await self._materials.save()
        await self._movements.save()

        logger.info(
            "material_deleted",
            material_id=material_id,
            movements_removed=removed,
        )
        return InventoryResult.success(material)

    async def inventory_value(self) -> Decimal:
        """Sum of quantity * price across all materials."""
        await self.initialize()
        return sum(
            (m.total_value for m in self._materials.list_all()),
            start=Decimal("0"),
        )

    # Movements

    async def list_movements(self) -> list[Movement]:
        await self.initialize()
        return self._movements.list_all()

    async def list_movements_by_material(self, material_id: int) -> list[Movement]:
        await self.initialize()
        return self._movements.list_by_material(material_id)

    async def get_movement(self, movement_id: int) -> InventoryResult[Movement]:
        await self.initialize()
        movement = self._movements.get(movement_id)
        if movement is None:
            return InventoryResult.failure(NotFoundError("Movement", movement_id))
        return InventoryResult.success(movement)

    async def add_movement(self, draft: Movement) -> InventoryResult[Movement]:
        """
        Record a movement and apply it to its material.

        Inbound adds to the quantity and sets the material price to the
        movement price. Outbound subtracts and leaves the price alone; it is
        rejected when it exceeds the stock on hand.
        """
        await self.initialize()

        material = self._materials.get(draft.material_id)
        if material is None:
            return self._reject(MaterialNotFoundError(draft.material_id))

        if draft.movement_type is MovementType.ENTRADA:
            material.quantity += draft.quantity
            material.price = draft.price
        else:
            if material.quantity < draft.quantity:
                return self._reject(
                    InsufficientStockError(
                        material_id=draft.material_id,
                        requested=draft.quantity,
                        available=material.quantity,
                    )
                )
            material.quantity -= draft.quantity

        self._materials.touch(material)
        movement = self._movements.append(draft)

        await self._materials.save()
        await self._movements.save()

        logger.info(
            "movement_recorded",
            movement_id=movement.id,
            material_id=material.id,
            type=movement.movement_type.name,
            quantity=str(movement.quantity),
            new_quantity=str(material.quantity),
        )
        return InventoryResult.success(movement)

    async def delete_movement(self, movement_id: int) -> InventoryResult[Movement]:
        """
        Remove a movement and undo its effect on the material.

        If the material is already gone only the movement is removed.
        Deleting the latest inbound movement sets the price back to the
        newest remaining inbound movement; with none left the price stays.
        """
        await self.initialize()

        movement = self._movements.get(movement_id)
        if movement is None:
            return InventoryResult.failure(NotFoundError("Movement", movement_id))

        material = self._materials.get(movement.material_id)
        if material is not None:
            restored = material.quantity - movement.movement_type.sign * movement.quantity
            if restored < 0:
                # Undoing this inbound would consume stock already issued
                return self._reject(
                    InsufficientStockError(
                        material_id=movement.material_id,
                        requested=movement.quantity,
                        available=material.quantity,
                    )
                )

            if (
                movement.movement_type is MovementType.ENTRADA
                and self._movements.latest_inbound(movement.material_id) is movement
            ):
                previous = self._movements.previous_inbound(movement)
                if previous is not None:
                    material.price = previous.price
            material.quantity = restored
            self._materials.touch(material)

        self._movements.discard(movement_id)

        await self._materials.save()
        await self._movements.save()

        logger.info(
            "movement_deleted",
            movement_id=movement_id,
            material_id=movement.material_id,
            reversed=material is not None,
        )
        return InventoryResult.success(movement)

    def _reject(self, error: InventoryError) -> InventoryResult:
        logger.warning("movement_rejected", error=error.code, **error.details)
        return InventoryResult.failure(error)
