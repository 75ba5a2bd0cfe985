"""Movement ledger: the chronological stock movement collection."""

from src.config import get_logger
from src.core.entities.material import utc_now
from src.core.entities.movement import Movement, MovementType
from src.core.services.persisted_collection import PersistedCollection
from src.core.services.persistence_gateway import PersistenceGateway

logger = get_logger(__name__)

DEFAULT_KEY = "movements"


class MovementLedger(PersistedCollection[Movement]):
    """
    In-memory movements mirrored to the gateway under a fixed key.

    The ledger enforces no business rules; stock checks belong to the
    inventory engine and must run before a movement is appended.
    """

    entity = Movement
    label = "movements"

    def __init__(self, gateway: PersistenceGateway, key: str = DEFAULT_KEY):
        super().__init__(gateway, key)

    def list_by_material(self, material_id: int) -> list[Movement]:
        """Movements for one material, in insertion order."""
        return [m for m in self._items if m.material_id == material_id]

    def append(self, movement: Movement) -> Movement:
        """Assign the next ID and timestamp and append, without persisting."""
        movement.id = self._take_next_id()
        movement.timestamp = utc_now()
        self._items.append(movement)
        return movement

    async def add(self, movement: Movement) -> Movement:
        """Append a movement and persist the ledger."""
        self.append(movement)
        await self.save()
        logger.info(
            "movement_recorded",
            movement_id=movement.id,
            material_id=movement.material_id,
            type=movement.movement_type.name,
        )
        return movement

    def remove_by_material(self, material_id: int) -> int:
        """Drop every movement of a material without persisting. Returns the count."""
        before = len(self._items)
        self._items[:] = [m for m in self._items if m.material_id != material_id]
        return before - len(self._items)

    def latest_inbound(self, material_id: int) -> Movement | None:
        """Most recent inbound movement for a material, if any."""
        for movement in reversed(self._items):
            if (
                movement.material_id == material_id
                and movement.movement_type is MovementType.ENTRADA
            ):
                return movement
        return None

    def previous_inbound(self, movement: Movement) -> Movement | None:
        """Newest inbound movement of the same material recorded before this one."""
        previous = None
        for candidate in self._items:
            if candidate is movement:
                break
            if (
                candidate.material_id == movement.material_id
                and candidate.movement_type is MovementType.ENTRADA
            ):
                previous = candidate
        return previous
