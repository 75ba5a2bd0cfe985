"""Material store: the ordered material collection and its persistence."""

from src.config import get_logger
from src.core.entities.material import Material, utc_now
from src.core.services.persisted_collection import PersistedCollection
from src.core.services.persistence_gateway import PersistenceGateway

logger = get_logger(__name__)

DEFAULT_KEY = "materials"


class MaterialStore(PersistedCollection[Material]):
    """In-memory materials mirrored to the gateway under a fixed key."""

    entity = Material
    label = "materials"

    def __init__(self, gateway: PersistenceGateway, key: str = DEFAULT_KEY):
        super().__init__(gateway, key)

    async def add(self, material: Material) -> Material:
        """Assign the next ID and fresh timestamps, append and persist."""
        material.id = self._take_next_id()
        now = utc_now()
        material.created_at = now
        material.updated_at = now
        self._items.append(material)
        await self.save()
        logger.info("material_created", material_id=material.id, name=material.name)
        return material

    async def update(self, material: Material) -> bool:
        """
        Copy the mutable fields onto the stored record with the same ID.

        Returns False if no such record exists.
        """
        existing = self.get(material.id) if material.id is not None else None
        if existing is None:
            return False

        existing.name = material.name
        existing.type = material.type
        existing.quantity = material.quantity
        existing.price = material.price
        self.touch(existing)

        await self.save()
        logger.info("material_updated", material_id=existing.id)
        return True

    def touch(self, material: Material) -> None:
        """Refresh updated_at without persisting."""
        material.updated_at = utc_now()
