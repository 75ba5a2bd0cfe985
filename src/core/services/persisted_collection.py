"""
Ordered in-memory collection mirrored to one key of the persistence gateway.

Shared by the material store and the movement ledger: both keep their
records in insertion order, hand out monotonically increasing integer IDs,
and serialize the whole collection as an indented JSON array.
"""

from datetime import datetime
from typing import Any, ClassVar, Generic, TypeVar

import simplejson

from src.config import get_logger
from src.core.entities.base import InventoryModel
from src.core.services.persistence_gateway import PersistenceGateway

logger = get_logger(__name__)

T = TypeVar("T", bound=InventoryModel)


def _encode_default(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.isoformat()
    raise TypeError(f"{type(value).__name__} is not JSON serializable")


class PersistedCollection(Generic[T]):
    """Base class for the JSON-backed inventory collections."""

    entity: ClassVar[type[InventoryModel]]
    label: ClassVar[str]

    def __init__(self, gateway: PersistenceGateway, key: str):
        self._gateway = gateway
        self._key = key
        self._items: list[T] = []
        self._next_id = 1

    @property
    def next_id(self) -> int:
        """ID the next added record will receive."""
        return self._next_id

    def __len__(self) -> int:
        return len(self._items)

    async def load(self) -> None:
        """
        Replace the collection with the persisted payload.

        An empty, malformed or invalid payload resets to an empty collection.
        """
        payload = await self._gateway.read(self._key)
        if not payload.strip():
            self._reset()
            logger.info("collection_loaded", collection=self.label, count=0)
            return

        try:
            items = self.decode(payload)
        except (ValueError, TypeError) as e:
            logger.warning(
                "collection_load_failed",
                collection=self.label,
                key=self._key,
                error=str(e),
            )
            self._reset()
            return

        self._items[:] = items
        self._next_id = max((item.id or 0 for item in items), default=0) + 1
        for item in items:
            if item.id is None:
                item.id = self._take_next_id()

        logger.info(
            "collection_loaded",
            collection=self.label,
            count=len(items),
            next_id=self._next_id,
        )

    async def save(self) -> None:
        """Write the whole collection under its key. Errors are logged only."""
        try:
            payload = self.encode()
        except (ValueError, TypeError) as e:
            logger.error(
                "collection_save_failed",
                collection=self.label,
                key=self._key,
                error=str(e),
            )
            return
        await self._gateway.write(self._key, payload)

    def encode(self) -> str:
        """
        Serialize the collection as an indented JSON array.

        Decimals are written as exact JSON numbers, datetimes as ISO 8601.
        """
        records = [item.model_dump(by_alias=True) for item in self._items]
        return simplejson.dumps(
            records,
            use_decimal=True,
            indent=2,
            ensure_ascii=False,
            default=_encode_default,
        )

    def decode(self, payload: str) -> list[T]:
        """Parse a JSON array payload into entities. Numbers load as Decimal."""
        raw = simplejson.loads(payload, use_decimal=True)
        if not isinstance(raw, list):
            raise ValueError(f"expected a JSON array, got {type(raw).__name__}")
        return [self.entity.model_validate(record) for record in raw]  # type: ignore[misc]

    def get(self, item_id: int) -> T | None:
        """Find a record by ID."""
        return next((item for item in self._items if item.id == item_id), None)

    def list_all(self) -> list[T]:
        """The live, ordered collection. Do not mutate it directly."""
        return self._items

    def discard(self, item_id: int) -> T | None:
        """Remove a record without persisting. Returns it, or None if absent."""
        item = self.get(item_id)
        if item is not None:
            self._items.remove(item)
        return item

    async def remove(self, item_id: int) -> bool:
        """Remove a record and persist. False if the ID does not exist."""
        if self.discard(item_id) is None:
            return False
        await self.save()
        return True

    def _take_next_id(self) -> int:
        item_id = self._next_id
        self._next_id += 1
        return item_id

    def _reset(self) -> None:
        self._items.clear()
        self._next_id = 1
