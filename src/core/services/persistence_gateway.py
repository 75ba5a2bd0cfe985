"""
Persistence gateway.

Boundary between the in-memory stores and a key-value backend. Backend
failures stop here: they are logged and reported as an empty read or a
skipped write, never raised.
"""

from src.config import get_logger
from src.core.interfaces.key_value_store import IKeyValueStore

logger = get_logger(__name__)


class PersistenceGateway:
    """Read/write strings by key through an injected backend."""

    def __init__(self, backend: IKeyValueStore):
        self._backend = backend

    async def read(self, key: str) -> str:
        """Return the stored value, or "" when absent or unreadable."""
        try:
            value = await self._backend.get(key)
        except Exception as e:
            logger.error(
                "storage_read_failed",
                backend=self._backend.name,
                key=key,
                error=str(e),
            )
            return ""
        return value or ""

    async def write(self, key: str, value: str) -> None:
        """Store value under key. Failures leave the previous value in place."""
        try:
            await self._backend.set(key, value)
        except Exception as e:
            logger.error(
                "storage_write_failed",
                backend=self._backend.name,
                key=key,
                error=str(e),
            )
