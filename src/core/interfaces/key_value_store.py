"""Abstract interface for key-value storage backends."""

from abc import ABC, abstractmethod


class IKeyValueStore(ABC):
    """
    Minimal string key-value storage port.

    Implementations may raise on failure; the persistence gateway is
    responsible for absorbing errors.
    """

    name: str = "kv"

    @abstractmethod
    async def get(self, key: str) -> str | None:
        """Get the value stored under key, or None if absent."""
        pass

    @abstractmethod
    async def set(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value."""
        pass
