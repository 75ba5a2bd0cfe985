"""In-memory key-value backend."""

from src.core.interfaces.key_value_store import IKeyValueStore


class InMemoryKeyValueStore(IKeyValueStore):
    """Dict-backed store. Contents live only as long as the instance."""

    name = "memory"

    def __init__(self, initial: dict[str, str] | None = None):
        self._data: dict[str, str] = dict(initial or {})

    async def get(self, key: str) -> str | None:
        return self._data.get(key)

    async def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def snapshot(self) -> dict[str, str]:
        """Copy of the stored values."""
        return dict(self._data)
