"""
Key-value backend factory.

Creates the appropriate backend based on configuration.
"""

from src.config import get_logger, get_settings
from src.core.exceptions import ConfigurationError
from src.core.interfaces import IKeyValueStore

logger = get_logger(__name__)


def get_key_value_store(backend: str | None = None) -> IKeyValueStore:
    """
    Get a key-value backend instance.

    Args:
        backend: "memory", "file" or "sqlite" (default from settings)

    Returns:
        IKeyValueStore instance
    """
    settings = get_settings()
    backend = backend or settings.storage.backend

    if backend == "memory":
        from src.infrastructure.storage.memory_store import InMemoryKeyValueStore

        store: IKeyValueStore = InMemoryKeyValueStore()

    elif backend == "file":
        from src.infrastructure.storage.file_store import FileKeyValueStore

        store = FileKeyValueStore(settings.storage.data_dir)

    elif backend == "sqlite":
        from src.infrastructure.storage.sqlite import SQLiteKeyValueStore

        store = SQLiteKeyValueStore()

    else:
        raise ConfigurationError(
            f"Unknown storage backend: {backend}",
            details={"backend": backend},
        )

    logger.info("storage_backend_selected", backend=store.name)
    return store
