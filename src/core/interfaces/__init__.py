"""Core interfaces (ports) for dependency injection."""

from src.core.interfaces.key_value_store import IKeyValueStore

__all__ = [
    # Storage interfaces
    "IKeyValueStore",
]
