"""
Shared pydantic base for persisted inventory entities.

Persisted records use Spanish field names (the stored JSON schema) while the
Python attributes use English names. Incoming keys are matched
case-insensitively against both, so payloads written by other encoders
(``Nombre``, ``NOMBRE``, ``materialID``) still load.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator


class InventoryModel(BaseModel):
    """Base model with alias-aware, case-insensitive field matching."""

    model_config = ConfigDict(populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def match_field_names(cls, data: Any) -> Any:
        """Map incoming keys onto field aliases ignoring case."""
        if not isinstance(data, dict):
            return data

        known: dict[str, str] = {}
        for name, field in cls.model_fields.items():
            target = field.alias or name
            known[name.lower()] = target
            known[target.lower()] = target

        matched: dict[str, Any] = {}
        for key, value in data.items():
            target = known.get(key.lower(), key) if isinstance(key, str) else key
            matched.setdefault(target, value)
        return matched
