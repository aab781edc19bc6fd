"""Record shapes understood by the store.

The store is generic over the record type. The only structural requirement
is a string ``id``, either as an attribute (models, dataclasses) or as an
``"id"`` key (plain mappings).
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, field_validator

from recstore.exceptions import RecordIdError


@runtime_checkable
class HasId(Protocol):
    """Anything exposing a readable string ``id``."""

    @property
    def id(self) -> str: ...


class BaseRecord(BaseModel):
    """Base for typed records keyed by ``id``."""

    model_config = ConfigDict(frozen=True)

    id: str

    @field_validator("id")
    @classmethod
    def _normalize_id(cls, value: str) -> str:
        record_id = value.strip()
        if not record_id:
            raise ValueError("id must be non-empty")
        return record_id


class Pokemon(BaseRecord):
    """Sample record with two combat stats."""

    attack: int
    defense: int


def record_id(record: Any) -> str:
    """Return the identifier of *record*.

    Mappings are read through their ``"id"`` key, everything else through
    its ``id`` attribute.
    """
    if isinstance(record, Mapping):
        value = record.get("id")
    else:
        value = getattr(record, "id", None)
    if not isinstance(value, str):
        raise RecordIdError(
            f"{type(record).__name__} record has no string id (got {value!r})",
            record_type=type(record).__name__,
        )
    return value
