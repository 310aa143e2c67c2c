"""Storage backend abstractions."""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

from ..models import Identifier, Storable

T = TypeVar("T", bound=Storable)


@runtime_checkable
class StorageBackend(Protocol):
    """Protocol for persisting storables.

    ``save`` assigns a fresh id to new entities (``id == 0``) and writes it back
    onto the entity; entities that already carry an id are overwritten in place.
    ``load`` raises ``NotFoundError``, ``TypeMismatchError``,
    ``DeserializationError`` or ``BackendUnavailableError`` rather than
    returning a default object.
    """

    def save(self, entity: Storable) -> Identifier: ...
    def load(self, kind: type[T], entity_id: Identifier) -> T: ...
    def list_ids(self) -> list[Identifier]: ...
    def exists(self, entity_id: Identifier) -> bool: ...


def check_identifier(entity_id: object) -> Identifier:
    if isinstance(entity_id, bool) or not isinstance(entity_id, int):
        raise TypeError(f"Identifier must be an int, got {type(entity_id).__name__}")
    if entity_id < 0:
        raise ValueError(f"Identifier must not be negative, got {entity_id}")
    return entity_id


def check_storable(entity: object) -> Storable:
    if not isinstance(entity, Storable):
        raise TypeError(f"Expected a Storable, got {type(entity).__name__}")
    return entity
