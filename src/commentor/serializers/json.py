"""Tagged-record and JSON serialization helpers for storables."""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import TypeVar, cast
from uuid import uuid4

from pydantic import ValidationError

from ..exceptions import DeserializationError, TypeMismatchError
from ..models import Storable, resolve_storable_type

T = TypeVar("T", bound=Storable)


def storable_to_record(entity: Storable) -> dict[str, object]:
    """Return ``{"type": <tag>, "id": <int>, ...variant fields}`` for an entity."""
    _require_storable(entity)
    return entity.model_dump(mode="json")


def storable_from_record(
    record: object,
    kind: type[T],
    *,
    entity_id: int | None = None,
) -> T:
    """Rebuild an entity from a tagged record.

    The record's tag is checked against ``kind`` before any field is read, so a
    stored ``Comment`` requested as an ``Annotation`` raises
    ``TypeMismatchError`` instead of being coerced. Pass ``Storable`` to accept
    any registered variant. Structural problems raise ``DeserializationError``.
    """
    _require_storable_kind(kind)
    if not isinstance(record, Mapping):
        raise DeserializationError(
            f"Storable record must be an object, got {type(record).__name__}"
        )
    variant = resolve_storable_type(record.get("type"))
    if not issubclass(variant, kind):
        raise TypeMismatchError(
            entity_id,
            expected=kind.tag() or kind.__name__,
            actual=variant.tag() or variant.__name__,
        )
    try:
        entity = variant.model_validate(dict(record))
    except ValidationError as exc:
        raise DeserializationError(f"Invalid {variant.tag()!r} record: {exc}") from exc
    return cast(T, entity)


def storable_to_json(entity: Storable, *, indent: int | None = 2) -> str:
    _require_storable(entity)
    return entity.model_dump_json(indent=indent)


def storable_from_json(
    payload: str | bytes,
    kind: type[T],
    *,
    entity_id: int | None = None,
) -> T:
    """Parse a JSON document into ``kind``.

    Raises ``DeserializationError`` on unparseable input or an invalid record.
    """
    try:
        record = json.loads(payload)
    except ValueError as exc:
        raise DeserializationError(f"Failed to parse storable JSON: {exc}") from exc
    return storable_from_record(record, kind, entity_id=entity_id)


def save_storable_json(entity: Storable, path: str | Path, *, indent: int | None = 2) -> Path:
    """Write an entity as JSON, replacing ``path`` atomically."""
    output_path = Path(path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = output_path.with_name(f".{output_path.name}.{uuid4().hex}.tmp")
    try:
        tmp_path.write_text(storable_to_json(entity, indent=indent), encoding="utf-8")
        tmp_path.replace(output_path)
    finally:
        tmp_path.unlink(missing_ok=True)
    return output_path


def load_storable_json(path: str | Path, kind: type[T], *, entity_id: int | None = None) -> T:
    """Load an entity from a JSON file.

    Raises ``DeserializationError`` on invalid content,
    or ``FileNotFoundError`` / ``OSError`` if the file is inaccessible.
    """
    payload = Path(path).read_bytes()
    return storable_from_json(payload, kind, entity_id=entity_id)


def _require_storable(entity: object) -> None:
    if not isinstance(entity, Storable):
        raise TypeError(f"Expected a Storable, got {type(entity).__name__}")


def _require_storable_kind(kind: object) -> None:
    if not (isinstance(kind, type) and issubclass(kind, Storable)):
        raise TypeError(f"Expected a Storable subclass, got {kind!r}")
