"""Storable base model and the variant registry."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ..exceptions import DeserializationError

Identifier = int

_registry: dict[str, type[Storable]] = {}


class Storable(BaseModel):
    """Base for every persistable entity.

    Concrete variants pin ``type`` to a literal tag, e.g.
    ``type: Literal["comment"] = "comment"``, and are registered under that tag
    when the class is created. An ``id`` of 0 means "not yet persisted".
    Entities only carry data; persistence belongs to a ``StorageBackend``.
    """

    model_config = ConfigDict(strict=True, extra="ignore", validate_assignment=True)

    type: str
    id: Identifier = Field(default=0, ge=0)

    def __init__(self, **data: Any) -> None:
        if type(self) is Storable:
            raise TypeError("Storable cannot be instantiated directly; use a concrete variant")
        super().__init__(**data)

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)
        tag = cls.model_fields["type"].default
        if not isinstance(tag, str):
            return
        existing = _registry.get(tag)
        if existing is not None and existing is not cls:
            raise ValueError(f"Storable tag {tag!r} is already registered to {existing.__name__}")
        _registry[tag] = cls

    @classmethod
    def tag(cls) -> str | None:
        """Variant tag of this class, or None for the abstract base."""
        default = cls.model_fields["type"].default
        return default if isinstance(default, str) else None

    @property
    def is_persisted(self) -> bool:
        return self.id != 0


def storable_types() -> dict[str, type[Storable]]:
    return dict(_registry)


def resolve_storable_type(tag: object) -> type[Storable]:
    if not isinstance(tag, str):
        raise DeserializationError(f"Record variant tag must be a string, got {tag!r}")
    try:
        return _registry[tag]
    except KeyError:
        raise DeserializationError(f"Unknown storable variant {tag!r}") from None
