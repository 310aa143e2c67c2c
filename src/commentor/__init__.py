"""commentor: swappable storage for serializable domain objects.

Convenience API (delegates to a default StorageLocator):
    commentor.configure(...)    -> bind the default backend
    commentor.get_backend()     -> the shared backend handle
    commentor.save(entity)      -> persist, returns the entity id
    commentor.load(kind, id)    -> rebuild an entity of the requested variant

DI API (construct and pass your own backend):
    from commentor.storage import FileStore
    store = FileStore("data/")
    comment_id = store.save(Comment(comment_text="hello"))
    store.load(Comment, comment_id)
"""

from __future__ import annotations

import threading
from typing import TypeVar

from .config import StorageConfig
from .exceptions import (
    BackendUnavailableError,
    CommentorError,
    ConfigurationError,
    DeserializationError,
    NotFoundError,
    StorageError,
    TypeMismatchError,
)
from .models import Annotation, Comment, Identifier, Storable
from .storage import FileStore, MemoryStore, StorageBackend, StorageLocator, resolve_storage

T = TypeVar("T", bound=Storable)

_default_locator: StorageLocator | None = None
_default_locator_lock = threading.Lock()


def configure(
    *,
    storage: str | StorageBackend = "memory",
    indent: int | None = 2,
) -> StorageBackend:
    """Bind the default backend and return it."""
    global _default_locator
    backend = resolve_storage(storage, indent=indent)
    with _default_locator_lock:
        _default_locator = StorageLocator(factory=lambda: backend)
    return backend


def get_locator() -> StorageLocator:
    """Return the default locator, built from the environment on first use."""
    global _default_locator
    with _default_locator_lock:
        if _default_locator is None:
            _default_locator = StorageLocator()
        return _default_locator


def get_backend() -> StorageBackend:
    return get_locator().get_backend()


def save(entity: Storable) -> Identifier:
    return get_backend().save(entity)


def load(kind: type[T], entity_id: Identifier) -> T:
    return get_backend().load(kind, entity_id)


def _reset_default_locator() -> None:
    """Reset the default locator. Used by test fixtures."""
    global _default_locator
    with _default_locator_lock:
        _default_locator = None


__all__ = [
    "Annotation",
    "BackendUnavailableError",
    "Comment",
    "CommentorError",
    "ConfigurationError",
    "DeserializationError",
    "FileStore",
    "Identifier",
    "MemoryStore",
    "NotFoundError",
    "Storable",
    "StorageBackend",
    "StorageConfig",
    "StorageError",
    "StorageLocator",
    "TypeMismatchError",
    "configure",
    "get_backend",
    "get_locator",
    "load",
    "save",
]
