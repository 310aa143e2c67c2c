"""Public exception types for commentor."""

from __future__ import annotations


class CommentorError(Exception):
    """Base class for all commentor exceptions."""


class ConfigurationError(CommentorError):
    """Raised when a storage URI or configuration value cannot be resolved."""


class StorageError(CommentorError):
    """Base class for failures reported by a storage backend."""


class NotFoundError(StorageError):
    """Raised when no record exists for an identifier."""

    def __init__(self, entity_id: int) -> None:
        super().__init__(f"No record stored under id {entity_id}")
        self.entity_id = entity_id


class TypeMismatchError(StorageError):
    """Raised when a stored record is not the variant the caller asked for."""

    def __init__(self, entity_id: int | None, expected: str, actual: str) -> None:
        where = f"Record {entity_id}" if entity_id is not None else "Record"
        super().__init__(f"{where} is a {actual!r}, not a {expected!r}")
        self.entity_id = entity_id
        self.expected = expected
        self.actual = actual


class DeserializationError(StorageError):
    """Raised when a stored record is present but structurally invalid."""


class BackendUnavailableError(StorageError):
    """Raised when the storage medium cannot be reached."""
