"""Storage backends."""

from .base import StorageBackend
from .file import FileStore
from .locator import BackendFactory, StorageLocator, resolve_storage
from .memory import MemoryStore

__all__ = [
    "BackendFactory",
    "FileStore",
    "MemoryStore",
    "StorageBackend",
    "StorageLocator",
    "resolve_storage",
]
