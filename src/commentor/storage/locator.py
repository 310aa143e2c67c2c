"""Backend resolution: URI parsing and the storage locator."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable

from ..config import StorageConfig, parse_storage_uri
from ..exceptions import ConfigurationError
from .base import StorageBackend
from .file import FileStore
from .memory import MemoryStore

BackendFactory = Callable[[], StorageBackend]

logger = logging.getLogger(__name__)


def resolve_storage(storage: str | StorageBackend, *, indent: int | None = 2) -> StorageBackend:
    if not isinstance(storage, str):
        if not isinstance(storage, StorageBackend):
            raise ConfigurationError(f"{type(storage).__name__} is not a StorageBackend")
        return storage
    try:
        directory = parse_storage_uri(storage)
    except ValueError as exc:
        raise ConfigurationError(str(exc)) from exc
    if directory is None:
        return MemoryStore()
    return FileStore(directory, indent=indent)


class StorageLocator:
    """Resolves one backend and hands out the same instance on every call.

    The backend comes from a registered factory when there is one, otherwise
    from ``config`` (or ``StorageConfig.from_env()`` when no config was given).
    Resolution happens lazily on the first ``get_backend()`` call.
    """

    def __init__(
        self,
        factory: BackendFactory | None = None,
        config: StorageConfig | None = None,
    ) -> None:
        self._factory = factory
        self._config = config
        self._backend: StorageBackend | None = None
        self._lock = threading.Lock()

    def register(self, factory: BackendFactory) -> None:
        """Bind a factory and drop any backend resolved so far."""
        with self._lock:
            self._factory = factory
            self._backend = None

    def get_backend(self) -> StorageBackend:
        backend = self._backend
        if backend is not None:
            return backend
        with self._lock:
            if self._backend is None:
                self._backend = self._resolve()
            return self._backend

    def reset(self) -> None:
        with self._lock:
            self._backend = None

    def _resolve(self) -> StorageBackend:
        if self._factory is not None:
            backend = self._factory()
            if not isinstance(backend, StorageBackend):
                raise ConfigurationError(
                    f"Backend factory returned {type(backend).__name__}, not a StorageBackend"
                )
        else:
            config = self._config or StorageConfig.from_env()
            backend = resolve_storage(config.storage, indent=config.indent)
        logger.debug("Resolved storage backend %s", type(backend).__name__)
        return backend
