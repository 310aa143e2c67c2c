"""File-based JSON storage backend."""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import TypeVar

from ..exceptions import BackendUnavailableError, DeserializationError, NotFoundError
from ..models import Identifier, Storable
from ..serializers import load_storable_json, save_storable_json
from .base import check_identifier, check_storable

T = TypeVar("T", bound=Storable)

logger = logging.getLogger(__name__)


class FileStore:
    """Writes each entity as ``<id>.json`` in a directory."""

    def __init__(self, directory: str | Path, *, indent: int | None = 2) -> None:
        self.directory = Path(directory)
        self.indent = indent
        self._lock = threading.Lock()
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise _unavailable(f"cannot use {self.directory} as a storage directory", exc) from exc

    def save(self, entity: Storable) -> Identifier:
        check_identifier(check_storable(entity).id)
        with self._lock:
            entity_id = entity.id or max(self.list_ids(), default=0) + 1
            stored = entity.model_copy(update={"id": entity_id})
            try:
                save_storable_json(stored, self._path(entity_id), indent=self.indent)
            except OSError as exc:
                raise _unavailable(f"failed to write record {entity_id}", exc) from exc
        entity.id = entity_id
        logger.debug("Saved %s record %d to %s", stored.type, entity_id, self.directory)
        return entity_id

    def load(self, kind: type[T], entity_id: Identifier) -> T:
        path = self._path(check_identifier(entity_id))
        try:
            entity = load_storable_json(path, kind, entity_id=entity_id)
        except FileNotFoundError:
            raise NotFoundError(entity_id) from None
        except OSError as exc:
            raise _unavailable(f"failed to read record {entity_id}", exc) from exc
        if entity.id != entity_id:
            raise DeserializationError(f"{path.name} holds a record for id {entity.id}")
        logger.debug("Loaded %s record %d from %s", entity.type, entity_id, self.directory)
        return entity

    def list_ids(self) -> list[Identifier]:
        try:
            stems = [path.stem for path in self.directory.glob("*.json")]
        except OSError as exc:
            raise _unavailable(f"cannot list {self.directory}", exc) from exc
        return sorted(int(stem) for stem in stems if _is_identifier(stem))

    def exists(self, entity_id: Identifier) -> bool:
        return self._path(check_identifier(entity_id)).is_file()

    def _path(self, entity_id: Identifier) -> Path:
        return self.directory / f"{entity_id}.json"


def _is_identifier(stem: str) -> bool:
    return stem.isdigit() and stem == str(int(stem))


def _unavailable(message: str, exc: OSError) -> BackendUnavailableError:
    logger.warning("File storage unavailable: %s (%s)", message, exc)
    return BackendUnavailableError(f"File storage unavailable: {message}: {exc}")
