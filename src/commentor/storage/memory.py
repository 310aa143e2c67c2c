"""In-memory storage backend."""

from __future__ import annotations

import logging
import threading
from typing import TypeVar

from ..exceptions import NotFoundError
from ..models import Identifier, Storable
from ..serializers import storable_from_record, storable_to_record
from .base import check_identifier

T = TypeVar("T", bound=Storable)

logger = logging.getLogger(__name__)


class MemoryStore:
    """In-memory store. Good for tests and short-lived scripts.

    Entities are kept as serialized records, so a load always returns a fresh
    object and later changes to a saved entity do not leak into the store.
    """

    def __init__(self) -> None:
        self._records: dict[Identifier, dict[str, object]] = {}
        self._last_id: Identifier = 0
        self._lock = threading.Lock()

    def save(self, entity: Storable) -> Identifier:
        record = storable_to_record(entity)
        check_identifier(entity.id)
        with self._lock:
            entity_id = entity.id or self._last_id + 1
            self._last_id = max(self._last_id, entity_id)
            record["id"] = entity_id
            self._records[entity_id] = record
        entity.id = entity_id
        logger.debug("Saved %s record %d in memory", record["type"], entity_id)
        return entity_id

    def load(self, kind: type[T], entity_id: Identifier) -> T:
        check_identifier(entity_id)
        with self._lock:
            record = self._records.get(entity_id)
        if record is None:
            raise NotFoundError(entity_id)
        return storable_from_record(record, kind, entity_id=entity_id)

    def list_ids(self) -> list[Identifier]:
        with self._lock:
            return sorted(self._records)

    def exists(self, entity_id: Identifier) -> bool:
        with self._lock:
            return check_identifier(entity_id) in self._records
