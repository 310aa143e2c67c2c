"""Subcommand implementations."""

from __future__ import annotations

import sys

from ..exceptions import DeserializationError
from ..models import Identifier, Storable
from ..renderers import render_listing, render_record
from ..serializers import storable_to_json, storable_to_record
from ..storage import StorageBackend


def run_list(backend: StorageBackend) -> int:
    rows: list[tuple[Identifier, str]] = []
    for entity_id in backend.list_ids():
        try:
            tag = backend.load(Storable, entity_id).type
        except DeserializationError as exc:
            print(f"Warning: record {entity_id} is unreadable: {exc}", file=sys.stderr)
            tag = "<invalid>"
        rows.append((entity_id, tag))

    if not rows:
        print("No records stored.")
        return 0
    print(render_listing(rows), end="")
    return 0


def run_show(
    backend: StorageBackend,
    entity_id: Identifier,
    kind: type[Storable],
    *,
    as_json: bool,
) -> int:
    entity = backend.load(kind, entity_id)
    if as_json:
        print(storable_to_json(entity))
        return 0
    print(render_record(storable_to_record(entity)), end="")
    return 0
