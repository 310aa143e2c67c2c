"""Rich-based console rendering of stored records."""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from io import StringIO

from rich.console import Console
from rich.table import Table
from rich.tree import Tree

_MAX_VALUE_LEN = 200


def render_record(record: Mapping[str, object]) -> str:
    tree = Tree(f"[{record.get('type', '?')}] #{record.get('id', '?')}")
    for key, value in record.items():
        if key in ("type", "id"):
            continue
        tree.add(f"{key}: {_format_value(value)}")
    return _export(tree)


def render_listing(rows: Sequence[tuple[int, str]]) -> str:
    """Render ``(id, variant tag)`` pairs as a two-column table."""
    table = Table(title=f"Stored records: {len(rows)}")
    table.add_column("ID", justify="right")
    table.add_column("Type")
    for entity_id, tag in rows:
        table.add_row(str(entity_id), tag)
    return _export(table)


def _export(renderable: Tree | Table) -> str:
    console = Console(record=True, width=120, markup=False, file=StringIO())
    console.print(renderable)
    return console.export_text()


def _format_value(value: object) -> str:
    """Format a field value for display, truncating large values."""
    try:
        s = json.dumps(value, ensure_ascii=False)
    except (TypeError, ValueError):
        s = str(value)
    if len(s) <= _MAX_VALUE_LEN:
        return s
    return s[:_MAX_VALUE_LEN] + "... [truncated]"
