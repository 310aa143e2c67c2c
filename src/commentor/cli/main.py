"""Command line interface for commentor."""

from __future__ import annotations

import argparse
import logging
import sys

from ..config import StorageConfig
from ..exceptions import CommentorError
from ..models import Storable, resolve_storable_type, storable_types
from ..storage import resolve_storage
from .commands import run_list, run_show


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="commentor")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    storage_parent = argparse.ArgumentParser(add_help=False)
    storage_parent.add_argument(
        "--storage",
        default=None,
        help="Storage URI ('memory' or 'file://<path>'); defaults to $COMMENTOR_STORAGE",
    )

    subparsers.add_parser("list", parents=[storage_parent], help="List stored records")

    show_parser = subparsers.add_parser("show", parents=[storage_parent], help="Show one record")
    show_parser.add_argument("entity_id", type=int, help="Identifier of the record")
    show_parser.add_argument(
        "--type",
        dest="variant",
        choices=sorted(storable_types()),
        default=None,
        help="Require the record to be this variant",
    )
    show_parser.add_argument(
        "--json",
        action="store_true",
        help="Emit the stored record as JSON instead of a tree",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    try:
        config = StorageConfig.from_env()
        backend = resolve_storage(args.storage or config.storage, indent=config.indent)

        if args.command == "list":
            return run_list(backend)
        if args.command == "show":
            kind = resolve_storable_type(args.variant) if args.variant else Storable
            return run_show(backend, args.entity_id, kind, as_json=args.json)
    except CommentorError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    parser.error("Unknown command")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
