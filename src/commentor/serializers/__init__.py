"""Serialization helpers."""

from .json import (
    load_storable_json,
    save_storable_json,
    storable_from_json,
    storable_from_record,
    storable_to_json,
    storable_to_record,
)

__all__ = [
    "load_storable_json",
    "save_storable_json",
    "storable_from_json",
    "storable_from_record",
    "storable_to_json",
    "storable_to_record",
]
