"""Persistable domain models."""

from .annotation import Annotation
from .comment import Comment
from .storable import Identifier, Storable, resolve_storable_type, storable_types

__all__ = [
    "Annotation",
    "Comment",
    "Identifier",
    "Storable",
    "resolve_storable_type",
    "storable_types",
]
