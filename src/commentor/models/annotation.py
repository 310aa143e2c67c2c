"""Annotation variant."""

from __future__ import annotations

from typing import Literal

from .storable import Storable


class Annotation(Storable):
    """Identifier-only variant. Further fields will land here."""

    type: Literal["annotation"] = "annotation"
