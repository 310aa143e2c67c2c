"""Comment variant."""

from __future__ import annotations

from typing import Literal

from .storable import Storable


class Comment(Storable):
    """Free-text comment."""

    type: Literal["comment"] = "comment"
    comment_text: str = ""
