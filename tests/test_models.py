from __future__ import annotations

from typing import Literal

import pytest
from pydantic import ValidationError

from commentor.exceptions import DeserializationError
from commentor.models import Annotation, Comment, Storable, resolve_storable_type, storable_types
from commentor.storage import MemoryStore


class _Bookmark(Storable):
    type: Literal["test_bookmark"] = "test_bookmark"
    url: str = ""


def test_new_entities_are_unpersisted() -> None:
    comment = Comment(comment_text="hello")
    annotation = Annotation()

    assert comment.id == 0
    assert annotation.id == 0
    assert not comment.is_persisted
    assert comment.type == "comment"
    assert annotation.type == "annotation"


def test_negative_id_is_rejected() -> None:
    with pytest.raises(ValidationError):
        Comment(id=-1)


def test_fields_are_strictly_typed() -> None:
    with pytest.raises(ValidationError):
        Comment(comment_text=5)  # type: ignore[arg-type]


def test_base_class_cannot_be_instantiated() -> None:
    with pytest.raises(TypeError, match="concrete variant"):
        Storable(type="comment")


def test_builtin_variants_are_registered() -> None:
    registry = storable_types()
    assert registry["comment"] is Comment
    assert registry["annotation"] is Annotation
    assert Comment.tag() == "comment"
    assert Storable.tag() is None


def test_equality_is_field_for_field() -> None:
    assert Comment(id=1, comment_text="a") == Comment(id=1, comment_text="a")
    assert Comment(id=1, comment_text="a") != Comment(id=1, comment_text="b")
    assert Annotation(id=1) != Comment(id=1)


def test_new_variant_is_storable_without_backend_changes() -> None:
    assert resolve_storable_type("test_bookmark") is _Bookmark

    store = MemoryStore()
    bookmark = _Bookmark(url="https://example.com")
    bookmark_id = store.save(bookmark)

    assert store.load(_Bookmark, bookmark_id) == bookmark


def test_duplicate_tag_is_rejected() -> None:
    with pytest.raises(ValueError, match="already registered"):

        class _Impostor(Storable):
            type: Literal["comment"] = "comment"


def test_unknown_tag_raises_deserialization_error() -> None:
    with pytest.raises(DeserializationError, match="Unknown storable variant"):
        resolve_storable_type("no_such_variant")
    with pytest.raises(DeserializationError, match="must be a string"):
        resolve_storable_type(None)


def test_assignment_is_validated() -> None:
    comment = Comment(comment_text="ok")

    with pytest.raises(ValidationError):
        comment.comment_text = 123  # type: ignore[assignment]
    with pytest.raises(ValidationError):
        comment.id = -1

    assert comment.comment_text == "ok"
    assert comment.id == 0


def test_valid_assignment_survives_a_store_roundtrip() -> None:
    store = MemoryStore()
    comment = Comment(comment_text="draft")
    comment.comment_text = "edited"
    comment_id = store.save(comment)

    assert store.load(Comment, comment_id) == comment
