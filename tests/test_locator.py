from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

import pytest

import commentor
from commentor.config import StorageConfig
from commentor.exceptions import ConfigurationError
from commentor.models import Comment
from commentor.storage import FileStore, MemoryStore, StorageBackend, StorageLocator, resolve_storage


def test_get_backend_returns_one_shared_instance() -> None:
    locator = StorageLocator(factory=MemoryStore)

    first = locator.get_backend()
    second = locator.get_backend()
    comment_id = first.save(Comment(comment_text="shared"))

    assert first is second
    assert second.load(Comment, comment_id).comment_text == "shared"


def test_factory_runs_once() -> None:
    calls: list[int] = []

    def factory() -> StorageBackend:
        calls.append(1)
        return MemoryStore()

    locator = StorageLocator(factory=factory)
    for _ in range(3):
        locator.get_backend()

    assert len(calls) == 1


def test_concurrent_first_calls_resolve_once() -> None:
    calls: list[int] = []

    def factory() -> StorageBackend:
        calls.append(1)
        return MemoryStore()

    locator = StorageLocator(factory=factory)
    with ThreadPoolExecutor(max_workers=8) as pool:
        backends = list(pool.map(lambda _: locator.get_backend(), range(32)))

    assert len(calls) == 1
    assert all(backend is backends[0] for backend in backends)


def test_register_swaps_backend() -> None:
    locator = StorageLocator(factory=MemoryStore)
    before = locator.get_backend()
    replacement = MemoryStore()

    locator.register(lambda: replacement)

    assert locator.get_backend() is replacement
    assert locator.get_backend() is not before


def test_reset_drops_cached_backend() -> None:
    locator = StorageLocator(factory=MemoryStore)
    before = locator.get_backend()
    locator.reset()
    assert locator.get_backend() is not before


def test_factory_must_return_a_backend() -> None:
    locator = StorageLocator(factory=lambda: object())  # type: ignore[arg-type,return-value]
    with pytest.raises(ConfigurationError, match="not a StorageBackend"):
        locator.get_backend()


def test_config_selects_file_store(tmp_path: Path) -> None:
    locator = StorageLocator(config=StorageConfig(storage=f"file://{tmp_path}", indent=None))
    backend = locator.get_backend()

    assert isinstance(backend, FileStore)
    assert backend.directory == tmp_path
    assert backend.indent is None


def test_environment_selects_backend(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("COMMENTOR_STORAGE", f"file://{tmp_path}")
    backend = StorageLocator().get_backend()
    assert isinstance(backend, FileStore)
    assert backend.directory == tmp_path


def test_default_is_memory() -> None:
    assert isinstance(StorageLocator().get_backend(), MemoryStore)


def test_resolve_storage_values(tmp_path: Path) -> None:
    store = MemoryStore()

    assert resolve_storage(store) is store
    assert isinstance(resolve_storage("memory"), MemoryStore)
    assert isinstance(resolve_storage(f"file://{tmp_path}"), FileStore)


@pytest.mark.parametrize("value", ["sqlite://db", "file://", ""])
def test_resolve_storage_rejects_unknown_values(value: str) -> None:
    with pytest.raises(ConfigurationError, match="Unsupported storage value"):
        resolve_storage(value)


def test_resolve_storage_rejects_non_backends() -> None:
    with pytest.raises(ConfigurationError):
        resolve_storage(42)  # type: ignore[arg-type]


def test_package_level_save_and_load() -> None:
    backend = commentor.configure(storage="memory")

    comment_id = commentor.save(Comment(comment_text="hello"))

    assert comment_id == 1
    assert commentor.get_backend() is backend
    assert commentor.load(Comment, comment_id) == Comment(id=1, comment_text="hello")


def test_package_level_backend_is_stable_across_calls() -> None:
    commentor.get_backend().save(Comment(comment_text="first"))
    assert commentor.get_backend().list_ids() == [1]
    assert commentor.get_locator() is commentor.get_locator()


def test_package_level_backend_from_environment(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("COMMENTOR_STORAGE", f"file://{tmp_path}")
    commentor.save(Comment(comment_text="env"))
    assert (tmp_path / "1.json").exists()


def test_concurrent_default_locator_access_builds_one_locator() -> None:
    with ThreadPoolExecutor(max_workers=8) as pool:
        locators = list(pool.map(lambda _: commentor.get_locator(), range(32)))
        backends = list(pool.map(lambda _: commentor.get_backend(), range(32)))

    assert all(locator is locators[0] for locator in locators)
    assert all(backend is backends[0] for backend in backends)
