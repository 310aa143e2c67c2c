from __future__ import annotations

import pytest

import commentor
from commentor.config import INDENT_ENV_VAR, STORAGE_ENV_VAR


@pytest.fixture(autouse=True)
def _reset_default_locator(monkeypatch: pytest.MonkeyPatch) -> None:
    """Give every test a fresh default locator and a clean environment."""
    monkeypatch.delenv(STORAGE_ENV_VAR, raising=False)
    monkeypatch.delenv(INDENT_ENV_VAR, raising=False)
    commentor._reset_default_locator()
