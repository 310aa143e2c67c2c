"""Configuration for storage resolution."""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError, field_validator

from .exceptions import ConfigurationError

STORAGE_ENV_VAR = "COMMENTOR_STORAGE"
INDENT_ENV_VAR = "COMMENTOR_JSON_INDENT"

_FILE_SCHEME = "file://"


def parse_storage_uri(value: str) -> Path | None:
    """Return the directory of a ``file://`` URI, or None for ``"memory"``.

    Raises ``ValueError`` for anything else.
    """
    if value == "memory":
        return None
    directory = value.removeprefix(_FILE_SCHEME)
    if value.startswith(_FILE_SCHEME) and directory:
        return Path(directory)
    raise ValueError(f"Unsupported storage value {value!r}. Use 'memory' or 'file://<path>'.")


class StorageConfig(BaseModel):
    """Validated storage configuration. Passed via DI or read from the environment.

    ``storage`` is ``"memory"`` or ``"file://<directory>"``.
    """

    storage: str = "memory"
    indent: int | None = Field(default=2, ge=0)

    @field_validator("storage")
    @classmethod
    def validate_storage(cls, value: str) -> str:
        parse_storage_uri(value)
        return value

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> StorageConfig:
        env = os.environ if environ is None else environ
        values: dict[str, object] = {}
        if STORAGE_ENV_VAR in env:
            values["storage"] = env[STORAGE_ENV_VAR].strip()
        if INDENT_ENV_VAR in env:
            raw_indent = env[INDENT_ENV_VAR].strip()
            values["indent"] = None if raw_indent.lower() in ("", "none") else raw_indent
        try:
            return cls.model_validate(values)
        except ValidationError as exc:
            raise ConfigurationError(f"Invalid storage configuration in environment: {exc}") from exc
