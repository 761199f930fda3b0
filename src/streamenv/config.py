"""Loader configuration and environment overrides."""

from __future__ import annotations

from dataclasses import dataclass
import os
from typing import Mapping

DEFAULT_CHUNK_SIZE = 512
# Long enough to hold the widest BOM (UTF-32).
MIN_CHUNK_SIZE = 4

ENV_CHUNK_SIZE = "STREAMENV_CHUNK_SIZE"
ENV_STRICT = "STREAMENV_STRICT"
ENV_DISABLE_UTF_GUARDS = "STREAMENV_DISABLE_UTF_GUARDS"
ENV_MAX_BUFFER_SIZE = "STREAMENV_MAX_BUFFER_SIZE"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off", ""}


@dataclass(frozen=True)
class LoaderConfig:
    chunk_size: int = DEFAULT_CHUNK_SIZE
    strict_keys: bool = False
    utf_guards: bool = True
    max_buffer_size: int | None = None

    def __post_init__(self) -> None:
        if self.chunk_size < MIN_CHUNK_SIZE:
            raise ValueError(f"chunk_size must be >= {MIN_CHUNK_SIZE}, got {self.chunk_size}")
        if self.max_buffer_size is not None and self.max_buffer_size < self.chunk_size:
            raise ValueError("max_buffer_size must be >= chunk_size")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None, **overrides: object) -> "LoaderConfig":
        """Build a config from ``STREAMENV_*`` variables; ``overrides`` win."""
        env = os.environ if environ is None else environ
        values: dict[str, object] = {}
        if ENV_CHUNK_SIZE in env:
            values["chunk_size"] = _parse_int(ENV_CHUNK_SIZE, env[ENV_CHUNK_SIZE])
        if ENV_STRICT in env:
            values["strict_keys"] = _parse_bool(ENV_STRICT, env[ENV_STRICT])
        if ENV_DISABLE_UTF_GUARDS in env:
            values["utf_guards"] = not _parse_bool(ENV_DISABLE_UTF_GUARDS, env[ENV_DISABLE_UTF_GUARDS])
        if env.get(ENV_MAX_BUFFER_SIZE):
            values["max_buffer_size"] = _parse_int(ENV_MAX_BUFFER_SIZE, env[ENV_MAX_BUFFER_SIZE])
        values.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**values)

    def to_dict(self) -> dict:
        return {
            "chunk_size": self.chunk_size,
            "strict_keys": self.strict_keys,
            "utf_guards": self.utf_guards,
            "max_buffer_size": self.max_buffer_size,
        }


def _parse_int(name: str, raw: str) -> int:
    try:
        return int(raw.strip())
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc


def _parse_bool(name: str, raw: str) -> bool:
    lowered = raw.strip().lower()
    if lowered in _TRUTHY:
        return True
    if lowered in _FALSY:
        return False
    raise ValueError(f"{name} must be a boolean, got {raw!r}")
