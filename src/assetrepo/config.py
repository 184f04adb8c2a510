"""Configuration helpers for building a repository from search locations."""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from .layered import LayeredRepository
from .sources.registry import open_source
from .utils.paths import split_search_path

__all__ = [
    "RepositoryConfig",
    "SEARCH_PATH_ENV_VAR",
    "build_repository",
    "configure",
    "get_config",
]

SEARCH_PATH_ENV_VAR: Final[str] = "ASSETREPO_SEARCH_PATH"
"""Environment variable listing asset locations, separated by ``;``."""


@dataclass(frozen=True, slots=True)
class RepositoryConfig:
    """Locations opened, in precedence order, by :func:`build_repository`."""

    search_paths: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        normalized = tuple(str(entry).strip() for entry in self.search_paths)
        if any(not entry for entry in normalized):
            raise ValueError("Search path entries cannot be empty")
        object.__setattr__(self, "search_paths", normalized)


_CONFIG: RepositoryConfig | None = None


def get_config() -> RepositoryConfig:
    """Return the cached :class:`RepositoryConfig` instance."""

    global _CONFIG
    if _CONFIG is None:
        _CONFIG = _build_config()
    return _CONFIG


def configure(
    *, search_paths: Iterable[str | Path] | None = None
) -> RepositoryConfig:
    """Rebuild the global configuration with optional overrides."""

    global _CONFIG
    _CONFIG = _build_config(search_paths=search_paths)
    return _CONFIG


def build_repository(config: RepositoryConfig | None = None) -> LayeredRepository:
    """Return a :class:`LayeredRepository` over the configured locations.

    Earlier search path entries take precedence over later ones.
    """

    active = config or get_config()
    return LayeredRepository(open_source(location) for location in active.search_paths)


def _build_config(
    *, search_paths: Iterable[str | Path] | None = None
) -> RepositoryConfig:
    if search_paths is not None:
        return RepositoryConfig(search_paths=tuple(str(entry) for entry in search_paths))

    env_value = os.environ.get(SEARCH_PATH_ENV_VAR)
    return RepositoryConfig(search_paths=split_search_path(env_value))
