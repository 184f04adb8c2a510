"""Asset source protocol and shared building blocks."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol, runtime_checkable

from ..errors import MissingAssetError

__all__ = [
    "AssetInfo",
    "AssetSource",
    "AssetSourceAdapter",
    "must_get_from",
]


@dataclass(frozen=True, slots=True)
class AssetInfo:
    """Metadata describing a single asset as reported by its source."""

    name: str
    size: int
    mode: int
    modified_at: datetime
    is_dir: bool = False

    @classmethod
    def from_timestamp(
        cls,
        name: str,
        *,
        size: int,
        mode: int,
        timestamp: float,
        is_dir: bool = False,
    ) -> AssetInfo:
        """Build an :class:`AssetInfo` from a POSIX *timestamp*."""

        return cls(
            name=name,
            size=size,
            mode=mode,
            modified_at=datetime.fromtimestamp(timestamp, UTC),
            is_dir=is_dir,
        )


@runtime_checkable
class AssetSource(Protocol):
    """Protocol implemented by every read-only asset provider."""

    def get(self, name: str) -> bytes:
        """Return the raw content stored under *name*."""

    def must_get(self, name: str) -> bytes:
        """Return the content for *name* or raise :class:`MissingAssetError`."""

    def names(self) -> list[str]:
        """Return every asset name this source can serve."""

    def info(self, name: str) -> AssetInfo:
        """Return metadata for *name*."""

    def dir(self, prefix: str) -> list[str]:
        """Return a directory style listing for *prefix*."""


def must_get_from(source: AssetSource, name: str) -> bytes:
    """Return ``source.get(name)`` or raise :class:`MissingAssetError`.

    The error is not meant to be handled; it marks a required asset that
    could not be loaded.
    """

    try:
        return source.get(name)
    except Exception as err:
        raise MissingAssetError(f"asset: Asset({name}): {err}") from err


@dataclass(frozen=True, slots=True)
class AssetSourceAdapter:
    """Expose five plain callables through the :class:`AssetSource` protocol."""

    get_func: Callable[[str], bytes]
    must_get_func: Callable[[str], bytes]
    names_func: Callable[[], list[str]]
    info_func: Callable[[str], AssetInfo]
    dir_func: Callable[[str], list[str]]

    def get(self, name: str) -> bytes:
        return self.get_func(name)

    def must_get(self, name: str) -> bytes:
        return self.must_get_func(name)

    def names(self) -> list[str]:
        return self.names_func()

    def info(self, name: str) -> AssetInfo:
        return self.info_func(name)

    def dir(self, prefix: str) -> list[str]:
        return self.dir_func(prefix)
