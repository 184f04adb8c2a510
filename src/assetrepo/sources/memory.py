"""In-memory asset source for blobs embedded in the application."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import UTC, datetime
from types import MappingProxyType

from ..errors import AssetNotFoundError
from ..utils.names import list_children
from .base import AssetInfo, must_get_from

__all__ = ["DEFAULT_MODE", "MemorySource"]

DEFAULT_MODE = 0o444
"""Permission bits reported for embedded assets."""


class MemorySource:
    """Serve assets from a mapping of names to byte strings."""

    def __init__(
        self,
        assets: Mapping[str, bytes],
        *,
        mode: int = DEFAULT_MODE,
        modified_at: datetime | None = None,
    ) -> None:
        self._assets = MappingProxyType(dict(assets))
        self._mode = mode
        self._modified_at = modified_at or datetime.now(UTC)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({len(self._assets)} assets)"

    def get(self, name: str) -> bytes:
        try:
            return self._assets[name]
        except KeyError:
            raise AssetNotFoundError(name) from None

    def must_get(self, name: str) -> bytes:
        return must_get_from(self, name)

    def names(self) -> list[str]:
        return sorted(self._assets)

    def info(self, name: str) -> AssetInfo:
        try:
            content = self._assets[name]
        except KeyError:
            raise AssetNotFoundError(
                name, f"Asset info for {name} not found"
            ) from None
        return AssetInfo(
            name=name,
            size=len(content),
            mode=self._mode,
            modified_at=self._modified_at,
        )

    def dir(self, prefix: str) -> list[str]:
        return list_children(self._assets, prefix)
