"""Asset source backed by a zip archive."""

from __future__ import annotations

import zipfile
from datetime import UTC, datetime
from pathlib import Path

from ..errors import AssetNotFoundError
from ..utils.names import list_children
from ..utils.paths import coerce_required_path
from .base import AssetInfo, must_get_from

__all__ = ["ZipSource"]

_DEFAULT_MODE = 0o444


class ZipSource:
    """Serve the file members of a zip archive.

    The archive is reopened for each call; nothing is held open between
    lookups, so the source can be shared freely.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = coerce_required_path(path, empty_error="Archive path cannot be empty")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self._path)!r})"

    @property
    def path(self) -> Path:
        """Return the location of the archive."""

        return self._path

    def get(self, name: str) -> bytes:
        with zipfile.ZipFile(self._path) as archive:
            try:
                member = archive.getinfo(name)
            except KeyError:
                raise AssetNotFoundError(name) from None
            if member.is_dir():
                raise AssetNotFoundError(name)
            return archive.read(member)

    def must_get(self, name: str) -> bytes:
        return must_get_from(self, name)

    def names(self) -> list[str]:
        with zipfile.ZipFile(self._path) as archive:
            return sorted(
                member.filename for member in archive.infolist() if not member.is_dir()
            )

    def info(self, name: str) -> AssetInfo:
        with zipfile.ZipFile(self._path) as archive:
            try:
                member = archive.getinfo(name)
            except KeyError:
                raise AssetNotFoundError(
                    name, f"Asset info for {name} not found"
                ) from None
        return AssetInfo(
            name=name,
            size=member.file_size,
            mode=(member.external_attr >> 16) or _DEFAULT_MODE,
            modified_at=datetime(*member.date_time, tzinfo=UTC),
            is_dir=member.is_dir(),
        )

    def dir(self, prefix: str) -> list[str]:
        return list_children(self.names(), prefix)
