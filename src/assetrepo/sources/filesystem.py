"""Asset source backed by a directory tree on disk."""

from __future__ import annotations

import logging
from pathlib import Path

from ..errors import AssetNotFoundError
from ..utils.names import normalize_name
from ..utils.paths import coerce_required_path
from .base import AssetInfo, must_get_from

__all__ = ["DirectorySource"]

logger = logging.getLogger(__name__)


class DirectorySource:
    """Serve every regular file below *root* using ``/`` separated names.

    Names are relative to *root*; ``textures/wood.png`` maps to
    ``root / "textures" / "wood.png"``. The tree is scanned on every call to
    :meth:`names` so the listing reflects the directory at call time.
    """

    def __init__(self, root: str | Path) -> None:
        self._root = coerce_required_path(
            root, empty_error="Asset directory cannot be empty"
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self._root)!r})"

    @property
    def root(self) -> Path:
        """Return the resolved directory served by this source."""

        return self._root

    def get(self, name: str) -> bytes:
        path = self._resolve(name)
        if path is None or not path.is_file():
            raise AssetNotFoundError(name)
        return path.read_bytes()

    def must_get(self, name: str) -> bytes:
        return must_get_from(self, name)

    def names(self) -> list[str]:
        if not self._root.is_dir():
            logger.debug("Asset directory %s does not exist", self._root)
            return []
        names = (
            path.relative_to(self._root).as_posix()
            for path in self._root.rglob("*")
            if path.is_file()
        )
        # Symlinks pointing outside the root are not served.
        return sorted(name for name in names if self._resolve(name) is not None)

    def info(self, name: str) -> AssetInfo:
        path = self._resolve(name)
        if path is None or not path.exists():
            raise AssetNotFoundError(name, f"Asset info for {name} not found")
        stat = path.stat()
        return AssetInfo.from_timestamp(
            name,
            size=stat.st_size,
            mode=stat.st_mode,
            timestamp=stat.st_mtime,
            is_dir=path.is_dir(),
        )

    def dir(self, prefix: str) -> list[str]:
        """List the entries of the directory named by *prefix*.

        Unlike the name based listing of other sources this reflects the real
        directory, so empty subdirectories are included.
        """

        path = self._resolve(prefix)
        if path is None or not path.is_dir():
            raise AssetNotFoundError(prefix, f"Asset directory {prefix} not found")
        return sorted(child.name for child in path.iterdir())

    def _resolve(self, name: str) -> Path | None:
        relative = normalize_name(name)
        candidate = (self._root / relative).resolve()
        if candidate != self._root and not candidate.is_relative_to(self._root):
            return None
        return candidate
