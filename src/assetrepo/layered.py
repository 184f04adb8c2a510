"""Merge several asset sources into a single read-only namespace."""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from .errors import AssetNotFoundError
from .sources.base import AssetInfo, AssetSource, must_get_from
from .utils.names import list_children

__all__ = ["LayeredRepository"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class _IndexView:
    """Immutable snapshot of the merged index and its sorted names."""

    index: Mapping[str, AssetSource] = field(
        default_factory=lambda: MappingProxyType({})
    )
    names: tuple[str, ...] = ()


class LayeredRepository:
    """Serve assets from an ordered stack of :class:`AssetSource` objects.

    When several sources provide the same name, the source registered first
    wins. The repository keeps a merged name index that is rebuilt from
    scratch every time a source is added; registration is expected to happen
    rarely, typically at startup.

    The repository implements the :class:`AssetSource` protocol itself, so
    repositories can be stacked inside one another.
    """

    def __init__(self, sources: Iterable[AssetSource] | None = None) -> None:
        self._sources: list[AssetSource] = list(sources or ())
        self._lock = threading.Lock()
        self._view = self._build_view(self._sources)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({len(self._sources)} sources)"

    def __contains__(self, name: object) -> bool:
        return name in self._view.index

    def __len__(self) -> int:
        return len(self._view.names)

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------
    @property
    def sources(self) -> tuple[AssetSource, ...]:
        """Return the registered sources in precedence order."""

        return tuple(self._sources)

    def add_source(self, source: AssetSource) -> None:
        """Append *source* with the lowest precedence and rebuild the index.

        When listing the names of any source fails, the error propagates and
        the repository keeps its previous sources and index.
        """

        with self._lock:
            view = self._build_view([*self._sources, source])
            self._sources.append(source)
            self._view = view
        logger.debug("Added asset source %r", source)

    def source_for(self, name: str) -> AssetSource | None:
        """Return the source that serves *name*, if any."""

        return self._view.index.get(name)

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------
    def get(self, name: str) -> bytes:
        """Return the content of *name* from the source that owns it.

        Errors raised by the owning source are propagated unchanged, even
        though the name was listed by that source.
        """

        source = self._view.index.get(name)
        if source is None:
            raise AssetNotFoundError(name)
        return source.get(name)

    def must_get(self, name: str) -> bytes:
        """Return the content of *name* or raise :class:`MissingAssetError`.

        Use this for assets the application cannot run without. The raised
        error signals a programming or packaging mistake and is not meant to
        be handled.
        """

        return must_get_from(self, name)

    def info(self, name: str) -> AssetInfo:
        """Return the metadata reported by the source that owns *name*."""

        source = self._view.index.get(name)
        if source is None:
            raise AssetNotFoundError(name, f"Asset info for {name} not found")
        return source.info(name)

    def dir(self, prefix: str) -> list[str]:
        """Return the sorted, unique first path segments below *prefix*.

        Backslashes in *prefix* are treated as ``/``. The listing is derived
        from the merged names only; the sources' own ``dir`` methods are not
        consulted. A prefix without matches yields an empty list.
        """

        return list_children(self._view.names, prefix)

    def names(self) -> list[str]:
        """Return every distinct asset name in ascending order."""

        return list(self._view.names)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _build_view(sources: list[AssetSource]) -> _IndexView:
        index: dict[str, AssetSource] = {}
        for source in sources:
            for name in source.names():
                index.setdefault(name, source)

        logger.debug("Indexed %d assets from %d sources", len(index), len(sources))
        return _IndexView(
            index=MappingProxyType(index),
            names=tuple(sorted(index)),
        )
