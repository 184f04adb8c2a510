"""Registry mapping location strings to asset source factories."""

from __future__ import annotations

import logging
from importlib import metadata
from pathlib import Path
from typing import Protocol, runtime_checkable

from .archive import ZipSource
from .base import AssetSource
from .filesystem import DirectorySource
from .http import HttpSource

__all__ = [
    "ENTRY_POINT_GROUP",
    "SourcePlugin",
    "clear_plugins",
    "discover_plugins",
    "get_plugin_for",
    "iter_plugins",
    "open_source",
    "register_plugin",
    "unregister_plugin",
]

logger = logging.getLogger(__name__)

ENTRY_POINT_GROUP = "assetrepo.source_plugins"
"""Entry point group used to discover third-party source plugins."""


@runtime_checkable
class SourcePlugin(Protocol):
    """Protocol implemented by source plugins."""

    def can_open(self, location: str) -> bool:
        """Return ``True`` when this plugin understands *location*."""

    def open(self, location: str) -> AssetSource:
        """Return an asset source serving *location*."""


class HttpSourcePlugin:
    """Open ``http://`` and ``https://`` locations as :class:`HttpSource`."""

    def can_open(self, location: str) -> bool:
        return location.startswith(("http://", "https://"))

    def open(self, location: str) -> AssetSource:
        return HttpSource(location)


class ZipSourcePlugin:
    """Open existing ``.zip`` files as :class:`ZipSource`."""

    def can_open(self, location: str) -> bool:
        path = Path(location).expanduser()
        return path.suffix.lower() == ".zip" and path.is_file()

    def open(self, location: str) -> AssetSource:
        return ZipSource(location)


class DirectorySourcePlugin:
    """Open existing directories as :class:`DirectorySource`."""

    def can_open(self, location: str) -> bool:
        return Path(location).expanduser().is_dir()

    def open(self, location: str) -> AssetSource:
        return DirectorySource(location)


_BUILTIN_PLUGINS: tuple[SourcePlugin, ...] = (
    HttpSourcePlugin(),
    ZipSourcePlugin(),
    DirectorySourcePlugin(),
)

_PLUGIN_REGISTRY: list[SourcePlugin] = []
_ENTRY_POINTS_LOADED = False


def register_plugin(plugin: SourcePlugin) -> SourcePlugin:
    """Register *plugin* ahead of the built-in plugins."""

    if not isinstance(plugin, SourcePlugin):
        message = (
            "Source plugins must implement the SourcePlugin protocol; "
            f"received {type(plugin)!r}"
        )
        raise TypeError(message)

    if not any(existing is plugin for existing in _PLUGIN_REGISTRY):
        _PLUGIN_REGISTRY.append(plugin)
        logger.debug("Registered source plugin %s", plugin)

    return plugin


def unregister_plugin(plugin: SourcePlugin) -> None:
    """Remove *plugin* from the registry when present."""

    try:
        _PLUGIN_REGISTRY.remove(plugin)
    except ValueError:
        return


def clear_plugins() -> None:
    """Remove all registered plugins and reset discovery state."""

    _PLUGIN_REGISTRY.clear()
    global _ENTRY_POINTS_LOADED
    _ENTRY_POINTS_LOADED = False


def discover_plugins(force: bool = False) -> None:
    """Load plugins advertised under :data:`ENTRY_POINT_GROUP`."""

    global _ENTRY_POINTS_LOADED
    if _ENTRY_POINTS_LOADED and not force:
        return

    if force:
        clear_plugins()

    for entry_point in metadata.entry_points(group=ENTRY_POINT_GROUP):
        try:
            plugin = entry_point.load()
        except Exception:  # pragma: no cover - depends on installed packages
            logger.exception("Failed to load source plugin %s", entry_point.name)
            continue

        if isinstance(plugin, type):
            plugin = plugin()

        try:
            register_plugin(plugin)
        except TypeError:  # pragma: no cover - depends on installed packages
            logger.exception(
                "Entry point %s returned an incompatible plugin: %r",
                entry_point.name,
                plugin,
            )

    _ENTRY_POINTS_LOADED = True


def iter_plugins() -> tuple[SourcePlugin, ...]:
    """Return the registered plugins followed by the built-in ones."""

    discover_plugins()
    return (*_PLUGIN_REGISTRY, *_BUILTIN_PLUGINS)


def get_plugin_for(location: str | Path) -> SourcePlugin | None:
    """Return the first plugin able to open *location*."""

    text = str(location)
    for plugin in iter_plugins():
        if plugin.can_open(text):
            return plugin
    return None


def open_source(location: str | Path) -> AssetSource:
    """Return an asset source for *location*.

    Raises
    ------
    ValueError
        If no registered or built-in plugin accepts *location*.
    """

    plugin = get_plugin_for(location)
    if plugin is None:
        raise ValueError(f"No asset source plugin can open: {location}")
    source = plugin.open(str(location))
    logger.debug("Opened %r for %s", source, location)
    return source
