"""Concrete asset sources and the plugin registry used to open them."""

from .archive import ZipSource
from .base import AssetInfo, AssetSource, AssetSourceAdapter, must_get_from
from .database import DatabaseSource
from .filesystem import DirectorySource
from .http import HttpSource
from .memory import MemorySource
from .registry import (
    SourcePlugin,
    clear_plugins,
    discover_plugins,
    get_plugin_for,
    iter_plugins,
    open_source,
    register_plugin,
    unregister_plugin,
)

__all__ = [
    "AssetInfo",
    "AssetSource",
    "AssetSourceAdapter",
    "DatabaseSource",
    "DirectorySource",
    "HttpSource",
    "MemorySource",
    "SourcePlugin",
    "ZipSource",
    "clear_plugins",
    "discover_plugins",
    "get_plugin_for",
    "iter_plugins",
    "must_get_from",
    "open_source",
    "register_plugin",
    "unregister_plugin",
]
