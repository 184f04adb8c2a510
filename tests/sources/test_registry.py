"""Tests covering the source plugin registry."""

from __future__ import annotations

import zipfile
from pathlib import Path

import pytest

from assetrepo.sources import (
    AssetSource,
    DirectorySource,
    MemorySource,
    ZipSource,
    get_plugin_for,
    iter_plugins,
    open_source,
    register_plugin,
    unregister_plugin,
)
from assetrepo.sources.registry import HttpSourcePlugin


class MemoryPlugin:
    """Plugin serving ``mem://`` locations from a fixed mapping."""

    def can_open(self, location: str) -> bool:
        return location.startswith("mem://")

    def open(self, location: str) -> AssetSource:
        return MemorySource({location.removeprefix("mem://"): b"payload"})


def test_open_source_handles_directories(tmp_path: Path) -> None:
    source = open_source(tmp_path)

    assert isinstance(source, DirectorySource)
    assert source.root == tmp_path.resolve()


def test_open_source_handles_zip_archives(tmp_path: Path) -> None:
    archive = tmp_path / "pack.zip"
    with zipfile.ZipFile(archive, "w") as handle:
        handle.writestr("a.txt", b"a")

    source = open_source(str(archive))

    assert isinstance(source, ZipSource)
    assert source.get("a.txt") == b"a"


def test_http_locations_use_http_plugin() -> None:
    assert isinstance(get_plugin_for("https://cdn.example.com/assets"), HttpSourcePlugin)
    assert isinstance(get_plugin_for("http://localhost:8000/"), HttpSourcePlugin)


def test_unknown_location_raises(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match="No asset source plugin can open"):
        open_source(tmp_path / "missing")


def test_registered_plugins_take_precedence() -> None:
    plugin = register_plugin(MemoryPlugin())

    source = open_source("mem://hello.txt")

    assert iter_plugins()[0] is plugin
    assert source.get("hello.txt") == b"payload"


def test_register_plugin_is_idempotent() -> None:
    plugin = MemoryPlugin()
    register_plugin(plugin)
    register_plugin(plugin)

    assert [p for p in iter_plugins() if p is plugin] == [plugin]


def test_unregister_plugin_removes_it() -> None:
    plugin = register_plugin(MemoryPlugin())
    unregister_plugin(plugin)

    with pytest.raises(ValueError):
        open_source("mem://hello.txt")


def test_register_plugin_rejects_incompatible_objects() -> None:
    with pytest.raises(TypeError, match="SourcePlugin protocol"):
        register_plugin(object())  # type: ignore[arg-type]