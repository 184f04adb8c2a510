"""Tests for the directory backed asset source."""

from __future__ import annotations

import os
from datetime import UTC, datetime
from pathlib import Path

import pytest

from assetrepo.errors import AssetNotFoundError, MissingAssetError
from assetrepo.sources import DirectorySource


@pytest.fixture()
def asset_root(tmp_path: Path) -> Path:
    root = tmp_path / "assets"
    (root / "textures" / "wood").mkdir(parents=True)
    (root / "empty").mkdir()
    (root / "readme.txt").write_bytes(b"hello")
    (root / "textures" / "stone.png").write_bytes(b"png-bytes")
    (root / "textures" / "wood" / "oak.png").write_bytes(b"oak")
    return root


@pytest.fixture()
def source(asset_root: Path) -> DirectorySource:
    return DirectorySource(asset_root)


def test_names_use_forward_slashes(source: DirectorySource) -> None:
    assert source.names() == [
        "readme.txt",
        "textures/stone.png",
        "textures/wood/oak.png",
    ]


def test_get_reads_file_contents(source: DirectorySource) -> None:
    assert source.get("textures/wood/oak.png") == b"oak"


def test_get_accepts_backslash_names(source: DirectorySource) -> None:
    assert source.get("textures\\stone.png") == b"png-bytes"


def test_get_missing_file_raises(source: DirectorySource) -> None:
    with pytest.raises(AssetNotFoundError, match="Asset textures/brick.png not found"):
        source.get("textures/brick.png")


def test_get_directory_raises(source: DirectorySource) -> None:
    with pytest.raises(AssetNotFoundError):
        source.get("textures")


def test_names_cannot_escape_root(source: DirectorySource, tmp_path: Path) -> None:
    (tmp_path / "secret.txt").write_bytes(b"secret")

    with pytest.raises(AssetNotFoundError):
        source.get("../secret.txt")
    with pytest.raises(AssetNotFoundError):
        source.info("../secret.txt")


def test_must_get_missing_is_fatal(source: DirectorySource) -> None:
    with pytest.raises(MissingAssetError):
        source.must_get("nothing.bin")


def test_info_reports_file_stat(source: DirectorySource, asset_root: Path) -> None:
    target = asset_root / "readme.txt"
    os.utime(target, (1_700_000_000, 1_700_000_000))

    info = source.info("readme.txt")

    assert info.name == "readme.txt"
    assert info.size == 5
    assert info.mode == target.stat().st_mode
    assert info.modified_at == datetime.fromtimestamp(1_700_000_000, UTC)
    assert not info.is_dir


def test_info_flags_directories(source: DirectorySource) -> None:
    assert source.info("textures").is_dir


def test_info_missing_raises(source: DirectorySource) -> None:
    with pytest.raises(AssetNotFoundError, match="Asset info for nope not found"):
        source.info("nope")


def test_dir_lists_real_directory_entries(source: DirectorySource) -> None:
    assert source.dir("") == ["empty", "readme.txt", "textures"]
    assert source.dir("textures/") == ["stone.png", "wood"]


def test_dir_missing_directory_raises(source: DirectorySource) -> None:
    with pytest.raises(AssetNotFoundError):
        source.dir("missing/")


def test_missing_root_has_no_names(tmp_path: Path) -> None:
    source = DirectorySource(tmp_path / "absent")

    assert source.names() == []


def test_empty_root_is_rejected() -> None:
    with pytest.raises(ValueError, match="Asset directory cannot be empty"):
        DirectorySource("  ")


def test_names_skip_symlinks_leaving_root(asset_root: Path, tmp_path: Path) -> None:
    outside = tmp_path / "outside.txt"
    outside.write_bytes(b"outside")
    (asset_root / "link.txt").symlink_to(outside)
    (asset_root / "alias.txt").symlink_to(asset_root / "readme.txt")

    source = DirectorySource(asset_root)

    assert "link.txt" not in source.names()
    assert "alias.txt" in source.names()
    for name in source.names():
        assert source.get(name)
