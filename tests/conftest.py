"""Pytest configuration helpers for assetrepo tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure the source directory is importable without requiring an editable install.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))


@pytest.fixture(autouse=True)
def reset_repository_config(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure each test starts from an unconfigured environment."""

    from assetrepo.config import SEARCH_PATH_ENV_VAR, configure

    monkeypatch.delenv(SEARCH_PATH_ENV_VAR, raising=False)
    configure(search_paths=None)
    yield
    configure(search_paths=[])


@pytest.fixture(autouse=True)
def reset_source_plugins() -> None:
    """Keep plugins registered by one test from leaking into the next."""

    from assetrepo.sources import clear_plugins

    clear_plugins()
    yield
    clear_plugins()
