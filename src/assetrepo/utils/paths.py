"""Helpers for turning user supplied locations into usable values."""

from __future__ import annotations

import os
from os import PathLike
from pathlib import Path

__all__ = ["SEARCH_PATH_SEPARATOR", "coerce_required_path", "split_search_path"]

SEARCH_PATH_SEPARATOR = ";"
"""Separator between search path entries; URLs and drive letters contain ``:``."""


def coerce_required_path(
    value: str | PathLike[str],
    *,
    empty_error: str | None = None,
) -> Path:
    """Return *value* as an absolute, resolved :class:`~pathlib.Path`.

    Parameters
    ----------
    value:
        Path-like object naming a filesystem location. ``~`` is expanded.
    empty_error:
        Message for the :class:`ValueError` raised when *value* is blank.
    """

    if isinstance(value, Path):
        candidate = value
    else:
        text = os.fspath(value).strip()
        if not text:
            raise ValueError(empty_error or "Path value cannot be empty.")
        candidate = Path(text)
    return candidate.expanduser().resolve()


def split_search_path(value: str | None) -> tuple[str, ...]:
    """Split a ``;`` separated *value* into stripped entries.

    Blank entries are dropped, so ``"a;;b"`` yields ``("a", "b")``.
    """

    if not value:
        return ()
    parts = (part.strip() for part in value.split(SEARCH_PATH_SEPARATOR))
    return tuple(part for part in parts if part)
