"""Helpers for working with ``/`` separated asset names."""

from __future__ import annotations

from collections.abc import Iterable

__all__ = ["list_children", "normalize_name", "normalize_prefix"]


def normalize_prefix(prefix: str) -> str:
    """Return *prefix* with Windows style separators converted to ``/``."""

    return prefix.replace("\\", "/")


def normalize_name(name: str) -> str:
    """Return *name* with ``/`` separators and no leading slash."""

    return normalize_prefix(name).lstrip("/")


def list_children(names: Iterable[str], prefix: str) -> list[str]:
    """Return the sorted first path segments found below *prefix*.

    Every name starting with *prefix* contributes the part of the remainder
    up to the next ``/``. The result is deduplicated, so ``a/b/c`` and
    ``a/b/d`` both yield ``b`` for the prefix ``a/``. The prefix is matched
    literally; ``"a"`` also matches ``"ab/c"`` and yields ``"b"``.
    """

    prefix = normalize_prefix(prefix)
    entries: set[str] = set()
    for name in names:
        if not name.startswith(prefix):
            continue
        entries.add(name[len(prefix):].split("/", 1)[0])
    return sorted(entries)
