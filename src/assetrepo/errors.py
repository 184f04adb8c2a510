"""Exception types raised by asset sources and repositories."""

from __future__ import annotations

__all__ = ["AssetError", "AssetNotFoundError", "MissingAssetError"]


class AssetError(Exception):
    """Base class for recoverable asset lookup failures."""


class AssetNotFoundError(AssetError, LookupError):
    """Raised when an asset name cannot be resolved."""

    def __init__(self, name: str, message: str | None = None) -> None:
        super().__init__(message or f"Asset {name} not found")
        self.name = name

    def __reduce__(self):
        return (type(self), (self.name, str(self)))


class MissingAssetError(RuntimeError):
    """Raised by ``must_get`` when a required asset cannot be loaded.

    Callers use ``must_get`` when a missing asset is a programming error, so
    this type intentionally sits outside the :class:`AssetError` hierarchy
    and is not caught by handlers written for :class:`AssetNotFoundError`.
    """
