"""Top-level package for the assetrepo library.

The package exposes a read-only asset lookup protocol, several concrete
asset sources, and :class:`LayeredRepository` which merges sources into a
single namespace.
"""

from __future__ import annotations

from .errors import AssetError, AssetNotFoundError, MissingAssetError
from .layered import LayeredRepository
from .sources.base import AssetInfo, AssetSource, AssetSourceAdapter

__all__ = [
    "AssetError",
    "AssetInfo",
    "AssetNotFoundError",
    "AssetSource",
    "AssetSourceAdapter",
    "LayeredRepository",
    "MissingAssetError",
    "__version__",
]

__version__ = "0.1.0"
