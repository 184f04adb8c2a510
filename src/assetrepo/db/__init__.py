"""SQLAlchemy mappings and helpers for database backed asset sources."""

from .models import (
    DEFAULT_DATABASE_URL,
    AssetBlob,
    Base,
    create_session_factory,
    get_engine,
    metadata,
    store_blob,
)

__all__ = [
    "AssetBlob",
    "Base",
    "DEFAULT_DATABASE_URL",
    "create_session_factory",
    "get_engine",
    "metadata",
    "store_blob",
]
