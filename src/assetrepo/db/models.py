"""Database schema for assets stored as blobs.

Assets live in a single ``asset_blobs`` table keyed by their name. The
library only ever reads from it; :func:`store_blob` exists so applications
and tests can seed a database before handing it to
:class:`~assetrepo.sources.database.DatabaseSource`.
"""
from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from sqlalchemy import DateTime, Integer, LargeBinary, String, create_engine, select
from sqlalchemy.engine import Engine
from sqlalchemy.orm import (
    DeclarativeBase,
    Mapped,
    Session,
    mapped_column,
    sessionmaker,
)

DEFAULT_DATABASE_URL = "sqlite+pysqlite:///:memory:"
"""Connection string used when no URL is supplied."""

DEFAULT_BLOB_MODE = 0o444


def _utcnow() -> datetime:
    return datetime.now(UTC)


class Base(DeclarativeBase):
    """Declarative base for asset blob tables."""


metadata = Base.metadata


class AssetBlob(Base):
    """Content and metadata for one named asset."""

    __tablename__ = "asset_blobs"

    name: Mapped[str] = mapped_column(String(1024), primary_key=True)
    content: Mapped[bytes] = mapped_column(LargeBinary(), nullable=False)
    mode: Mapped[int] = mapped_column(Integer, default=DEFAULT_BLOB_MODE, nullable=False)
    modified_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=_utcnow,
        onupdate=_utcnow,
        nullable=False,
    )


def get_engine(url: str | None = None, **kwargs: Any) -> Engine:
    """Return an engine for *url*, defaulting to a private in-memory database.

    Parameters
    ----------
    url:
        Database URL understood by :func:`sqlalchemy.create_engine`.
    **kwargs:
        Additional keyword arguments forwarded to ``create_engine``.
    """

    return create_engine(url or DEFAULT_DATABASE_URL, **kwargs)


def create_session_factory(
    engine: Engine,
    *,
    expire_on_commit: bool = False,
) -> sessionmaker[Session]:
    """Return a ``sessionmaker`` bound to *engine*."""

    return sessionmaker(bind=engine, expire_on_commit=expire_on_commit, autoflush=False)


def store_blob(
    session: Session,
    name: str,
    content: bytes,
    *,
    mode: int = DEFAULT_BLOB_MODE,
    modified_at: datetime | None = None,
) -> AssetBlob:
    """Insert or replace the blob stored under *name* within *session*.

    The caller owns the transaction and is expected to commit.
    """

    blob = session.scalars(select(AssetBlob).where(AssetBlob.name == name)).first()
    if blob is None:
        blob = AssetBlob(name=name, content=content, mode=mode)
        session.add(blob)
    else:
        blob.content = content
        blob.mode = mode
    if modified_at is not None:
        blob.modified_at = modified_at
    return blob


__all__ = [
    "AssetBlob",
    "Base",
    "DEFAULT_BLOB_MODE",
    "DEFAULT_DATABASE_URL",
    "create_session_factory",
    "get_engine",
    "metadata",
    "store_blob",
]
