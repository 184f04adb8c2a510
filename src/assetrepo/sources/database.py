"""Asset source reading blobs from a SQL database through SQLAlchemy."""

from __future__ import annotations

import logging
from datetime import UTC

from sqlalchemy import select
from sqlalchemy.engine import Engine

from ..db.models import AssetBlob, Base, create_session_factory, get_engine
from ..errors import AssetNotFoundError
from ..utils.names import list_children
from .base import AssetInfo, must_get_from

__all__ = ["DatabaseSource"]

logger = logging.getLogger(__name__)


class DatabaseSource:
    """Serve assets stored in the ``asset_blobs`` table.

    Parameters
    ----------
    engine:
        A SQLAlchemy :class:`~sqlalchemy.engine.Engine` or a database URL.
        When omitted a private in-memory SQLite database is used, which is
        mostly useful together with :meth:`create_schema` in tests.
    """

    def __init__(self, engine: Engine | str | None = None) -> None:
        if engine is None or isinstance(engine, str):
            engine = get_engine(engine)
        self._engine = engine
        self._session_factory = create_session_factory(engine)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._engine.url.render_as_string()!r})"

    @property
    def engine(self) -> Engine:
        """Return the engine used for every query."""

        return self._engine

    def create_schema(self) -> None:
        """Create the blob table when it does not exist yet."""

        Base.metadata.create_all(self._engine)
        logger.debug("Ensured asset blob schema on %s", self._engine.url)

    def get(self, name: str) -> bytes:
        with self._session_factory() as session:
            content = session.scalar(
                select(AssetBlob.content).where(AssetBlob.name == name)
            )
        if content is None:
            raise AssetNotFoundError(name)
        return content

    def must_get(self, name: str) -> bytes:
        return must_get_from(self, name)

    def names(self) -> list[str]:
        with self._session_factory() as session:
            return list(session.scalars(select(AssetBlob.name).order_by(AssetBlob.name)))

    def info(self, name: str) -> AssetInfo:
        with self._session_factory() as session:
            blob = session.get(AssetBlob, name)
            if blob is None:
                raise AssetNotFoundError(name, f"Asset info for {name} not found")
            modified_at = blob.modified_at
            if modified_at.tzinfo is None:
                # SQLite drops the offset; values are always written in UTC.
                modified_at = modified_at.replace(tzinfo=UTC)
            return AssetInfo(
                name=blob.name,
                size=len(blob.content),
                mode=blob.mode,
                modified_at=modified_at,
            )

    def dir(self, prefix: str) -> list[str]:
        return list_children(self.names(), prefix)
