"""SQL comment stores (SQLite file and PostgreSQL).

Both variants share one code path: ensure the `comment` table exists, then
insert one row per `save` through a pooled connection. Only the engine
differs.
"""

from __future__ import annotations

import logging
import time
from pathlib import Path

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from commentbox.models.base import Base
from commentbox.models.comment import Comment
from commentbox.models.comment_row import CommentRow
from commentbox.storage.base import CommentStore, DrainHandle, StorageError
from commentbox.storage.drain import PoolDrainHandle
from commentbox.storage.engine import (
    DEFAULT_POOL_SIZE,
    DEFAULT_POOL_TIMEOUT,
    create_postgres_engine,
    create_sqlite_engine,
)

logger = logging.getLogger(__name__)


class SqlCommentStore(CommentStore):
    """Comment store over any SQLAlchemy engine with a queue pool."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine
        self._session_factory = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
        self._ensure_schema()

    @property
    def engine(self) -> Engine:
        return self._engine

    def _ensure_schema(self) -> None:
        try:
            # CREATE TABLE IF NOT EXISTS; existing rows are never touched.
            Base.metadata.create_all(bind=self._engine, tables=[CommentRow.__table__], checkfirst=True)
        except SQLAlchemyError as exc:
            self._engine.dispose()
            raise StorageError(f"Could not prepare comment table on {self._engine.url!r}") from exc
        logger.info("Comment table ready on %r", self._engine.url)

    def save(self, comment: Comment, source_address: str) -> None:
        row = CommentRow(
            text=comment.text,
            quote=comment.quote,
            type=comment.type.value,
            created=int(time.time()),
            ip=source_address,
        )
        try:
            with self._session_factory.begin() as session:
                session.add(row)
        except (SQLAlchemyError, ValueError) as exc:
            # ValueError: the driver refused to encode a value (lone
            # surrogates for sqlite3, NUL bytes for psycopg2).
            raise StorageError() from exc

    def closer(self) -> DrainHandle:
        return PoolDrainHandle(self._engine.pool)  # type: ignore[arg-type]

    def dispose(self) -> None:
        self._engine.dispose()


class SqliteCommentStore(SqlCommentStore):
    """Embedded store backed by a SQLite file (created when missing)."""

    def __init__(
        self,
        path: str | Path,
        *,
        pool_size: int = DEFAULT_POOL_SIZE,
        pool_timeout: float = DEFAULT_POOL_TIMEOUT,
    ) -> None:
        self.path = Path(path)
        super().__init__(create_sqlite_engine(self.path, pool_size=pool_size, pool_timeout=pool_timeout))


class PostgresCommentStore(SqlCommentStore):
    """Networked store backed by a PostgreSQL server."""

    def __init__(
        self,
        database_url: str,
        *,
        pool_size: int = DEFAULT_POOL_SIZE,
        pool_timeout: float = DEFAULT_POOL_TIMEOUT,
    ) -> None:
        try:
            engine = create_postgres_engine(database_url, pool_size=pool_size, pool_timeout=pool_timeout)
        except (SQLAlchemyError, ImportError) as exc:
            raise StorageError("Could not configure PostgreSQL engine") from exc
        super().__init__(engine)
