"""Comment store selection and wiring into the Flask app.

One store is built per process at startup and handed to the request layer
through `app.extensions`; its drain handle is built at the same time so the
shutdown path and the app share the same handle.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from flask import Flask, current_app
from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError

from commentbox.storage import (
    CommentStore,
    DrainHandle,
    InMemoryCommentStore,
    PostgresCommentStore,
    SqliteCommentStore,
    StorageError,
)

logger = logging.getLogger(__name__)

STORE_KEY = "comment_store"
DRAIN_KEY = "comment_drain"


def create_store(config: Mapping[str, Any]) -> CommentStore:
    """Build the configured comment store.

    Raises:
        StorageError: unknown backend, unsupported URL, or the store could
            not open its database and ensure its table.
    """

    backend = str(config.get("DB_BACKEND", "sql")).lower().strip()
    if backend == "memory":
        logger.info("Using in-memory comment store")
        return InMemoryCommentStore()
    if backend != "sql":
        raise StorageError(f"Unknown DB_BACKEND {backend!r}")

    database_url = str(config["DATABASE_URL"])
    try:
        url = make_url(database_url)
    except ArgumentError as exc:
        raise StorageError("Invalid DATABASE_URL") from exc

    pool_size = int(config.get("DB_POOL_SIZE", 10))
    pool_timeout = float(config.get("DB_POOL_TIMEOUT", 30))

    if url.get_backend_name() == "sqlite":
        if not url.database or url.database == ":memory:":
            raise StorageError("SQLite comment store needs a file path")
        logger.info("Using SQLite comment store at %s", url.database)
        return SqliteCommentStore(url.database, pool_size=pool_size, pool_timeout=pool_timeout)

    if url.get_backend_name() == "postgresql":
        logger.info("Using PostgreSQL comment store at %s", url.host)
        return PostgresCommentStore(database_url, pool_size=pool_size, pool_timeout=pool_timeout)

    raise StorageError(f"Unsupported database backend {url.get_backend_name()!r}")


def init_store(app: Flask, store: CommentStore | None = None) -> CommentStore:
    """Attach a comment store and its drain handle to the app."""

    if store is None:
        store = create_store(app.config)

    app.extensions[STORE_KEY] = store
    app.extensions[DRAIN_KEY] = store.closer()
    return store


def get_store() -> CommentStore:
    """Get the comment store of the current app."""

    return get_store_for(current_app)


def get_store_for(app: Flask) -> CommentStore:
    store: CommentStore | None = app.extensions.get(STORE_KEY)
    if store is None:
        raise RuntimeError("Comment store not initialized")
    return store


def get_drain_handle(app: Flask) -> DrainHandle:
    handle: DrainHandle | None = app.extensions.get(DRAIN_KEY)
    if handle is None:
        raise RuntimeError("Comment store not initialized")
    return handle
