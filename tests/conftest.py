"""Shared fixtures: stores on temporary SQLite files and a Flask test client."""

from __future__ import annotations

import pytest
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from commentbox import create_app
from commentbox.models import CommentRow
from commentbox.storage import CommentRecord, InMemoryCommentStore, SqliteCommentStore

TEST_CONFIG = {
    "TESTING": True,
    "FRONTEND_PATH": None,
    "TRUST_X_FORWARDED_FOR": False,
    "CORS_ALLOW_NULL_ORIGIN": False,
}


def sql_rows(store: SqliteCommentStore) -> list[CommentRecord]:
    """Read back every row of a SQL store, oldest first."""
    with Session(store.engine) as session:
        rows = session.scalars(select(CommentRow).order_by(CommentRow.id)).all()
        return [
            CommentRecord(id=r.id, text=r.text, quote=r.quote, type=r.type, created=r.created, ip=r.ip)
            for r in rows
        ]


def sql_count(store: SqliteCommentStore) -> int:
    with Session(store.engine) as session:
        return int(session.scalar(select(func.count()).select_from(CommentRow)) or 0)


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "comments.db"


@pytest.fixture
def sqlite_store(db_path):
    store = SqliteCommentStore(db_path, pool_size=4, pool_timeout=5)
    yield store
    store.dispose()


@pytest.fixture
def memory_store():
    return InMemoryCommentStore()


@pytest.fixture
def make_client(sqlite_store):
    """Build a test client; config overrides go on top of TEST_CONFIG."""

    def _make(store=None, **overrides):
        app = create_app({**TEST_CONFIG, **overrides}, store=store or sqlite_store)
        return app.test_client()

    return _make


@pytest.fixture
def client(make_client):
    return make_client()
