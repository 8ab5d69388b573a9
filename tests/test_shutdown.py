"""Signal-driven shutdown."""

import signal

import pytest

from commentbox import create_app
from commentbox.db import get_drain_handle
from commentbox.models import Comment, CommentType
from commentbox.shutdown import drain_and_dispose, install_shutdown_handler
from commentbox.storage import DrainHandle, SqliteCommentStore
from tests.conftest import TEST_CONFIG, sql_count


class RecordingDrain(DrainHandle):
    def __init__(self, events):
        self.events = events

    def finish_writes(self):
        self.events.append("drain")
        return True


@pytest.fixture
def restore_sigterm():
    previous = signal.getsignal(signal.SIGTERM)
    yield
    signal.signal(signal.SIGTERM, previous)


class TestShutdownHandler:
    def test_drains_then_exits_zero(self, memory_store, restore_sigterm):
        events = []
        install_shutdown_handler(
            RecordingDrain(events),
            memory_store,
            signals=[signal.SIGTERM],
            exit_fn=lambda code: events.append(("exit", code)),
        )

        handler = signal.getsignal(signal.SIGTERM)
        handler(signal.SIGTERM, None)

        assert events == ["drain", ("exit", 0)]

    def test_app_drain_handle_is_shared(self, sqlite_store):
        app = create_app(TEST_CONFIG, store=sqlite_store)
        assert get_drain_handle(app) is get_drain_handle(app)
        assert get_drain_handle(app).finish_writes() is True

    def test_drain_and_dispose_keeps_written_rows(self, db_path):
        store = SqliteCommentStore(db_path)
        store.save(Comment(text="before exit", quote="", type=CommentType.Great), "10.0.0.1")
        assert drain_and_dispose(store.closer(), store) is True

        reopened = SqliteCommentStore(db_path)
        try:
            assert sql_count(reopened) == 1
        finally:
            reopened.dispose()
