"""In-memory comment store (tests and local development)."""

from __future__ import annotations

import time
from threading import Lock

from commentbox.models.comment import Comment
from commentbox.storage.base import CommentRecord, CommentStore, DrainHandle
from commentbox.storage.drain import NullDrainHandle


class InMemoryCommentStore(CommentStore):
    def __init__(self) -> None:
        self._lock = Lock()
        self._rows: list[CommentRecord] = []

    def save(self, comment: Comment, source_address: str) -> None:
        now = int(time.time())
        with self._lock:
            self._rows.append(
                CommentRecord(
                    id=len(self._rows) + 1,
                    text=comment.text,
                    quote=comment.quote,
                    type=comment.type.value,
                    created=now,
                    ip=source_address,
                )
            )

    def closer(self) -> DrainHandle:
        return NullDrainHandle()

    def rows(self) -> list[CommentRecord]:
        """Snapshot of everything saved so far, in insertion order."""

        with self._lock:
            return list(self._rows)
