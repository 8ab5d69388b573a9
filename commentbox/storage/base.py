"""Persistence port shared by every comment store.

Callers only ever hold a `CommentStore`. Whatever goes wrong inside a
backend reaches them as a single `StorageError`; the driver exception is kept
as `__cause__` for logging and is not part of the contract.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from commentbox.models.comment import Comment


class StorageError(Exception):
    """A comment could not be persisted (or a store could not be built)."""

    def __init__(self, message: str = "Comment error.") -> None:
        super().__init__(message)


@dataclass(frozen=True)
class CommentRecord:
    """One stored comment, in the same layout as the `comment` table."""

    id: int
    text: str
    quote: str
    type: str
    created: int
    ip: str


class DrainHandle(ABC):
    """Shutdown-time capability bound to one store's connection pool."""

    @abstractmethod
    def finish_writes(self) -> bool:
        """Block until writes already started appear finished, or give up.

        Returns True when quiescence was observed and False when the poll
        bound ran out first. Running out is not an error.
        """


class CommentStore(ABC):
    """Backend-agnostic comment persistence."""

    @abstractmethod
    def save(self, comment: Comment, source_address: str) -> None:
        """Durably add one row for `comment`, stamped with the current time.

        Raises:
            StorageError: the backend could not complete the write.
        """

    @abstractmethod
    def closer(self) -> DrainHandle:
        """Return a drain handle for this store. Does not stop new writes."""

    def dispose(self) -> None:
        """Release pooled connections. Called once draining is done."""
