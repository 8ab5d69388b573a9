"""Comment persistence: the store port, its backends and drain handles."""

from commentbox.storage.base import CommentRecord, CommentStore, DrainHandle, StorageError
from commentbox.storage.drain import NullDrainHandle, PoolDrainHandle
from commentbox.storage.memory import InMemoryCommentStore
from commentbox.storage.sql import PostgresCommentStore, SqlCommentStore, SqliteCommentStore

__all__ = [
    "CommentRecord",
    "CommentStore",
    "DrainHandle",
    "InMemoryCommentStore",
    "NullDrainHandle",
    "PoolDrainHandle",
    "PostgresCommentStore",
    "SqlCommentStore",
    "SqliteCommentStore",
    "StorageError",
]
