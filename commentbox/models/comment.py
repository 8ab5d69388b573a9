"""Comment submission model.

A Comment is what the ingestion endpoint decodes from a request. It carries
only the submitted fields; the source address and creation time are attached
by the store when the row is written.

The stored layout with `ip` and `created` is `CommentRecord` in
`commentbox.storage.base` (`CommentRow` for the SQL table).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class CommentType(str, Enum):
    DontUnderstand = "DontUnderstand"
    NotCorrect = "NotCorrect"
    Great = "Great"
    Other = "Other"


@dataclass(frozen=True)
class Comment:
    text: str
    quote: str
    type: CommentType
