"""Comment models."""

from commentbox.models.comment import Comment, CommentType
from commentbox.models.comment_row import CommentRow

__all__ = ["Comment", "CommentRow", "CommentType"]
