"""Marshmallow schema for the comment submission payload."""

from __future__ import annotations

from marshmallow import EXCLUDE, Schema, fields, post_load, validate

from commentbox.models.comment import Comment, CommentType


class CommentSchema(Schema):
    """Validate a `/sendComment` payload and build a Comment."""

    class Meta:
        # Extra keys sent by older frontends are ignored, not rejected.
        unknown = EXCLUDE

    text = fields.String(required=True, validate=validate.Length(min=1))
    quote = fields.String(required=True)
    type = fields.Enum(CommentType, required=True)

    @post_load
    def _make_comment(self, data, **kwargs):  # type: ignore[no-untyped-def]
        return Comment(text=data["text"], quote=data["quote"], type=data["type"])
