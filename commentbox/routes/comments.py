"""Comment ingestion route. No storage logic here."""

from __future__ import annotations

from flask import Blueprint, current_app, request

from commentbox.db import get_store
from commentbox.schemas.comment import CommentSchema
from commentbox.utils.responses import allow_null_origin_post, ok

comments_bp = Blueprint("comments", __name__)

_comment_schema = CommentSchema()


def source_address() -> str:
    """Peer address, or X-Forwarded-For when running behind a trusted proxy."""

    peer = request.remote_addr or ""
    if current_app.config.get("TRUST_X_FORWARDED_FOR"):
        return request.headers.get("X-Forwarded-For") or peer
    return peer


@comments_bp.post("/sendComment")
def send_comment():
    """Store one feedback comment."""

    payload = request.get_json(silent=True) or {}
    comment = _comment_schema.load(payload)

    # StorageError propagates to the central handler (500).
    get_store().save(comment, source_address())
    return ok({"status": "ok"})


@comments_bp.after_request
def _cors(response):  # type: ignore[no-untyped-def]
    if current_app.config.get("CORS_ALLOW_NULL_ORIGIN"):
        return allow_null_origin_post(response)
    return response
