"""CORS preflight handling."""

from __future__ import annotations

from flask import Blueprint, Response, current_app, request

from commentbox.utils.responses import allow_null_origin_post

cors_bp = Blueprint("cors", __name__)


@cors_bp.before_app_request
def _preflight():  # type: ignore[no-untyped-def]
    if request.method != "OPTIONS":
        return None

    response = Response(status=204)
    if current_app.config.get("CORS_ALLOW_NULL_ORIGIN") and request.headers.get("Origin") == "null":
        allow_null_origin_post(response)
    return response
