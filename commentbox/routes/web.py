"""Frontend asset routes."""

from __future__ import annotations

from pathlib import Path

from flask import Blueprint, Response, current_app, send_from_directory

from commentbox.errors import NotFoundError

web_bp = Blueprint("web", __name__)


def _frontend_dir() -> Path:
    path = current_app.config.get("FRONTEND_PATH")
    if not path:
        raise NotFoundError()
    return Path(path).resolve()


@web_bp.get("/")
def index() -> Response:
    return send_from_directory(_frontend_dir(), "index.html", mimetype="text/html")


@web_bp.get("/<path:filename>")
def asset(filename: str) -> Response:
    return send_from_directory(_frontend_dir(), filename)
