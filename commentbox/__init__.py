"""Flask application package for the comment server."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from dotenv import find_dotenv, load_dotenv
from flask import Flask

from commentbox.storage import CommentStore


def create_app(overrides: Mapping[str, Any] | None = None, store: CommentStore | None = None) -> Flask:
    """Application factory.

    Args:
        overrides: config values applied on top of the environment config.
        store: an already built comment store; by default one is created
            from DB_BACKEND / DATABASE_URL.

    Returns:
        Configured Flask application.

    Raises:
        StorageError: the configured store could not be opened. The app is
            never returned with a non-functional store.
    """
    load_dotenv(find_dotenv(usecwd=True))

    from commentbox.config import get_config
    from commentbox.db import init_store
    from commentbox.error_handlers import register_error_handlers
    from commentbox.logging_config import configure_logging
    from commentbox.routes.comments import comments_bp
    from commentbox.routes.cors import cors_bp
    from commentbox.routes.health import health_bp
    from commentbox.routes.web import web_bp

    app = Flask(__name__, static_folder=None)
    app.config.from_object(get_config())
    if overrides:
        app.config.update(overrides)

    configure_logging(app)
    init_store(app, store)
    register_error_handlers(app)

    app.register_blueprint(cors_bp)
    app.register_blueprint(health_bp)
    app.register_blueprint(comments_bp)
    app.register_blueprint(web_bp)

    return app
