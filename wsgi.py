"""WSGI entrypoint for Gunicorn.

Usage:
  gunicorn -w 2 -b 0.0.0.0:8080 wsgi:app

Gunicorn owns the worker signals; each worker drains its store at exit.
"""

import atexit

from commentbox import create_app
from commentbox.db import get_drain_handle, get_store_for
from commentbox.shutdown import drain_and_dispose

app = create_app()

atexit.register(drain_and_dispose, get_drain_handle(app), get_store_for(app))
