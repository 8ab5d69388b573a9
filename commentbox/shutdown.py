"""Signal-driven shutdown: drain the comment store, then exit."""

from __future__ import annotations

import logging
import signal
import sys
from collections.abc import Callable, Iterable

from commentbox.storage import CommentStore, DrainHandle

logger = logging.getLogger(__name__)

DEFAULT_SIGNALS = (signal.SIGINT, signal.SIGTERM)


def drain_and_dispose(drain: DrainHandle, store: CommentStore | None = None) -> bool:
    """Wait (bounded) for started writes, then release the pool."""

    finished = drain.finish_writes()
    if store is not None:
        store.dispose()
    return finished


def install_shutdown_handler(
    drain: DrainHandle,
    store: CommentStore | None = None,
    *,
    signals: Iterable[signal.Signals] = DEFAULT_SIGNALS,
    exit_fn: Callable[[int], object] = sys.exit,
) -> None:
    """Register handlers that drain `store` and exit with status 0.

    Must be called from the main thread. The handle is the one built at
    startup, so the signal path and the app observe the same pool.
    """

    def _shutdown(signum, frame):  # type: ignore[no-untyped-def]
        logger.info("Signal %s received, exiting...", signal.Signals(signum).name)
        drain_and_dispose(drain, store)
        exit_fn(0)

    for sig in signals:
        signal.signal(sig, _shutdown)
