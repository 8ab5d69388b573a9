"""Drain handles used on shutdown.

Quiescence is inferred from pool occupancy: once every connection the pool
has handed out is back, no write is assumed to be in flight. A connection can
look idle while a response is still being written, and nothing stops new
writes from starting during the drain, so this is a bounded best effort and
not a barrier.
"""

from __future__ import annotations

import logging
import time
from typing import Callable

from sqlalchemy.pool import QueuePool

from commentbox.storage.base import DrainHandle

logger = logging.getLogger(__name__)

POLL_INTERVAL_SECONDS = 0.1
MAX_POLLS = 30


def pool_occupancy(pool: QueuePool) -> tuple[int, int]:
    """Return (total, idle) connection counts for a queue pool."""

    idle = int(pool.checkedin())
    busy = int(pool.checkedout())
    return idle + busy, idle


class NullDrainHandle(DrainHandle):
    """Nothing to wait for."""

    def finish_writes(self) -> bool:
        return True


class PoolDrainHandle(DrainHandle):
    """Polls a connection pool until all of its connections are idle."""

    def __init__(
        self,
        pool: QueuePool,
        *,
        interval: float = POLL_INTERVAL_SECONDS,
        max_polls: int = MAX_POLLS,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._pool = pool
        self._interval = interval
        self._max_polls = max_polls
        self._sleep = sleep

    def finish_writes(self) -> bool:
        polls = 0
        total, idle = pool_occupancy(self._pool)
        while total != idle and polls < self._max_polls:
            polls += 1
            self._sleep(self._interval)
            total, idle = pool_occupancy(self._pool)

        if total != idle:
            logger.warning(
                "Drain gave up after %d polls with %d of %d connections busy",
                polls,
                total - idle,
                total,
            )
            return False

        logger.info("Drain complete after %d polls", polls)
        return True
