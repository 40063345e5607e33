"""Pairing worker pool.

Consumes PairInventory / PairOrderLine items.  Contention
(``PairingConflict``) is transient: the item goes back on the queue with
its attempt counter bumped until ``max_attempts`` is reached, then it is
logged and dropped.  Any other error propagates.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from concurrent.futures import ThreadPoolExecutor
from dataclasses import replace

from warehouse.application.work_items import WorkItem, WorkQueue
from warehouse.domain.exceptions import PairingConflict

logger = logging.getLogger(__name__)

WorkHandler = Callable[[WorkItem], object]


class PairingWorker:

    def __init__(
        self,
        queue: WorkQueue,
        handlers: Mapping[type, WorkHandler],
        max_attempts: int = 5,
    ) -> None:
        self._queue = queue
        self._handlers = dict(handlers)
        self._max_attempts = max_attempts

    def dispatch(self, item: WorkItem) -> None:
        """Run one item now; requeue it if it lost a race."""
        handler = self._handlers[type(item)]
        try:
            handler(item)
        except PairingConflict as exc:
            if item.attempt >= self._max_attempts:
                logger.error("Dropping %s after %d attempts: %s", item, item.attempt, exc)
                return
            logger.warning("Requeueing %s: %s", item, exc)
            self._queue.put(replace(item, attempt=item.attempt + 1))

    def run_pending(self) -> int:
        """Drain the queue in the calling thread; return items processed."""
        processed = 0
        while True:
            item = self._queue.get_nowait()
            if item is None:
                return processed
            self.dispatch(item)
            processed += 1

    def run(self, workers: int = 4) -> int:
        """Drain the queue with ``workers`` threads; return items processed."""
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="pairing") as pool:
            futures = [pool.submit(self.run_pending) for _ in range(workers)]
            return sum(future.result() for future in futures)
