"""Thread-safe in-process implementation of WorkQueue."""

from __future__ import annotations

import queue

from warehouse.application.work_items import WorkItem, WorkQueue


class InMemoryWorkQueue(WorkQueue):

    def __init__(self) -> None:
        self._queue: queue.SimpleQueue[WorkItem] = queue.SimpleQueue()

    def put(self, item: WorkItem) -> None:
        self._queue.put(item)

    def get_nowait(self) -> WorkItem | None:
        try:
            return self._queue.get_nowait()
        except queue.Empty:
            return None

    def __len__(self) -> int:
        return self._queue.qsize()
