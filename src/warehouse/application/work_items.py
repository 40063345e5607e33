"""Asynchronous pairing work items and the queue port they travel on.

Items are idempotent: delivering one again after it succeeded finds the
unit (or line) already paired and does nothing.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class PairInventory:
    """Re-attempt matching for one inventory unit."""

    inventory_id: int
    attempt: int = 1


@dataclass(frozen=True)
class PairOrderLine:
    """Re-attempt matching for the reservation of one order line."""

    line_id: int
    attempt: int = 1


WorkItem = PairInventory | PairOrderLine


class WorkQueue(ABC):

    @abstractmethod
    def put(self, item: WorkItem) -> None:
        """Enqueue an item for the worker pool."""

    @abstractmethod
    def get_nowait(self) -> WorkItem | None:
        """Dequeue the next item, or None when the queue is empty."""

    @abstractmethod
    def __len__(self) -> int:
        ...
