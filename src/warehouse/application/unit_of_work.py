"""Unit of Work port.

Every use case runs inside one unit of work: all of its writes commit
together or not at all.  Domain events raised along the way are held
back until the commit succeeded.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager

from warehouse.domain.events import Event
from warehouse.domain.repository.inventory_repository import InventoryRepository
from warehouse.domain.repository.location_repository import LocationRepository
from warehouse.domain.repository.order_line_repository import OrderLineRepository
from warehouse.domain.repository.order_repository import OrderRepository
from warehouse.domain.repository.reservation_repository import (
    ReservationRepository,
)


class UnitOfWork(ABC):

    orders: OrderRepository
    lines: OrderLineRepository
    reservations: ReservationRepository
    inventory: InventoryRepository
    locations: LocationRepository

    def __enter__(self) -> UnitOfWork:
        self._events: list[Event] = []
        return self

    def __exit__(self, *args: object) -> None:
        # Uncommitted work never survives the block
        self.rollback()

    def commit(self) -> None:
        self._commit()

    def emit(self, event: Event) -> None:
        self._events.append(event)

    def collect_events(self) -> list[Event]:
        events, self._events = self._events, []
        return events

    @abstractmethod
    def savepoint(self) -> AbstractContextManager[None]:
        """Nested transaction, rolled back alone if its block raises."""

    @abstractmethod
    def _commit(self) -> None:
        ...

    @abstractmethod
    def rollback(self) -> None:
        ...
