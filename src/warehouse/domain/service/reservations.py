"""Domain service: the reservable capability.

Order lines and inventory units are both reservation owners.  A line
owns its reservation row outright; a unit only ever appears as the
supply side of some line's reservation.
"""

from __future__ import annotations

from warehouse.domain.model.inventory import Inventory
from warehouse.domain.model.order import Order, OrderLine
from warehouse.domain.model.reservation import Reservation
from warehouse.domain.repository.reservation_repository import (
    ReservationRepository,
)

Owner = OrderLine | Inventory


class Reservations:

    def __init__(self, reservation_repo: ReservationRepository) -> None:
        self._reservation_repo = reservation_repo

    def of(self, owner: Owner) -> Reservation:
        if isinstance(owner, OrderLine):
            return self._reservation_repo.for_line(owner.id)  # type: ignore[arg-type]
        if isinstance(owner, Inventory):
            return self._reservation_repo.for_inventory(owner.id)  # type: ignore[arg-type]
        raise TypeError(f"{type(owner).__name__} can not hold a reservation")

    def reserve(self, line: OrderLine) -> bool:
        """Make sure the line has a reservation row. Idempotent."""
        reservation = self.of(line)
        if not reservation.exists:
            self._reservation_repo.save(reservation)
        return reservation.exists

    def release(self, owner: Owner) -> int:
        """Drop the owner's reservation; return how many were released.

        Releasing a unit unpairs it and leaves the line's reservation in
        place, releasing a line deletes its row.
        """
        reservation = self.of(owner)
        if not reservation.exists:
            return 0
        if isinstance(owner, Inventory):
            reservation.unpair()
            self._reservation_repo.save(reservation)
            return 1
        return self._reservation_repo.delete(reservation)

    def is_available(self, owner: Owner) -> bool:
        return not self.of(owner).exists

    def is_reserved(self, owner: Owner) -> bool:
        return self.of(owner).exists

    def is_fulfilled(self, owner: Owner) -> bool:
        return self.of(owner).is_fulfilled

    def fulfillment(self, order: Order) -> dict[int, bool]:
        """Snapshot of line-id -> paired for every line of the order."""
        return {
            line.id: self.is_fulfilled(line)  # type: ignore[misc]
            for line in order.lines
        }
