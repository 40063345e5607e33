"""Application service: Delete Order Line use case.

Deleting is gated by the owning order's status.  A paired inventory
unit is freed in the same transaction and, once committed, handed to
the pairing workers so it can serve another reservation.
"""

from __future__ import annotations

import logging

from warehouse.application.unit_of_work import UnitOfWork
from warehouse.application.work_items import PairInventory, WorkQueue
from warehouse.domain.exceptions import EntityNotFoundError, IllegalDeleteForOrderStatus
from warehouse.domain.model.order import OrderLine
from warehouse.domain.service.reservations import Reservations

logger = logging.getLogger(__name__)


def delete_line(uow: UnitOfWork, line: OrderLine) -> int | None:
    """Remove a line and its reservation inside the caller's unit of work.

    Returns the ID of the inventory unit that became available, or None
    when the line was unpaired or its unit is soft-removed.
    """
    order = uow.orders.get_by_id(line.order_id, include_removed=True)
    if order is None:
        raise EntityNotFoundError(f"Order #{line.order_id} not found")
    if not order.allows_line_deletion:
        raise IllegalDeleteForOrderStatus()

    freed_id = Reservations(uow.reservations).of(line).inventory_id
    Reservations(uow.reservations).release(line)
    uow.lines.delete(line)
    logger.info("Deleted line #%s of order #%s", line.id, line.order_id)

    if freed_id is None:
        return None
    freed = uow.inventory.get_by_id(freed_id, include_removed=True)
    if freed is None or freed.is_removed:
        return None
    return freed_id


class DeleteOrderLineHandler:

    def __init__(self, uow: UnitOfWork, queue: WorkQueue) -> None:
        self._uow = uow
        self._queue = queue

    def handle(self, line_id: int) -> bool:
        with self._uow:
            line = self._uow.lines.get_by_id(line_id)
            if line is None:
                raise EntityNotFoundError(f"Order line #{line_id} not found")

            freed_id = delete_line(self._uow, line)
            self._uow.commit()

        if freed_id is not None:
            self._queue.put(PairInventory(inventory_id=freed_id))
        return True
