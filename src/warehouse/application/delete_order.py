"""Application service: Delete Order use case.

Soft removal: the order moves to DELETED and keeps its lines for audit,
but every reservation is released.  Units freed from an unshipped order
are offered to the pairing workers; units of a FULFILLED order have left
the warehouse and are soft-removed instead.
"""

from __future__ import annotations

import logging

from warehouse.application.unit_of_work import UnitOfWork
from warehouse.application.work_items import PairInventory, WorkQueue
from warehouse.domain.exceptions import EntityNotFoundError
from warehouse.domain.model.order import OrderStatus
from warehouse.domain.service.reservations import Reservations

logger = logging.getLogger(__name__)


class DeleteOrderHandler:

    def __init__(self, uow: UnitOfWork, queue: WorkQueue) -> None:
        self._uow = uow
        self._queue = queue

    def handle(self, order_id: int) -> list[int]:
        """Return the IDs of the inventory units that became available."""
        freed: list[int] = []
        with self._uow:
            order = self._uow.orders.get_by_id(order_id)
            if order is None:
                raise EntityNotFoundError(f"Order #{order_id} not found")

            shipped = order.status is OrderStatus.FULFILLED
            order.delete()
            self._uow.orders.save(order)

            reservations = Reservations(self._uow.reservations)
            for line in order.lines:
                inventory_id = reservations.of(line).inventory_id
                reservations.release(line)
                if inventory_id is None:
                    continue
                inventory = self._uow.inventory.get_by_id(inventory_id)
                if inventory is None:
                    continue
                if shipped:
                    inventory.remove()
                    self._uow.inventory.save(inventory)
                else:
                    freed.append(inventory_id)

            self._uow.commit()

        logger.info("Deleted order #%s, freed inventory %s", order_id, freed)
        for inventory_id in freed:
            self._queue.put(PairInventory(inventory_id=inventory_id))
        return freed
