"""Application service: Fulfill Order use case.

Marks an OPEN order whose lines are all paired as FULFILLED.  From then
on its lines can no longer be deleted.
"""

from __future__ import annotations

import logging

from warehouse.application.unit_of_work import UnitOfWork
from warehouse.domain.exceptions import EntityNotFoundError
from warehouse.domain.service.reservations import Reservations

logger = logging.getLogger(__name__)


class FulfillOrderHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, order_id: int) -> None:
        with self._uow:
            order = self._uow.orders.get_by_id(order_id)
            if order is None:
                raise EntityNotFoundError(f"Order #{order_id} not found")

            order.fulfill(Reservations(self._uow.reservations).fulfillment(order))
            self._uow.orders.save(order)
            self._uow.commit()

        logger.info("Order #%s fulfilled", order_id)
