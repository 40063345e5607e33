"""Application service: Process Order use case.

Evaluates every line of the order: all paired -> OPEN, otherwise
BACKORDER.
"""

from __future__ import annotations

import logging

from warehouse.application.unit_of_work import UnitOfWork
from warehouse.domain.exceptions import EntityNotFoundError
from warehouse.domain.model.order import OrderStatus
from warehouse.domain.service.reservations import Reservations

logger = logging.getLogger(__name__)


class ProcessOrderHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, order_id: int) -> OrderStatus:
        with self._uow:
            order = self._uow.orders.get_by_id(order_id)
            if order is None:
                raise EntityNotFoundError(f"Order #{order_id} not found")

            status = order.process(Reservations(self._uow.reservations).fulfillment(order))
            self._uow.orders.save(order)
            self._uow.commit()

        logger.info("Processed order #%s -> %s", order_id, status.value)
        return status
