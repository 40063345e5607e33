"""Application service: Create Order use case."""

from __future__ import annotations

import logging

from warehouse.domain.model.order import Order
from warehouse.application.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class CreateOrderHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self) -> Order:
        """Open a new, empty order in CREATED status."""
        with self._uow:
            order = Order.create()
            self._uow.orders.add(order)
            self._uow.commit()

        logger.info("Created order #%s", order.id)
        return order
