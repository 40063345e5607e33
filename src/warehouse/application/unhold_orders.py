"""Application service: Unhold Orders use case.

Re-processes every order left on HOLD, e.g. after a replace was
interrupted between its hold and its final process step.
"""

from __future__ import annotations

import logging

from warehouse.application.unit_of_work import UnitOfWork
from warehouse.domain.model.order import OrderStatus
from warehouse.domain.service.reservations import Reservations

logger = logging.getLogger(__name__)


class UnholdOrdersHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self) -> list[int]:
        """Return the IDs of the orders taken off hold."""
        processed: list[int] = []
        with self._uow:
            reservations = Reservations(self._uow.reservations)
            for order in self._uow.orders.list_by_status(OrderStatus.HOLD):
                order.process(reservations.fulfillment(order))
                self._uow.orders.save(order)
                processed.append(order.id)  # type: ignore[arg-type]
            self._uow.commit()

        if processed:
            logger.info("Took %d order(s) off hold: %s", len(processed), processed)
        return processed
