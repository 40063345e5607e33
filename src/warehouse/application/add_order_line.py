"""Application service: Add Order Line use case.

Creating a line is a three-part write: the line, its (still empty)
reservation, and a LineCreated event for the pairing trigger.  The
event only leaves the process after the first two are committed.
"""

from __future__ import annotations

import logging

from warehouse.application.messagebus import EventDispatcher
from warehouse.application.unit_of_work import UnitOfWork
from warehouse.domain.events import LineCreated
from warehouse.domain.exceptions import EntityNotFoundError, ValidationError
from warehouse.domain.model.order import Order, OrderLine
from warehouse.domain.service.reservations import Reservations

logger = logging.getLogger(__name__)


def create_line(uow: UnitOfWork, order: Order, gtin: str | None) -> OrderLine:
    """Persist a line with its reservation inside the caller's unit of work."""
    line = OrderLine.create(order.id, gtin)  # type: ignore[arg-type]
    if not order.accepts_new_lines:
        raise ValidationError(
            f"Cannot add lines to order #{order.id} in {order.status.value} status"
        )

    uow.lines.add(line)
    Reservations(uow.reservations).reserve(line)
    uow.emit(LineCreated(line=line))
    return line


class AddOrderLineHandler:

    def __init__(self, uow: UnitOfWork, dispatcher: EventDispatcher) -> None:
        self._uow = uow
        self._dispatcher = dispatcher

    def handle(self, order_id: int, gtin: str | None) -> OrderLine:
        # Validate before opening a transaction
        OrderLine.create(order_id, gtin)

        with self._uow:
            order = self._uow.orders.get_by_id(order_id)
            if order is None:
                raise EntityNotFoundError(f"Order #{order_id} not found")

            line = create_line(self._uow, order, gtin)
            self._uow.commit()

        logger.info("Added line #%s (GTIN %s) to order #%s", line.id, line.gtin, order_id)
        self._dispatcher.publish_all(self._uow.collect_events())
        return line
