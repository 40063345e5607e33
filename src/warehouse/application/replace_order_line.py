"""Application service: Replace Order Line use case.

A fulfilled line is swapped for a new line of the same GTIN while its
unit is written off (damaged, missing on the shelf, ...).  The whole
sequence is one unit of work:

  1. An OPEN order is put on HOLD so nothing processes it midway.
  2. A new line with the same GTIN is created and paired on the spot.
  3. The previously paired unit is soft-removed.
  4. The replaced line is deleted through the normal delete path.
  5. A held order is processed again to settle its status.

LineCreated and LineReplaced are published once everything committed.
"""

from __future__ import annotations

import logging

from warehouse.application.add_order_line import create_line
from warehouse.application.delete_order_line import delete_line
from warehouse.application.messagebus import EventDispatcher
from warehouse.application.unit_of_work import UnitOfWork
from warehouse.domain.events import LineReplaced
from warehouse.domain.exceptions import (
    EntityNotFoundError,
    LineNotFulfilledForReplace,
    PairingConflict,
)
from warehouse.domain.model.order import OrderLine, OrderStatus
from warehouse.domain.service.pairing_engine import PairingEngine
from warehouse.domain.service.reservations import Reservations

logger = logging.getLogger(__name__)


class ReplaceOrderLineHandler:

    def __init__(self, uow: UnitOfWork, dispatcher: EventDispatcher) -> None:
        self._uow = uow
        self._dispatcher = dispatcher

    def handle(self, line_id: int) -> OrderLine:
        with self._uow:
            uow = self._uow
            reservations = Reservations(uow.reservations)

            line = uow.lines.get_by_id(line_id)
            if line is None:
                raise EntityNotFoundError(f"Order line #{line_id} not found")
            reservation = reservations.of(line)
            if not reservation.is_fulfilled:
                raise LineNotFulfilledForReplace()

            order = uow.orders.get_by_id(line.order_id)
            if order is None:
                raise EntityNotFoundError(f"Order #{line.order_id} not found")
            if order.status is OrderStatus.OPEN:
                order.hold()
                uow.orders.save(order)

            new_line = create_line(uow, order, line.gtin)
            self._pair_inline(new_line)

            superseded = uow.inventory.get_by_id(reservation.inventory_id)
            if superseded is None:
                raise EntityNotFoundError(
                    f"Inventory #{reservation.inventory_id} not found"
                )
            superseded.remove()
            uow.inventory.save(superseded)

            delete_line(uow, line)

            order.lines = uow.lines.list_for_order(line.order_id)
            if order.status is OrderStatus.HOLD:
                order.process(reservations.fulfillment(order))
                uow.orders.save(order)

            uow.emit(LineReplaced(order=order, inventory=superseded, line=new_line))
            uow.commit()

        logger.info(
            "Replaced line #%s with line #%s, inventory #%s written off",
            line_id,
            new_line.id,
            superseded.id,
        )
        self._dispatcher.publish_all(self._uow.collect_events())
        return new_line

    def _pair_inline(self, line: OrderLine) -> None:
        uow = self._uow
        engine = PairingEngine(uow.reservations, uow.inventory, uow.lines)
        try:
            with uow.savepoint():
                engine.pair_reservation(uow.reservations.for_line(line.id).id)  # type: ignore[arg-type]
        except PairingConflict:
            # LineCreated triggers another attempt after commit
            logger.warning("Inline pairing of line #%s lost a race, deferred", line.id)
