"""Application services: pairing work items.

Each handler runs one pairing attempt in its own unit of work.  When the
attempt links a unit to a line of a BACKORDER order, that order is
processed again in the same transaction so it can move back to OPEN.
"""

from __future__ import annotations

from warehouse.application.unit_of_work import UnitOfWork
from warehouse.domain.model.order import OrderStatus
from warehouse.domain.model.reservation import Reservation
from warehouse.domain.service.pairing_engine import PairingEngine
from warehouse.domain.service.reservations import Reservations


def _resettle_backorder(uow: UnitOfWork, reservation: Reservation) -> None:
    line = uow.lines.get_by_id(reservation.order_line_id)  # type: ignore[arg-type]
    if line is None:
        return
    order = uow.orders.get_by_id(line.order_id)
    if order is not None and order.status is OrderStatus.BACKORDER:
        order.process(Reservations(uow.reservations).fulfillment(order))
        uow.orders.save(order)


class PairInventoryHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, inventory_id: int) -> Reservation | None:
        with self._uow:
            engine = PairingEngine(
                self._uow.reservations, self._uow.inventory, self._uow.lines
            )
            reservation = engine.pair_inventory(inventory_id)
            if reservation is not None:
                _resettle_backorder(self._uow, reservation)
            self._uow.commit()
        return reservation


class PairLineHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, line_id: int) -> Reservation | None:
        with self._uow:
            current = self._uow.reservations.for_line(line_id)
            if not current.exists:
                # Line was deleted before the trigger arrived
                return None

            engine = PairingEngine(
                self._uow.reservations, self._uow.inventory, self._uow.lines
            )
            reservation = engine.pair_reservation(current.id)  # type: ignore[arg-type]
            if reservation is not None:
                _resettle_backorder(self._uow, reservation)
            self._uow.commit()
        return reservation
