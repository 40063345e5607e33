"""Application service: Show Order use case (query).

Line locations are resolved line -> reservation -> inventory -> location,
keeping soft-removed units and orders in the traversal.
"""

from __future__ import annotations

from warehouse.application.dto import OrderDTO, OrderLineDTO
from warehouse.application.unit_of_work import UnitOfWork
from warehouse.domain.exceptions import EntityNotFoundError
from warehouse.domain.model.order import Order, OrderLine


class ShowOrderHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, order_id: int) -> OrderDTO:
        with self._uow:
            order = self._uow.orders.get_by_id(order_id, include_removed=True)
            if order is None:
                raise EntityNotFoundError(f"Order #{order_id} not found")
            return self._to_dto(order)

    def _to_dto(self, order: Order) -> OrderDTO:
        return OrderDTO(
            id=order.id,  # type: ignore[arg-type]
            status=order.status.value,
            lines=[self._line_dto(line) for line in order.lines],
            created_at=order.created_at.strftime("%Y-%m-%d %H:%M UTC"),
            removed_at=(
                order.removed_at.strftime("%Y-%m-%d %H:%M UTC")
                if order.removed_at
                else None
            ),
        )

    def _line_dto(self, line: OrderLine) -> OrderLineDTO:
        reservation = self._uow.reservations.for_line(line.id)  # type: ignore[arg-type]
        location_name = None
        if reservation.inventory_id is not None:
            inventory = self._uow.inventory.get_by_id(
                reservation.inventory_id, include_removed=True
            )
            if inventory is not None:
                location = self._uow.locations.get_by_id(inventory.location_id)
                location_name = location.name if location else None

        return OrderLineDTO(
            id=line.id,  # type: ignore[arg-type]
            gtin=line.gtin,
            reserved=reservation.exists,
            fulfilled=reservation.is_fulfilled,
            inventory_id=reservation.inventory_id,
            location=location_name,
        )
