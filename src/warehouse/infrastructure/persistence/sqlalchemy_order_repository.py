"""SQLAlchemy implementation of OrderRepository."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from warehouse.domain.model.order import Order, OrderLine, OrderStatus
from warehouse.domain.repository.order_repository import OrderRepository
from warehouse.infrastructure.persistence.tables import OrderLineRow, OrderRow


class SqlAlchemyOrderRepository(OrderRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    # --- OrderRepository interface --------------------------------------------

    def get_by_id(self, order_id: int, *, include_removed: bool = False) -> Order | None:
        statement = select(OrderRow).where(OrderRow.id == order_id)
        if not include_removed:
            statement = statement.where(OrderRow.removed_at.is_(None))
        row = self._session.execute(statement).scalar_one_or_none()
        return self._to_domain(row) if row is not None else None

    def list_by_status(self, status: OrderStatus) -> list[Order]:
        rows = self._session.execute(
            select(OrderRow).where(OrderRow.status == status.value).order_by(OrderRow.id)
        ).scalars()
        return [self._to_domain(row) for row in rows]

    def add(self, order: Order) -> None:
        row = OrderRow(
            status=order.status.value,
            created_at=order.created_at,
            removed_at=order.removed_at,
        )
        self._session.add(row)
        self._session.flush()
        order.id = row.id

    def save(self, order: Order) -> None:
        row = self._session.get(OrderRow, order.id)
        if row is None:
            self.add(order)
            return
        row.status = order.status.value
        row.removed_at = order.removed_at
        self._session.flush()

    # --- Mapping --------------------------------------------------------------

    def _to_domain(self, row: OrderRow) -> Order:
        lines = self._session.execute(
            select(OrderLineRow)
            .where(OrderLineRow.order_id == row.id)
            .order_by(OrderLineRow.id)
        ).scalars()
        return Order(
            id=row.id,
            status=OrderStatus(row.status),
            lines=[OrderLine(id=l.id, order_id=l.order_id, gtin=l.gtin) for l in lines],
            created_at=row.created_at,
            removed_at=row.removed_at,
        )
