"""SQLAlchemy implementation of OrderLineRepository."""

from __future__ import annotations

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from warehouse.domain.model.order import OrderLine
from warehouse.domain.repository.order_line_repository import OrderLineRepository
from warehouse.infrastructure.persistence.tables import OrderLineRow


class SqlAlchemyOrderLineRepository(OrderLineRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    def get_by_id(self, line_id: int) -> OrderLine | None:
        row = self._session.get(OrderLineRow, line_id)
        return self._to_domain(row) if row is not None else None

    def list_for_order(self, order_id: int) -> list[OrderLine]:
        rows = self._session.execute(
            select(OrderLineRow)
            .where(OrderLineRow.order_id == order_id)
            .order_by(OrderLineRow.id)
        ).scalars()
        return [self._to_domain(row) for row in rows]

    def add(self, line: OrderLine) -> None:
        row = OrderLineRow(order_id=line.order_id, gtin=line.gtin)
        self._session.add(row)
        self._session.flush()
        line.id = row.id

    def save(self, line: OrderLine) -> None:
        row = self._session.get(OrderLineRow, line.id)
        if row is None:
            self.add(line)
            return
        row.order_id = line.order_id
        row.gtin = line.gtin
        self._session.flush()

    def delete(self, line: OrderLine) -> int:
        result = self._session.execute(
            delete(OrderLineRow).where(OrderLineRow.id == line.id)
        )
        return result.rowcount

    @staticmethod
    def _to_domain(row: OrderLineRow) -> OrderLine:
        return OrderLine(id=row.id, order_id=row.order_id, gtin=row.gtin)
