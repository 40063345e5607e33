"""SQLAlchemy implementation of ReservationRepository."""

from __future__ import annotations

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from warehouse.domain.exceptions import PairingConflict
from warehouse.domain.model.reservation import Reservation
from warehouse.domain.repository.reservation_repository import (
    ReservationRepository,
)
from warehouse.infrastructure.persistence.database import fetch_for_update
from warehouse.infrastructure.persistence.tables import OrderLineRow, ReservationRow


class SqlAlchemyReservationRepository(ReservationRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    # --- ReservationRepository interface --------------------------------------

    def for_line(self, line_id: int) -> Reservation:
        row = self._session.execute(
            select(ReservationRow).where(ReservationRow.order_line_id == line_id)
        ).scalar_one_or_none()
        return self._to_domain(row) if row is not None else Reservation(order_line_id=line_id)

    def for_inventory(self, inventory_id: int) -> Reservation:
        row = self._session.execute(
            select(ReservationRow).where(ReservationRow.inventory_id == inventory_id)
        ).scalar_one_or_none()
        return self._to_domain(row) if row is not None else Reservation(inventory_id=inventory_id)

    def get_for_update(self, reservation_id: int) -> Reservation | None:
        row = fetch_for_update(
            self._session,
            select(ReservationRow).where(ReservationRow.id == reservation_id),
        )
        return self._to_domain(row) if row is not None else None

    def oldest_unfulfilled(self, gtin: str) -> Reservation | None:
        row = self._session.execute(
            select(ReservationRow)
            .join(OrderLineRow, OrderLineRow.id == ReservationRow.order_line_id)
            .where(OrderLineRow.gtin == gtin, ReservationRow.inventory_id.is_(None))
            .order_by(ReservationRow.id)
            .limit(1)
        ).scalar_one_or_none()
        return self._to_domain(row) if row is not None else None

    def list_all(self) -> list[Reservation]:
        rows = self._session.execute(
            select(ReservationRow).order_by(ReservationRow.id)
        ).scalars()
        return [self._to_domain(row) for row in rows]

    def save(self, reservation: Reservation) -> None:
        row = (
            self._session.get(ReservationRow, reservation.id)
            if reservation.id is not None
            else None
        )
        if row is None:
            row = ReservationRow(created_at=reservation.created_at)
            self._session.add(row)
        row.order_line_id = reservation.order_line_id  # type: ignore[assignment]
        row.inventory_id = reservation.inventory_id

        try:
            self._session.flush()
        except IntegrityError as exc:
            raise PairingConflict(
                f"Reservation for line #{reservation.order_line_id} collides "
                f"with an existing one"
            ) from exc
        reservation.id = row.id

    def delete(self, reservation: Reservation) -> int:
        if reservation.id is None:
            return 0
        result = self._session.execute(
            delete(ReservationRow).where(ReservationRow.id == reservation.id)
        )
        return result.rowcount

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_domain(row: ReservationRow) -> Reservation:
        return Reservation(
            id=row.id,
            order_line_id=row.order_line_id,
            inventory_id=row.inventory_id,
            created_at=row.created_at,
        )
