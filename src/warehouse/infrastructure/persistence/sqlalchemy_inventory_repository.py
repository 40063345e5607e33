"""SQLAlchemy implementation of InventoryRepository."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from warehouse.domain.model.inventory import Inventory
from warehouse.domain.repository.inventory_repository import InventoryRepository
from warehouse.infrastructure.persistence.database import fetch_for_update
from warehouse.infrastructure.persistence.tables import InventoryRow, ReservationRow


class SqlAlchemyInventoryRepository(InventoryRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    # --- InventoryRepository interface ----------------------------------------

    def get_by_id(self, inventory_id: int, *, include_removed: bool = False) -> Inventory | None:
        statement = select(InventoryRow).where(InventoryRow.id == inventory_id)
        if not include_removed:
            statement = statement.where(InventoryRow.removed_at.is_(None))
        row = self._session.execute(statement).scalar_one_or_none()
        return self._to_domain(row) if row is not None else None

    def get_for_update(self, inventory_id: int) -> Inventory | None:
        row = fetch_for_update(
            self._session,
            select(InventoryRow).where(InventoryRow.id == inventory_id),
        )
        return self._to_domain(row) if row is not None else None

    def first_available(self, gtin: str) -> Inventory | None:
        reserved = select(ReservationRow.inventory_id).where(
            ReservationRow.inventory_id.is_not(None)
        )
        row = self._session.execute(
            select(InventoryRow)
            .where(
                InventoryRow.gtin == gtin,
                InventoryRow.removed_at.is_(None),
                InventoryRow.id.not_in(reserved),
            )
            .order_by(InventoryRow.id)
            .limit(1)
        ).scalar_one_or_none()
        return self._to_domain(row) if row is not None else None

    def list_all(self, *, include_removed: bool = False) -> list[Inventory]:
        statement = select(InventoryRow).order_by(InventoryRow.id)
        if not include_removed:
            statement = statement.where(InventoryRow.removed_at.is_(None))
        return [self._to_domain(row) for row in self._session.execute(statement).scalars()]

    def add(self, inventory: Inventory) -> None:
        row = InventoryRow(
            gtin=inventory.gtin,
            location_id=inventory.location_id,
            created_at=inventory.created_at,
            removed_at=inventory.removed_at,
        )
        self._session.add(row)
        self._session.flush()
        inventory.id = row.id

    def save(self, inventory: Inventory) -> None:
        row = self._session.get(InventoryRow, inventory.id)
        if row is None:
            self.add(inventory)
            return
        row.gtin = inventory.gtin
        row.location_id = inventory.location_id
        row.removed_at = inventory.removed_at
        self._session.flush()

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_domain(row: InventoryRow) -> Inventory:
        return Inventory(
            id=row.id,
            gtin=row.gtin,
            location_id=row.location_id,
            created_at=row.created_at,
            removed_at=row.removed_at,
        )
