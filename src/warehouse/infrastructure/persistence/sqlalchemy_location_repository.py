"""SQLAlchemy implementation of LocationRepository."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from warehouse.domain.model.inventory import Location
from warehouse.domain.repository.location_repository import LocationRepository
from warehouse.infrastructure.persistence.tables import LocationRow


class SqlAlchemyLocationRepository(LocationRepository):

    def __init__(self, session: Session) -> None:
        self._session = session

    def get_by_id(self, location_id: int) -> Location | None:
        row = self._session.get(LocationRow, location_id)
        return Location(id=row.id, name=row.name) if row is not None else None

    def list_all(self) -> list[Location]:
        rows = self._session.execute(select(LocationRow).order_by(LocationRow.id)).scalars()
        return [Location(id=row.id, name=row.name) for row in rows]

    def add(self, location: Location) -> None:
        row = LocationRow(name=location.name)
        self._session.add(row)
        self._session.flush()
        location.id = row.id
