"""SQLAlchemy-backed Unit of Work: one session, one transaction."""

from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager
from types import TracebackType

from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session, sessionmaker

from warehouse.application.unit_of_work import UnitOfWork
from warehouse.domain.exceptions import PairingConflict
from warehouse.infrastructure.persistence.database import is_contention
from warehouse.infrastructure.persistence.sqlalchemy_inventory_repository import (
    SqlAlchemyInventoryRepository,
)
from warehouse.infrastructure.persistence.sqlalchemy_location_repository import (
    SqlAlchemyLocationRepository,
)
from warehouse.infrastructure.persistence.sqlalchemy_order_line_repository import (
    SqlAlchemyOrderLineRepository,
)
from warehouse.infrastructure.persistence.sqlalchemy_order_repository import (
    SqlAlchemyOrderRepository,
)
from warehouse.infrastructure.persistence.sqlalchemy_reservation_repository import (
    SqlAlchemyReservationRepository,
)


class SqlAlchemyUnitOfWork(UnitOfWork):
    """Session-per-use-case unit of work.

    ``connection_lock`` serialises units of work that share a single DBAPI
    connection (in-memory SQLite); one connection can only carry one
    transaction at a time.  A lock or busy error from the database is
    raised as ``PairingConflict`` so the caller can retry.
    """

    def __init__(
        self,
        session_factory: sessionmaker[Session],
        connection_lock: threading.RLock | None = None,
    ) -> None:
        self._session_factory = session_factory
        self._connection_lock = connection_lock

    def __enter__(self) -> UnitOfWork:
        if self._connection_lock is not None:
            self._connection_lock.acquire()
        self._session = self._session_factory()
        self.orders = SqlAlchemyOrderRepository(self._session)
        self.lines = SqlAlchemyOrderLineRepository(self._session)
        self.reservations = SqlAlchemyReservationRepository(self._session)
        self.inventory = SqlAlchemyInventoryRepository(self._session)
        self.locations = SqlAlchemyLocationRepository(self._session)
        return super().__enter__()

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        try:
            super().__exit__(exc_type, exc, tb)
            self._session.close()
        finally:
            if self._connection_lock is not None:
                self._connection_lock.release()
        if isinstance(exc, OperationalError) and is_contention(exc):
            raise PairingConflict(f"Database busy: {exc.orig}") from exc

    @contextmanager
    def savepoint(self) -> Iterator[None]:
        with self._session.begin_nested():
            yield

    def _commit(self) -> None:
        self._session.commit()

    def rollback(self) -> None:
        self._session.rollback()
