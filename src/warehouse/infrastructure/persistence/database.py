"""Engine and session plumbing shared by the SQLAlchemy repositories."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from sqlalchemy import Select, create_engine, event
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from warehouse.domain.exceptions import PairingConflict

# Driver messages for a lock another transaction holds (SQLite, PostgreSQL)
_CONTENTION_MARKERS = (
    "database is locked",
    "database table is locked",
    "could not obtain lock",
    "lock not available",
    "deadlock detected",
    "could not serialize access",
)


def build_engine(database_url: str) -> Engine:
    url = make_url(database_url)
    if url.get_backend_name() != "sqlite":
        return create_engine(url, pool_pre_ping=True)

    if url.database in (None, "", ":memory:"):
        engine = create_engine(
            url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    else:
        Path(url.database).parent.mkdir(parents=True, exist_ok=True)
        engine = create_engine(
            url, connect_args={"check_same_thread": False, "timeout": 30}
        )

    # pysqlite defers BEGIN on its own, which breaks SAVEPOINT; emit it ourselves.
    # IMMEDIATE takes the write lock up front so two writers never both read
    # and then race to upgrade.
    @event.listens_for(engine, "connect")
    def _disable_pysqlite_transactions(dbapi_connection: Any, _record: Any) -> None:
        dbapi_connection.isolation_level = None

    @event.listens_for(engine, "begin")
    def _emit_begin(connection: Any) -> None:
        connection.exec_driver_sql("BEGIN IMMEDIATE")

    return engine


def shares_one_connection(engine: Engine) -> bool:
    """True when every session of ``engine`` runs on the same DBAPI connection."""
    return isinstance(engine.pool, StaticPool)


def build_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


def is_contention(exc: OperationalError) -> bool:
    message = str(exc.orig).lower()
    return any(marker in message for marker in _CONTENTION_MARKERS)


def fetch_for_update(session: Session, statement: Select[Any]) -> Any:
    """Run ``statement`` as SELECT ... FOR UPDATE NOWAIT; return one row or None.

    SQLite has no row locks and ignores the clause; every transaction
    already holds its write lock from BEGIN IMMEDIATE.
    """
    try:
        return session.execute(
            statement.with_for_update(nowait=True).execution_options(
                populate_existing=True
            )
        ).scalar_one_or_none()
    except OperationalError as exc:
        if not is_contention(exc):
            raise
        raise PairingConflict(f"Row lock not available: {exc.orig}") from exc
