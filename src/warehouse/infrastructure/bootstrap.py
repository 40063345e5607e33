"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from dataclasses import dataclass

from warehouse.application.messagebus import EventDispatcher
from warehouse.application.pair_inventory import PairInventoryHandler, PairLineHandler
from warehouse.application.unit_of_work import UnitOfWork
from warehouse.application.work_items import PairInventory, PairOrderLine, WorkQueue
from warehouse.domain.events import Event, LineCreated
from warehouse.infrastructure.config import Settings
from warehouse.infrastructure.persistence.database import (
    build_engine,
    build_session_factory,
    shares_one_connection,
)
from warehouse.infrastructure.persistence.tables import create_schema
from warehouse.infrastructure.persistence.unit_of_work import SqlAlchemyUnitOfWork
from warehouse.infrastructure.work_queue import InMemoryWorkQueue
from warehouse.infrastructure.worker import PairingWorker

UnitOfWorkFactory = Callable[[], UnitOfWork]


@dataclass
class Services:
    uow_factory: UnitOfWorkFactory
    dispatcher: EventDispatcher
    queue: WorkQueue
    worker: PairingWorker
    settings: Settings


def sqlalchemy_uow_factory(settings: Settings) -> UnitOfWorkFactory:
    engine = build_engine(settings.database_url)
    create_schema(engine)
    session_factory = build_session_factory(engine)
    connection_lock = threading.RLock() if shares_one_connection(engine) else None
    return lambda: SqlAlchemyUnitOfWork(session_factory, connection_lock)


def bootstrap(
    uow_factory: UnitOfWorkFactory | None = None,
    queue: WorkQueue | None = None,
    settings: Settings | None = None,
) -> Services:
    settings = settings or Settings()
    uow_factory = uow_factory or sqlalchemy_uow_factory(settings)
    if queue is None:
        queue = InMemoryWorkQueue()

    worker = PairingWorker(
        queue,
        handlers={
            PairInventory: lambda item: PairInventoryHandler(uow_factory()).handle(
                item.inventory_id
            ),
            PairOrderLine: lambda item: PairLineHandler(uow_factory()).handle(
                item.line_id
            ),
        },
        max_attempts=settings.pairing_max_attempts,
    )

    def pair_new_line(event: Event) -> None:
        worker.dispatch(PairOrderLine(line_id=event.line.id))  # type: ignore[attr-defined]

    dispatcher = EventDispatcher()
    dispatcher.subscribe(LineCreated, pair_new_line)

    return Services(
        uow_factory=uow_factory,
        dispatcher=dispatcher,
        queue=queue,
        worker=worker,
        settings=settings,
    )
