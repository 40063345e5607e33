"""Application service: Register Inventory use case.

Every registered unit is immediately offered to the pairing workers so
waiting demand for its GTIN gets served.
"""

from __future__ import annotations

import logging

from warehouse.application.unit_of_work import UnitOfWork
from warehouse.application.work_items import PairInventory, WorkQueue
from warehouse.domain.exceptions import EntityNotFoundError
from warehouse.domain.model.inventory import Inventory

logger = logging.getLogger(__name__)


class RegisterInventoryHandler:

    def __init__(self, uow: UnitOfWork, queue: WorkQueue) -> None:
        self._uow = uow
        self._queue = queue

    def handle(self, location_id: int, gtin: str | None) -> Inventory:
        inventory = Inventory.create(location_id, gtin)

        with self._uow:
            if self._uow.locations.get_by_id(location_id) is None:
                raise EntityNotFoundError(f"Location #{location_id} not found")
            self._uow.inventory.add(inventory)
            self._uow.commit()

        logger.info(
            "Registered inventory #%s (GTIN %s) at location #%s",
            inventory.id,
            inventory.gtin,
            location_id,
        )
        self._queue.put(PairInventory(inventory_id=inventory.id))  # type: ignore[arg-type]
        return inventory
