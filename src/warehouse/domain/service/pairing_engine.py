"""Domain service: Pairing Engine.

Links one available inventory unit to one unfulfilled reservation of the
same GTIN.  Oldest demand is served first, then oldest stock.

Both sides are re-read under an exclusive row lock before the link is
written, so a second run for the same trigger, or a concurrent run for
the same GTIN, can never pair a unit twice.  A lost race surfaces as
``PairingConflict`` and the caller retries later.  Finding no
counterpart is the normal steady state and returns None.
"""

from __future__ import annotations

import logging

from warehouse.domain.exceptions import PairingConflict
from warehouse.domain.model.reservation import Reservation
from warehouse.domain.repository.inventory_repository import InventoryRepository
from warehouse.domain.repository.order_line_repository import OrderLineRepository
from warehouse.domain.repository.reservation_repository import (
    ReservationRepository,
)

logger = logging.getLogger(__name__)


class PairingEngine:

    def __init__(
        self,
        reservation_repo: ReservationRepository,
        inventory_repo: InventoryRepository,
        line_repo: OrderLineRepository,
    ) -> None:
        self._reservation_repo = reservation_repo
        self._inventory_repo = inventory_repo
        self._line_repo = line_repo

    def pair_inventory(self, inventory_id: int) -> Reservation | None:
        """An inventory unit became available: find it some demand."""
        inventory = self._inventory_repo.get_for_update(inventory_id)
        if inventory is None or inventory.is_removed:
            logger.debug("Inventory #%s is gone or removed, nothing to pair", inventory_id)
            return None
        if self._reservation_repo.for_inventory(inventory_id).exists:
            logger.debug("Inventory #%s is already reserved", inventory_id)
            return None

        candidate = self._reservation_repo.oldest_unfulfilled(inventory.gtin)
        if candidate is None:
            logger.debug("No open demand for GTIN %s", inventory.gtin)
            return None

        reservation = self._reservation_repo.get_for_update(candidate.id)  # type: ignore[arg-type]
        if reservation is None or reservation.is_fulfilled:
            raise PairingConflict(
                f"Reservation #{candidate.id} was claimed while pairing inventory #{inventory_id}"
            )
        return self._link(reservation, inventory_id)

    def pair_reservation(self, reservation_id: int) -> Reservation | None:
        """A reservation became unfulfilled: find it a unit."""
        reservation = self._reservation_repo.get_for_update(reservation_id)
        if reservation is None or reservation.is_fulfilled:
            logger.debug("Reservation #%s is gone or already paired", reservation_id)
            return None

        line = self._line_repo.get_by_id(reservation.order_line_id)  # type: ignore[arg-type]
        if line is None:
            return None
        candidate = self._inventory_repo.first_available(line.gtin)
        if candidate is None:
            logger.debug("No available inventory for GTIN %s", line.gtin)
            return None

        inventory = self._inventory_repo.get_for_update(candidate.id)  # type: ignore[arg-type]
        if (
            inventory is None
            or inventory.is_removed
            or self._reservation_repo.for_inventory(candidate.id).exists  # type: ignore[arg-type]
        ):
            raise PairingConflict(
                f"Inventory #{candidate.id} was claimed while pairing reservation #{reservation_id}"
            )
        return self._link(reservation, inventory.id)  # type: ignore[arg-type]

    def _link(self, reservation: Reservation, inventory_id: int) -> Reservation:
        reservation.pair(inventory_id)
        self._reservation_repo.save(reservation)
        logger.info(
            "Paired inventory #%s to order line #%s",
            inventory_id,
            reservation.order_line_id,
        )
        return reservation
