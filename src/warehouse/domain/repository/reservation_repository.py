"""Abstract repository for reservations.

Lookups by owner return an unsaved ``Reservation`` when none exists, so
callers never branch on a missing relation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from warehouse.domain.model.reservation import Reservation


class ReservationRepository(ABC):

    @abstractmethod
    def for_line(self, line_id: int) -> Reservation:
        """Return the line's reservation, or an unsaved one for that line."""

    @abstractmethod
    def for_inventory(self, inventory_id: int) -> Reservation:
        """Return the reservation holding the unit, or an unsaved one."""

    @abstractmethod
    def get_for_update(self, reservation_id: int) -> Reservation | None:
        """Read and exclusively lock a reservation row.

        Raises PairingConflict if the lock is held by another writer.
        """

    @abstractmethod
    def oldest_unfulfilled(self, gtin: str) -> Reservation | None:
        """Return the earliest-created reservation for ``gtin`` without a unit."""

    @abstractmethod
    def list_all(self) -> list[Reservation]:
        """Return every reservation."""

    @abstractmethod
    def save(self, reservation: Reservation) -> None:
        """Insert or update a reservation, assigning its ID on insert.

        Raises PairingConflict when a uniqueness guard rejects the write.
        """

    @abstractmethod
    def delete(self, reservation: Reservation) -> int:
        """Delete a reservation; return the number of rows removed."""
