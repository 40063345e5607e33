"""Abstract repository for inventory units."""

from __future__ import annotations

from abc import ABC, abstractmethod

from warehouse.domain.model.inventory import Inventory


class InventoryRepository(ABC):

    @abstractmethod
    def get_by_id(self, inventory_id: int, *, include_removed: bool = False) -> Inventory | None:
        """Return a unit by ID; soft-removed units only on request."""

    @abstractmethod
    def get_for_update(self, inventory_id: int) -> Inventory | None:
        """Read and exclusively lock a unit row, removed or not.

        Raises PairingConflict if the lock is held by another writer.
        """

    @abstractmethod
    def first_available(self, gtin: str) -> Inventory | None:
        """Return the earliest-created unit of ``gtin`` that is neither
        soft-removed nor referenced by a reservation."""

    @abstractmethod
    def list_all(self, *, include_removed: bool = False) -> list[Inventory]:
        """Return units in creation order."""

    @abstractmethod
    def add(self, inventory: Inventory) -> None:
        """Persist a new unit and assign its ID."""

    @abstractmethod
    def save(self, inventory: Inventory) -> None:
        """Persist an existing unit."""
