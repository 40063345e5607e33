"""Abstract repository for locations."""

from __future__ import annotations

from abc import ABC, abstractmethod

from warehouse.domain.model.inventory import Location


class LocationRepository(ABC):

    @abstractmethod
    def get_by_id(self, location_id: int) -> Location | None:
        """Return a location by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Location]:
        """Return every location."""

    @abstractmethod
    def add(self, location: Location) -> None:
        """Persist a new location and assign its ID."""
