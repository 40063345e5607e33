"""Inventory units and the locations that hold them.

Every unit is one physical item.  Consuming or superseding a unit is a
soft removal: ``removed_at`` is set and the row stays queryable for
audit and location lookups.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from warehouse.domain.exceptions import ValidationError
from warehouse.domain.model.value_objects import Gtin


@dataclass
class Location:
    id: int | None
    name: str

    @staticmethod
    def create(name: str) -> Location:
        if not name or not name.strip():
            raise ValidationError("Location name is required")
        return Location(id=None, name=name.strip())


@dataclass
class Inventory:
    """A single physical unit of a product, identified by its GTIN."""

    id: int | None
    gtin: str
    location_id: int
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    removed_at: datetime | None = None

    @staticmethod
    def create(location_id: int, gtin: str | None) -> Inventory:
        return Inventory(id=None, gtin=Gtin(gtin).value, location_id=location_id)  # type: ignore[arg-type]

    @property
    def is_removed(self) -> bool:
        return self.removed_at is not None

    def remove(self, at: datetime | None = None) -> None:
        """Soft-remove the unit; removing twice keeps the first timestamp."""
        if self.removed_at is None:
            self.removed_at = at or datetime.now(timezone.utc)
