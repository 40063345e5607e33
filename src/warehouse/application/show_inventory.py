"""Application service: Show Inventory use case (query)."""

from __future__ import annotations

from warehouse.application.dto import InventoryUnitDTO
from warehouse.application.unit_of_work import UnitOfWork


class ShowInventoryHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, include_removed: bool = False) -> list[InventoryUnitDTO]:
        with self._uow:
            locations = {loc.id: loc.name for loc in self._uow.locations.list_all()}
            return [
                InventoryUnitDTO(
                    id=item.id,  # type: ignore[arg-type]
                    gtin=item.gtin,
                    location=locations.get(item.location_id),
                    reserved=self._uow.reservations.for_inventory(item.id).exists,  # type: ignore[arg-type]
                    removed=item.is_removed,
                )
                for item in self._uow.inventory.list_all(include_removed=include_removed)
            ]
