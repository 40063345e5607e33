"""Application service: Add Location use case."""

from __future__ import annotations

from warehouse.application.unit_of_work import UnitOfWork
from warehouse.domain.model.inventory import Location


class AddLocationHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, name: str) -> Location:
        location = Location.create(name)
        with self._uow:
            self._uow.locations.add(location)
            self._uow.commit()
        return location
