"""Application service: Update Order Line use case.

An order line carries identity fields only, so the sole legal update is
one that changes nothing.  The check happens before anything is written.
"""

from __future__ import annotations

from warehouse.application.unit_of_work import UnitOfWork
from warehouse.domain.exceptions import EntityNotFoundError
from warehouse.domain.model.order import OrderLine


class UpdateOrderLineHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, line_id: int, **changes: object) -> OrderLine:
        with self._uow:
            line = self._uow.lines.get_by_id(line_id)
            if line is None:
                raise EntityNotFoundError(f"Order line #{line_id} not found")

            line.update(**changes)
            self._uow.lines.save(line)
            self._uow.commit()
        return line
