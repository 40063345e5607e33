"""Reservation: the join between one order line and at most one unit."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from warehouse.domain.exceptions import ValidationError


@dataclass
class Reservation:
    """Links demand (``order_line_id``) to supply (``inventory_id``).

    Repositories never answer "no reservation" with ``None``: they return
    an unsaved instance (``exists`` is False) carrying the owner's key.
    """

    order_line_id: int | None = None
    inventory_id: int | None = None
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def exists(self) -> bool:
        return self.id is not None

    @property
    def is_fulfilled(self) -> bool:
        return self.order_line_id is not None and self.inventory_id is not None

    def pair(self, inventory_id: int) -> None:
        if self.order_line_id is None:
            raise ValidationError("A reservation without an order line can not be paired")
        if self.inventory_id is not None:
            raise ValidationError(
                f"Reservation #{self.id} is already paired to inventory #{self.inventory_id}"
            )
        self.inventory_id = inventory_id

    def unpair(self) -> None:
        self.inventory_id = None
