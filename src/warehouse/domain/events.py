"""Domain events, published only after the unit of work has committed."""

from __future__ import annotations

from dataclasses import dataclass

from warehouse.domain.model.inventory import Inventory
from warehouse.domain.model.order import Order, OrderLine


class Event:
    """Base class for all domain events."""


@dataclass(frozen=True)
class LineCreated(Event):
    line: OrderLine


@dataclass(frozen=True)
class LineReplaced(Event):
    """A fulfilled line was swapped for a fresh one.

    ``inventory`` is the superseded (now soft-removed) unit.
    """

    order: Order
    inventory: Inventory
    line: OrderLine
