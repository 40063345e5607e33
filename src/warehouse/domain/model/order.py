"""Order aggregate and its order lines.

The order status is a closed enumeration driven by an explicit transition
table.  Whether a move is legal depends only on the current status, the
requested status and, for ``process()``, a snapshot of which lines are
paired to an inventory unit.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from warehouse.domain.exceptions import (
    IllegalStatusTransition,
    ImmutableFieldMutation,
    ValidationError,
)
from warehouse.domain.model.value_objects import Gtin


class OrderStatus(Enum):
    CREATED = "created"
    OPEN = "open"
    BACKORDER = "backorder"
    FULFILLED = "fulfilled"
    HOLD = "hold"
    DELETED = "deleted"


TRANSITIONS: dict[OrderStatus, frozenset[OrderStatus]] = {
    OrderStatus.CREATED: frozenset(
        {OrderStatus.OPEN, OrderStatus.BACKORDER, OrderStatus.HOLD, OrderStatus.DELETED}
    ),
    OrderStatus.OPEN: frozenset(
        {OrderStatus.BACKORDER, OrderStatus.FULFILLED, OrderStatus.HOLD, OrderStatus.DELETED}
    ),
    OrderStatus.BACKORDER: frozenset(
        {OrderStatus.OPEN, OrderStatus.HOLD, OrderStatus.DELETED}
    ),
    OrderStatus.HOLD: frozenset(
        {OrderStatus.OPEN, OrderStatus.BACKORDER, OrderStatus.DELETED}
    ),
    OrderStatus.FULFILLED: frozenset({OrderStatus.DELETED}),
    OrderStatus.DELETED: frozenset(),
}

# Open and Fulfilled orders are externally committed
LINE_DELETABLE_STATUSES = frozenset(
    {OrderStatus.CREATED, OrderStatus.BACKORDER, OrderStatus.HOLD}
)

PROCESSABLE_STATUSES = frozenset(
    {OrderStatus.CREATED, OrderStatus.OPEN, OrderStatus.BACKORDER, OrderStatus.HOLD}
)

LINE_IDENTITY_FIELDS = ("order_id", "gtin")


def can_transition(current: OrderStatus, target: OrderStatus) -> bool:
    return target in TRANSITIONS[current]


def settled_status(fulfilled: Mapping[int, bool], lines: list[OrderLine]) -> OrderStatus:
    """Status an order settles in once every line has been evaluated."""
    if all(fulfilled.get(line.id, False) for line in lines):  # type: ignore[arg-type]
        return OrderStatus.OPEN
    return OrderStatus.BACKORDER


@dataclass
class OrderLine:
    """One unit of demand for a GTIN inside an order.

    ``order_id`` and ``gtin`` are write-once: assigning a different value
    after construction raises ``ImmutableFieldMutation``.
    """

    id: int | None
    order_id: int
    gtin: str

    def __setattr__(self, name: str, value: object) -> None:
        if (
            name in LINE_IDENTITY_FIELDS
            and name in self.__dict__
            and self.__dict__[name] != value
        ):
            raise ImmutableFieldMutation()
        super().__setattr__(name, value)

    @staticmethod
    def create(order_id: int, gtin: str | None) -> OrderLine:
        """Build a new line, rejecting a malformed GTIN before any write."""
        return OrderLine(id=None, order_id=order_id, gtin=Gtin(gtin).value)  # type: ignore[arg-type]

    def update(self, **changes: object) -> None:
        """Apply attribute changes; identity fields may only be re-set to their value."""
        for name in changes:
            if name not in LINE_IDENTITY_FIELDS:
                raise ValidationError(f"Order lines have no attribute '{name}'")
        for name, value in changes.items():
            if getattr(self, name) != value:
                raise ImmutableFieldMutation()


@dataclass
class Order:
    """Aggregate root for a customer order.

    ``lines`` is a read snapshot loaded by the repository in creation
    order; lines are persisted through their own repository.
    """

    id: int | None
    status: OrderStatus = OrderStatus.CREATED
    lines: list[OrderLine] = field(default_factory=list)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    removed_at: datetime | None = None

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def create() -> Order:
        return Order(id=None)

    # --- State transitions ----------------------------------------------------

    def transition_to(self, target: OrderStatus) -> None:
        if not can_transition(self.status, target):
            raise IllegalStatusTransition(
                f"Cannot move order #{self.id} from {self.status.value} "
                f"to {target.value}"
            )
        self.status = target

    def process(self, fulfilled: Mapping[int, bool]) -> OrderStatus:
        """Settle the status from a line-id -> paired snapshot.

        Every line paired -> OPEN, any line unpaired -> BACKORDER.
        """
        if self.status not in PROCESSABLE_STATUSES:
            raise IllegalStatusTransition(
                f"Order #{self.id} can not be processed in {self.status.value} status"
            )
        target = settled_status(fulfilled, self.lines)
        if target is not self.status:
            self.transition_to(target)
        return self.status

    def hold(self) -> None:
        self.transition_to(OrderStatus.HOLD)

    def fulfill(self, fulfilled: Mapping[int, bool]) -> None:
        """Transition OPEN -> FULFILLED once every line is paired."""
        if self.status is not OrderStatus.OPEN:
            raise IllegalStatusTransition(
                f"Cannot fulfill order #{self.id} in {self.status.value} status"
            )
        if settled_status(fulfilled, self.lines) is not OrderStatus.OPEN:
            raise ValidationError(f"Order #{self.id} has unpaired lines")
        self.transition_to(OrderStatus.FULFILLED)

    def delete(self, at: datetime | None = None) -> None:
        """Soft removal: the order stays queryable with status DELETED."""
        self.transition_to(OrderStatus.DELETED)
        self.removed_at = at or datetime.now(timezone.utc)

    # --- Computed properties --------------------------------------------------

    @property
    def is_removed(self) -> bool:
        return self.removed_at is not None

    @property
    def allows_line_deletion(self) -> bool:
        return self.status in LINE_DELETABLE_STATUSES

    @property
    def accepts_new_lines(self) -> bool:
        return self.status not in (OrderStatus.FULFILLED, OrderStatus.DELETED)
