"""Abstract repository for order lines."""

from __future__ import annotations

from abc import ABC, abstractmethod

from warehouse.domain.model.order import OrderLine


class OrderLineRepository(ABC):

    @abstractmethod
    def get_by_id(self, line_id: int) -> OrderLine | None:
        """Return a line by its ID, or None if not found."""

    @abstractmethod
    def list_for_order(self, order_id: int) -> list[OrderLine]:
        """Return the lines of an order in creation order."""

    @abstractmethod
    def add(self, line: OrderLine) -> None:
        """Persist a new line and assign its ID."""

    @abstractmethod
    def save(self, line: OrderLine) -> None:
        """Persist an existing line."""

    @abstractmethod
    def delete(self, line: OrderLine) -> int:
        """Hard-delete a line; return the number of rows removed."""
