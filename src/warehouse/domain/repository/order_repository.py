"""Abstract repository for Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from warehouse.domain.model.order import Order, OrderStatus


class OrderRepository(ABC):

    @abstractmethod
    def get_by_id(self, order_id: int, *, include_removed: bool = False) -> Order | None:
        """Return an order with its lines loaded, or None if not found."""

    @abstractmethod
    def list_by_status(self, status: OrderStatus) -> list[Order]:
        """Return every order currently in ``status``, oldest first."""

    @abstractmethod
    def add(self, order: Order) -> None:
        """Persist a new order and assign its ID."""

    @abstractmethod
    def save(self, order: Order) -> None:
        """Persist status and removal timestamp of an existing order."""
