"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class OrderLineDTO:
    """Output: a single order line with its pairing state."""

    id: int
    gtin: str
    reserved: bool
    fulfilled: bool
    inventory_id: int | None
    location: str | None  # resolved even when the unit is soft-removed


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: int
    status: str
    lines: list[OrderLineDTO]
    created_at: str
    removed_at: str | None


@dataclass(frozen=True)
class InventoryUnitDTO:
    id: int
    gtin: str
    location: str | None
    reserved: bool
    removed: bool
