"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass

from warehouse.domain.exceptions import InvalidGtin

GTIN_LENGTHS = (8, 12, 13, 14)


def is_gtin(value: object) -> bool:
    """Check format and GS1 mod-10 check digit of a GTIN-8/12/13/14."""
    if not isinstance(value, str) or not (value.isascii() and value.isdigit()):
        return False
    if len(value) not in GTIN_LENGTHS:
        return False

    digits = [int(char) for char in value]
    body, check = digits[:-1], digits[-1]
    # Weights alternate 3, 1, 3, ... starting at the rightmost data digit
    total = sum(
        digit * (3 if position % 2 == 0 else 1)
        for position, digit in enumerate(reversed(body))
    )
    return (10 - total % 10) % 10 == check


@dataclass(frozen=True)
class Gtin:
    """Global Trade Item Number, the matching key between demand and supply."""

    value: str

    def __post_init__(self) -> None:
        if not is_gtin(self.value):
            raise InvalidGtin()

    def __str__(self) -> str:
        return self.value
