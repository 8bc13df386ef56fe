#!/usr/bin/env python3
"""
Money Primitive Type

Immutable currency value wrapper that uses Decimal internally.
Prevents floating-point errors and provides type-safe currency operations.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Union

from .currency import (
    decimal_from_json,
    decimal_to_json,
    format_dollars,
    parse_decimal,
    plain_decimal_str,
)


@dataclass(frozen=True)
class Money:
    """
    Immutable money value (USD).

    Keeps the exact decimal the user typed and displays it unrounded.

    Examples:
        >>> lunch = Money.from_string("20")
        >>> str(lunch)
        '$20'

        >>> total = lunch + Money.from_string("12.5")
        >>> str(total)
        '$32.5'
        >>> total.to_plain_string()
        '32.5'

        >>> Money.from_json(12.5).to_json()
        12.5
    """

    amount: Decimal

    @classmethod
    def zero(cls) -> "Money":
        """Create a zero amount."""
        return cls(amount=Decimal(0))

    @classmethod
    def from_string(cls, amount_str: str) -> "Money":
        """
        Parse from a string like "12.34" or "$1,234.56".

        Raises:
            ValueError: If the string is not a finite number
        """
        return cls(amount=parse_decimal(amount_str))

    @classmethod
    def from_json(cls, value: Union[int, float, str]) -> "Money":
        """Create Money from a number stored in a data file."""
        return cls(amount=decimal_from_json(value))

    def to_json(self) -> Union[int, float]:
        """Get value as a plain JSON number."""
        return decimal_to_json(self.amount)

    def to_plain_string(self) -> str:
        """Get value without currency symbol or trailing zeros."""
        return plain_decimal_str(self.amount)

    def is_positive(self) -> bool:
        """Check whether the amount is greater than zero."""
        return self.amount > 0

    def __add__(self, other: "Money") -> "Money":
        """Add two Money objects."""
        return Money(amount=self.amount + other.amount)

    def __sub__(self, other: "Money") -> "Money":
        """Subtract two Money objects."""
        return Money(amount=self.amount - other.amount)

    def __eq__(self, other: object) -> bool:
        """Check equality."""
        if not isinstance(other, Money):
            return NotImplemented
        return self.amount == other.amount

    def __lt__(self, other: "Money") -> bool:
        """Less than comparison."""
        return self.amount < other.amount

    def __le__(self, other: "Money") -> bool:
        """Less than or equal comparison."""
        return self.amount <= other.amount

    def __gt__(self, other: "Money") -> bool:
        """Greater than comparison."""
        return self.amount > other.amount

    def __ge__(self, other: "Money") -> bool:
        """Greater than or equal comparison."""
        return self.amount >= other.amount

    def __str__(self) -> str:
        """Format as dollar string."""
        return format_dollars(self.amount)

    def __repr__(self) -> str:
        """Repr format."""
        return f"Money(amount={self.amount!r})"
