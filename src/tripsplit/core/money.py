#!/usr/bin/env python3
"""
Money Primitive Type

Immutable currency value wrapper that uses integer cents internally.
Prevents floating-point errors and provides type-safe currency operations.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Union

from .currency import cents_to_dollars_str, format_cents, parse_dollars_to_cents, to_cents


@dataclass(frozen=True)
class Money:
    """
    Immutable money value in cents.

    Supports both positive and negative amounts; net balances are negative
    for members who owe. The currency code is carried by the records that
    hold Money values, not by Money itself.

    Examples:
        >>> paid = Money.from_cents(9000)
        >>> str(paid)
        '$90.00'

        >>> share = Money.from_dollars("30")
        >>> str(paid - share)
        '$60.00'

        >>> (share - paid).abs()
        Money(cents=6000)
    """

    cents: int

    @classmethod
    def zero(cls) -> "Money":
        """Create a zero amount."""
        return cls(cents=0)

    @classmethod
    def from_cents(cls, cents: int) -> "Money":
        """Create Money from cents."""
        return cls(cents=cents)

    @classmethod
    def from_dollars(cls, dollars: str | int) -> "Money":
        """
        Parse from dollar string like '$123.45' or integer dollars.

        Args:
            dollars: String like "$12.34" or integer like 12

        Returns:
            Money object
        """
        if isinstance(dollars, int):
            return cls(cents=dollars * 100)
        return cls(cents=parse_dollars_to_cents(dollars))

    @classmethod
    def from_value(cls, value: Union[str, int, float, Decimal]) -> "Money":
        """
        Create Money from any amount representation found in stored records.

        Raises:
            ValueError: If the value is not a monetary amount
        """
        return cls(cents=to_cents(value))

    def to_cents(self) -> int:
        """Get value in cents."""
        return self.cents

    def to_decimal(self) -> Decimal:
        """Get value in whole currency units."""
        return Decimal(self.cents) / 100

    def to_dollars(self) -> str:
        """Get formatted dollar string."""
        return str(self)

    def to_str(self) -> str:
        """Get plain decimal string without currency prefix, e.g. '12.34'."""
        return cents_to_dollars_str(self.cents)

    def format(self, currency: str = "USD") -> str:
        """Format with a currency prefix."""
        return format_cents(self.cents, currency)

    def abs(self) -> "Money":
        """Return absolute value of Money."""
        return Money(cents=abs(self.cents))

    def is_zero(self) -> bool:
        """Check whether the amount is exactly zero."""
        return self.cents == 0

    def __add__(self, other: "Money") -> "Money":
        """Add two Money objects."""
        return Money(cents=self.cents + other.cents)

    def __sub__(self, other: "Money") -> "Money":
        """Subtract two Money objects."""
        return Money(cents=self.cents - other.cents)

    def __neg__(self) -> "Money":
        """Negate the amount."""
        return Money(cents=-self.cents)

    def __mul__(self, scalar: int) -> "Money":
        """Multiply Money by integer scalar."""
        return Money(cents=self.cents * scalar)

    def __eq__(self, other: object) -> bool:
        """Check equality."""
        if not isinstance(other, Money):
            return NotImplemented
        return self.cents == other.cents

    def __lt__(self, other: "Money") -> bool:
        """Less than comparison."""
        return self.cents < other.cents

    def __le__(self, other: "Money") -> bool:
        """Less than or equal comparison."""
        return self.cents <= other.cents

    def __gt__(self, other: "Money") -> bool:
        """Greater than comparison."""
        return self.cents > other.cents

    def __ge__(self, other: "Money") -> bool:
        """Greater than or equal comparison."""
        return self.cents >= other.cents

    def __str__(self) -> str:
        """Format as dollar string."""
        return format_cents(self.cents)

    def __repr__(self) -> str:
        """Repr format."""
        return f"Money(cents={self.cents})"
