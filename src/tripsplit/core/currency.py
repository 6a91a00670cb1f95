#!/usr/bin/env python3
"""
Currency Parsing and Apportionment Utilities

All ledger arithmetic uses integer minor units ("cents") to avoid
floating-point errors. Display strings are produced only at the edges.

Key Principles:
- Never use floating-point arithmetic for currency calculations
- Convert incoming floats through str() into Decimal before scaling
- Apportion amounts so the parts always sum exactly to the whole
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Union

# 0.01 currency units: balances at or below this are treated as settled
EPSILON_CENTS = 1


def cents_to_dollars_str(cents: int) -> str:
    """
    Convert cents to a decimal string using pure integer arithmetic.

    Example:
        cents_to_dollars_str(4599) -> "45.99"
    """
    is_negative = cents < 0
    abs_cents = abs(int(cents))

    dollars = abs_cents // 100
    remainder = abs_cents % 100

    if is_negative:
        return f"-{dollars}.{remainder:02d}"
    return f"{dollars}.{remainder:02d}"


def parse_dollars_to_cents(dollars_str: str) -> int:
    """
    Parse a dollar string to cents using integer arithmetic only.

    Examples:
        parse_dollars_to_cents("12.34") -> 1234
        parse_dollars_to_cents("$1,234.56") -> 123456
        parse_dollars_to_cents("12.5") -> 1250
        parse_dollars_to_cents("-3") -> -300
    """
    clean = dollars_str.replace("$", "").replace(",", "").strip()

    if not clean:
        return 0

    is_negative = clean.startswith("-")
    if is_negative:
        clean = clean[1:]

    if "." in clean:
        whole, _, fraction = clean.partition(".")
        dollars = int(whole) if whole else 0
        # Pad to 2 digits, truncate beyond 2
        cents = int(fraction.ljust(2, "0")[:2])
        total = dollars * 100 + cents
    else:
        total = int(clean) * 100

    return -total if is_negative else total


def decimal_to_cents(amount: Decimal) -> int:
    """
    Convert a Decimal amount to cents, rounding half-up.

    Raises:
        ValueError: If the amount is NaN, infinite or too large to represent
    """
    if not amount.is_finite():
        raise ValueError(f"Not a monetary amount: {amount}")
    try:
        return int((amount * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    except InvalidOperation as e:
        raise ValueError(f"Not a monetary amount: {amount}") from e


def to_cents(value: Union[str, int, float, Decimal]) -> int:
    """
    Convert any supported amount representation to cents.

    Strings are parsed as dollar strings, ints are whole units, and floats are
    routed through their shortest string form so 45.99 stays 4599.

    Raises:
        ValueError: If the value cannot be interpreted as an amount
    """
    if isinstance(value, bool):
        raise ValueError(f"Not a monetary amount: {value!r}")
    if isinstance(value, int):
        return value * 100
    if isinstance(value, Decimal):
        return decimal_to_cents(value)
    if isinstance(value, float):
        return decimal_to_cents(Decimal(str(value)))
    if isinstance(value, str):
        try:
            return decimal_to_cents(Decimal(value.replace("$", "").replace(",", "").strip()))
        except InvalidOperation as e:
            raise ValueError(f"Not a monetary amount: {value!r}") from e
    raise ValueError(f"Not a monetary amount: {value!r}")


def apportion_cents(total: int, weights: list[Decimal]) -> list[int]:
    """
    Split an integer total into parts proportional to weights.

    Uses the largest-remainder method: every part starts at the floor of its
    exact share, then the leftover cents go one each to the parts with the
    largest fractional remainders. Ties go to the earlier position, so the
    result is deterministic for a given weight order.

    Args:
        total: Non-negative amount in cents
        weights: Non-negative weights, at least one of them positive

    Returns:
        Integer parts, same length as weights, summing exactly to total

    Raises:
        ValueError: If weights are empty, negative, or all zero
    """
    if not weights:
        raise ValueError("At least one weight required")
    if any(w < 0 for w in weights):
        raise ValueError("Weights must be non-negative")

    weight_sum = sum(weights, Decimal(0))
    if weight_sum <= 0:
        raise ValueError("Weights must not all be zero")

    exact = [Decimal(total) * w / weight_sum for w in weights]
    parts = [int(e) for e in exact]  # total >= 0, so int() floors
    leftover = total - sum(parts)

    by_remainder = sorted(range(len(weights)), key=lambda i: (-(exact[i] - parts[i]), i))
    for i in by_remainder[:leftover]:
        parts[i] += 1

    return parts


def validate_sum_equals_total(parts: list[int], total: int, tolerance: int = 0) -> bool:
    """Check that integer parts sum to the total within tolerance."""
    return abs(sum(parts) - total) <= tolerance


def format_cents(cents: int, currency: str = "USD") -> str:
    """
    Format cents with a currency prefix ("$" for USD, otherwise the code).

    Examples:
        format_cents(-1234) -> "-$12.34"
        format_cents(1234, "EUR") -> "EUR 12.34"
    """
    sign = "-" if cents < 0 else ""
    amount = cents_to_dollars_str(abs(cents))
    if currency == "USD":
        return f"{sign}${amount}"
    return f"{sign}{currency} {amount}"
