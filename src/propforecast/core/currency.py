"""
Cent rounding and conversion for propforecast.

Every stored or reported amount is an integer number of cents. Intermediate
math may run in float or Decimal; this module is where values come back to
whole cents.
"""

from __future__ import annotations

from decimal import ROUND_HALF_EVEN, ROUND_HALF_UP, Decimal
from enum import Enum


class RoundingPolicy(Enum):
    """Rounding policies for cent calculations."""

    BANKERS = ROUND_HALF_EVEN
    HALF_UP = ROUND_HALF_UP


def to_decimal(value: Decimal | float | int | str) -> Decimal:
    """Convert a number to Decimal without picking up binary float noise."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(repr(value))
    return Decimal(value)


def round_cents(
    value: Decimal | float | int,
    rounding: RoundingPolicy = RoundingPolicy.HALF_UP,
) -> int:
    """
    Round an amount in cents to a whole number of cents.

    Half-cent values round away from zero by default, so 359_280.5 becomes
    359_281. Python's built-in round() would give 359_280.

    Args:
        value: Amount in (possibly fractional) cents
        rounding: Rounding policy, HALF_UP unless told otherwise

    Returns:
        Whole cents as int
    """
    if isinstance(value, int):
        return value
    return int(to_decimal(value).quantize(Decimal(1), rounding=rounding.value))


def dollars_to_cents(dollars: Decimal | float | int | str) -> int:
    """Convert a dollar amount to integer cents."""
    return round_cents(to_decimal(dollars) * 100)


def cents_to_dollars(cents: int) -> Decimal:
    """Convert integer cents to an exact Decimal dollar amount."""
    return Decimal(cents).scaleb(-2)
