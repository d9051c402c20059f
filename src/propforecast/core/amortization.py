"""
Amortization and discounting formulas.

Pure functions over integer cents. The arithmetic runs in Decimal so that
values landing exactly on half a cent (e.g. 71,856,100 x 0.005 = 359,280.5)
round the same way every time instead of depending on binary float error.
"""

from __future__ import annotations

from decimal import Decimal

from .currency import round_cents, to_decimal
from .utils import MONTHS_PER_YEAR


def annuity_payment(principal: int | float, annual_rate: float, n_months: int) -> int:
    """
    Fixed monthly payment that repays ``principal`` over ``n_months``.

    P * r(1+r)^n / ((1+r)^n - 1) with r = annual_rate / 12. A zero rate
    falls back to straight-line P / n.

    Args:
        principal: Amount to amortize, in cents
        annual_rate: Annual interest rate
        n_months: Number of monthly payments

    Returns:
        Monthly payment in cents
    """
    p = to_decimal(principal)
    r = to_decimal(annual_rate) / MONTHS_PER_YEAR
    growth = (1 + r) ** n_months
    # rates too small to move (1 + r) at Decimal precision behave as zero
    if growth == 1:
        return round_cents(p / n_months)
    return round_cents(p * r * growth / (growth - 1))


def monthly_payment(
    principal: int | float, annual_rate: float, term_years: float
) -> int:
    """
    Principal-and-interest monthly payment for a loan term in years.

    Fractional terms are accepted (remaining months / 12); the number of
    payments is rounded to the nearest whole month.

    Example:
        ```python
        monthly_payment(100_000_000, 0.06, 30)  # ~599_551 cents on $1m
        monthly_payment(1_200_000, 0.0, 1)      # 100_000
        ```
    """
    n_months = int(round(term_years * MONTHS_PER_YEAR))
    return annuity_payment(principal, annual_rate, n_months)


def interest_only_payment(principal: int | float, annual_rate: float) -> int:
    """One month of interest on ``principal``, in cents."""
    monthly_rate = to_decimal(annual_rate) / MONTHS_PER_YEAR
    return round_cents(to_decimal(principal) * monthly_rate)


def present_value(
    nominal: int | float, annual_discount_rate: float, years: float
) -> int:
    """
    Discount a future nominal amount back to today's money.

    nominal / (1 + rate)^years. The rate compounds annually even for
    fractional ``years``; month-level callers pass (month - 1) / 12.

    Example:
        ```python
        present_value(1_000_000, 0.025, 10)  # 781_198
        present_value(1_000_000, 0.025, 0)   # 1_000_000
        ```
    """
    if years == 0:
        return round_cents(nominal)
    factor = (1 + to_decimal(annual_discount_rate)) ** to_decimal(years)
    return round_cents(to_decimal(nominal) / factor)
