"""
Simplified personal income tax.

This is a plain marginal-bracket sum plus a flat levy on gross income. It is
good enough to turn a gross salary into spendable monthly cash for a
projection; it is not an authoritative tax calculation (no offsets, no
thresholds on the levy, no deductions).
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .currency import round_cents


@dataclass(frozen=True)
class TaxBracket:
    """
    One marginal tax bracket.

    Attributes:
        lower_cents: Income at which the bracket starts
        upper_cents: Income at which the bracket ends (None = unbounded)
        rate: Marginal rate applied to income inside the bracket
    """

    lower_cents: int
    upper_cents: int | None
    rate: float

    @property
    def width_cents(self) -> float:
        if self.upper_cents is None:
            return float("inf")
        return self.upper_cents - self.lower_cents


# Australian resident brackets, 2024-25 table used by the planner
AU_TAX_BRACKETS_2024_25: tuple[TaxBracket, ...] = (
    TaxBracket(0, 1_800_000, 0.0),
    TaxBracket(1_800_000, 4_500_000, 0.19),
    TaxBracket(4_500_000, 12_000_000, 0.325),
    TaxBracket(12_000_000, 18_000_000, 0.37),
    TaxBracket(18_000_000, None, 0.45),
)


def income_tax(
    gross_income_cents: int,
    brackets: Sequence[TaxBracket] = AU_TAX_BRACKETS_2024_25,
) -> float:
    """Bracket-sum tax on an annual gross income, in (fractional) cents."""
    tax = 0.0
    remaining = gross_income_cents
    for bracket in brackets:
        if remaining <= 0:
            break
        taxable = min(remaining, bracket.width_cents)
        tax += taxable * bracket.rate
        remaining -= taxable
    return tax


def after_tax_income(
    gross_income_cents: int,
    levy_rate: float = 0.02,
    brackets: Sequence[TaxBracket] = AU_TAX_BRACKETS_2024_25,
) -> int:
    """
    Annual after-tax income in cents.

    Args:
        gross_income_cents: Annual gross income
        levy_rate: Flat levy on gross income (e.g. 0.02 Medicare levy)
        brackets: Marginal brackets to apply

    Returns:
        Gross income minus bracket tax minus levy, rounded to the cent
    """
    if gross_income_cents <= 0:
        return 0
    levy = gross_income_cents * levy_rate
    tax = income_tax(gross_income_cents, brackets)
    return round_cents(gross_income_cents - tax - levy)
