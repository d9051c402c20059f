"""
Engine configuration for propforecast.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from .tax import AU_TAX_BRACKETS_2024_25, TaxBracket


def _default_milestones() -> Mapping[str, int]:
    return MappingProxyType({"year10": 120, "year20": 240, "year30": 360})


@dataclass(frozen=True)
class EngineConfig:
    """
    Constants the forecast and summary steps read instead of hardcoding.

    Months per year is a calendar constant (``core.utils.MONTHS_PER_YEAR``),
    not a setting: loan terms, rates and the forecast all step in months.

    Attributes:
        weeks_per_year: Rentable weeks in a year before vacancy
        safe_withdrawal_rate: Annual withdrawal share for passive income
            capacity (4% rule)
        tax_brackets: Brackets used to turn gross salaries into after-tax income
        milestone_months: 1-based forecast month for each fixed summary
            milestone (read-only; a plain dict passed in is copied)
    """

    weeks_per_year: int = 52
    safe_withdrawal_rate: float = 0.04
    tax_brackets: tuple[TaxBracket, ...] = AU_TAX_BRACKETS_2024_25
    milestone_months: Mapping[str, int] = field(default_factory=_default_milestones)

    def __post_init__(self):
        if not isinstance(self.milestone_months, MappingProxyType):
            object.__setattr__(
                self, "milestone_months", MappingProxyType(dict(self.milestone_months))
            )
        if not isinstance(self.tax_brackets, tuple):
            object.__setattr__(self, "tax_brackets", tuple(self.tax_brackets))


DEFAULT_CONFIG = EngineConfig()
