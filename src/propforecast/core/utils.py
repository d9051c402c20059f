"""
Date helpers for propforecast.
"""

from __future__ import annotations

import calendar
from datetime import date

DAYS_PER_YEAR = 365.25
MONTHS_PER_YEAR = 12


def add_months(start: date, months: int) -> date:
    """
    Shift a date by a whole number of months.

    The day of month is kept where possible and clamped to the last day of
    shorter months (31 Jan + 1 month is 28/29 Feb).

    **Example:**
        ```python
        add_months(date(2025, 1, 31), 1)   # date(2025, 2, 28)
        add_months(date(2025, 11, 15), 3)  # date(2026, 2, 15)
        ```
    """
    idx = start.year * MONTHS_PER_YEAR + (start.month - 1) + months
    year, month0 = divmod(idx, MONTHS_PER_YEAR)
    last_day = calendar.monthrange(year, month0 + 1)[1]
    return date(year, month0 + 1, min(start.day, last_day))


def age_on(date_of_birth: date, on: date) -> float:
    """Fractional age in years on a given date (365.25-day years)."""
    return (on - date_of_birth).days / DAYS_PER_YEAR
