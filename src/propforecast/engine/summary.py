"""
Milestone summaries picked out of a computed forecast.

Nothing is recomputed here: each milestone is an existing ForecastMonth
selected by index.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from datetime import date

from propforecast.core.config import DEFAULT_CONFIG, EngineConfig
from propforecast.core.models import ForecastMonth, ForecastSummary, MilestoneFigures
from propforecast.core.utils import MONTHS_PER_YEAR, age_on

logger = logging.getLogger(__name__)

MILESTONE_LABELS = {
    "now": "Now",
    "year10": "10 Years",
    "year20": "20 Years",
    "retirement": "Retirement",
    "year30": "30 Years",
}


def retirement_index(
    retirement_age: float, date_of_birth: date, as_of: date
) -> int:
    """0-based forecast index of the month the profile reaches retirement age."""
    years_left = retirement_age - age_on(date_of_birth, as_of)
    months_to_retirement = max(0.0, years_left * MONTHS_PER_YEAR)
    return math.floor(months_to_retirement)


def generate_summary(
    forecast: Sequence[ForecastMonth],
    retirement_age: float,
    date_of_birth: date,
    as_of: date | None = None,
    config: EngineConfig | None = None,
) -> ForecastSummary:
    """
    Select the now / 10y / 20y / retirement / 30y records from a forecast.

    Indices past the end of the forecast fall back to its last record.

    Args:
        forecast: Forecast months as returned by run_forecast
        retirement_age: Age at which the profile retires
        date_of_birth: Profile date of birth
        as_of: Date the current age is measured on (default: first forecast month)
        config: Engine constants (default: DEFAULT_CONFIG)

    Returns:
        ForecastSummary of existing ForecastMonth records

    Raises:
        ValueError: If the forecast is empty
    """
    if not forecast:
        raise ValueError("cannot summarize an empty forecast")

    cfg = config or DEFAULT_CONFIG
    last = len(forecast) - 1

    def pick(index: int) -> ForecastMonth:
        return forecast[min(index, last)]

    as_of = as_of or forecast[0].date
    ret_idx = retirement_index(retirement_age, date_of_birth, as_of)
    if ret_idx > last:
        logger.warning(
            "retirement falls in month %d, past the %d-month forecast; "
            "using the last month",
            ret_idx + 1,
            len(forecast),
        )

    milestones = cfg.milestone_months
    return ForecastSummary(
        now=forecast[0],
        year10=pick(milestones["year10"] - 1),
        year20=pick(milestones["year20"] - 1),
        retirement=pick(ret_idx),
        year30=pick(milestones["year30"] - 1),
    )


def milestone_figures(row: ForecastMonth) -> MilestoneFigures:
    """Headline figures for one forecast month."""
    return MilestoneFigures(
        net_worth_nominal=row.net_worth,
        net_worth_pv=row.net_worth_present_value,
        total_assets=row.total_assets,
        total_debt=row.total_debt,
        super_balance=row.super_balance,
        passive_income=row.passive_income_capacity * MONTHS_PER_YEAR,
    )


def summary_table(summary: ForecastSummary) -> dict[str, MilestoneFigures]:
    """
    Typed display table keyed by milestone label.

    Example:
        ```python
        table = summary_table(generate_summary(forecast, 65, dob))
        table["Retirement"].net_worth_pv
        ```
    """
    return {
        label: milestone_figures(getattr(summary, key))
        for key, label in MILESTONE_LABELS.items()
    }
