"""
Stress and what-if transforms over Scenario values.

Every transform returns a new Scenario and leaves its input untouched.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date

from propforecast.core.errors import ConfigError
from propforecast.core.models import Scenario

from .loans import refinance

logger = logging.getLogger(__name__)


def apply_stress_test(scenario: Scenario) -> Scenario:
    """
    Derive the pessimistic variant of a scenario.

    - every loan rate rises by ``stress_rate_bump_pct`` percentage points
    - every property growth rate drops by ``stress_growth_haircut_pct`` points
    - every property vacancy is raised to at least ``stress_vacancy_weeks``

    ``stress_borrow_cap_down_pct`` has no effect here: the forecast takes
    on no new borrowing for it to cap.

    Example:
        ```python
        stressed = apply_stress_test(scenario)
        base, worse = run_forecast(scenario), run_forecast(stressed)
        ```
    """
    if scenario.stress_borrow_cap_down_pct:
        logger.warning(
            "scenario %s: stress_borrow_cap_down_pct=%s is not applied "
            "by the stress test",
            scenario.id,
            scenario.stress_borrow_cap_down_pct,
        )

    rate_bump = scenario.stress_rate_bump_pct / 100
    growth_haircut = scenario.stress_growth_haircut_pct / 100

    return replace(
        scenario,
        loans=tuple(
            replace(loan, annual_rate=loan.annual_rate + rate_bump)
            for loan in scenario.loans
        ),
        properties=tuple(
            replace(
                prop,
                value_growth_pa=prop.value_growth_pa - growth_haircut,
                vacancy_weeks_pa=max(
                    prop.vacancy_weeks_pa, scenario.stress_vacancy_weeks
                ),
            )
            for prop in scenario.properties
        ),
    )


def refinance_loan(
    scenario: Scenario,
    loan_id: str,
    new_date: date,
    new_rate: float,
    new_io_years: float = 0,
    new_term_years: int = 30,
) -> Scenario:
    """
    What-if: the same scenario with one loan refinanced.

    Raises:
        ConfigError: If ``loan_id`` is not one of the scenario's loans
    """
    if scenario.loan(loan_id) is None:
        raise ConfigError(
            f"scenario {scenario.id}: unknown loan '{loan_id}' "
            f"(known: {', '.join(ln.id for ln in scenario.loans) or 'none'})"
        )
    return replace(
        scenario,
        loans=tuple(
            refinance(loan, new_date, new_rate, new_io_years, new_term_years)
            if loan.id == loan_id
            else loan
            for loan in scenario.loans
        ),
    )
