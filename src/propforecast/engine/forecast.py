"""
Month-stepping household forecast.

``run_forecast`` walks a Scenario forward one month at a time and returns one
ForecastMonth per month of the horizon. Running state carried between months
is the cash buffer, the retirement (super) balance, the portfolio holdings
and one LoanStepper per loan; everything else is recomputed from the month
number. Growth and inflation factors use (month - 1) / 12 elapsed years, so
month 1 is "now" and carries no growth.

Income and expense components are rounded to cents before they are summed,
which keeps the reported identities exact in integers:

- total_income = salary_after_tax + rental_income
- total_expenses = living_expenses + property_expenses + loan_payments
- net_cashflow = total_income - total_expenses
- cash_buffer[m] = cash_buffer[m - 1] + net_cashflow[m]
- net_worth = total_assets - total_debt
"""

from __future__ import annotations

import logging
import warnings

from propforecast.core.amortization import present_value
from propforecast.core.config import DEFAULT_CONFIG, EngineConfig
from propforecast.core.currency import round_cents
from propforecast.core.errors import PropForecastWarning
from propforecast.core.models import ForecastMonth, Scenario
from propforecast.core.tax import after_tax_income
from propforecast.core.utils import MONTHS_PER_YEAR, add_months

from .loans import LoanStepper

logger = logging.getLogger(__name__)


def _opening_balances(scenario: Scenario) -> tuple[int, float, list[list[float]]]:
    """
    Opening cash buffer, super balance and portfolio holdings.

    Cash assets join the cash buffer and super assets (plus each person's
    super) join the retirement balance. The profile's investments grow at
    the profile portfolio return; shares and other assets are held
    separately and grow at their own rate.
    """
    profile = scenario.profile
    cash = profile.savings_cents or 0
    super_balance = float(profile.super_balance_cents or 0)
    holdings = [[float(profile.investments_cents or 0), profile.return_portfolio_pa]]

    for person in scenario.people:
        super_balance += person.super_current_cents or 0

    for asset in scenario.assets:
        value = asset.current_value_cents or 0
        if asset.asset_type == "cash":
            cash += value
        elif asset.asset_type == "super":
            super_balance += value
        else:
            holdings.append([float(value), asset.growth_rate_pa or 0.0])

    return cash, super_balance, holdings


def run_forecast(
    scenario: Scenario, config: EngineConfig | None = None
) -> tuple[ForecastMonth, ...]:
    """
    Run the full monthly forecast for a scenario.

    Args:
        scenario: Scenario to project (not modified)
        config: Engine constants (default: DEFAULT_CONFIG)

    Returns:
        Tuple of ForecastMonth, months 1..horizon_years * 12

    Example:
        ```python
        forecast = run_forecast(scenario)
        forecast[0].net_worth        # now
        forecast[-1].net_worth_present_value
        ```
    """
    cfg = config or DEFAULT_CONFIG
    mpy = MONTHS_PER_YEAR
    wpy = cfg.weeks_per_year
    profile = scenario.profile
    total_months = scenario.horizon_months

    logger.debug(
        "forecast %s: %d months, %d properties, %d loans",
        scenario.id,
        total_months,
        len(scenario.properties),
        len(scenario.loans),
    )

    for prop in scenario.properties:
        if prop.vacancy_weeks_pa > wpy:
            warnings.warn(
                f"{prop.id}: vacancy_weeks_pa ({prop.vacancy_weeks_pa}) exceeds "
                f"{wpy} weeks; rental income will be negative.",
                PropForecastWarning,
                stacklevel=2,
            )

    cash_buffer, super_balance, holdings = _opening_balances(scenario)

    salary_monthly = (
        after_tax_income(
            profile.salary_gross_pa_cents or 0, profile.medicare_levy, cfg.tax_brackets
        )
        / mpy
    )
    # Additional earners; the primary person is the profile itself
    earners = [
        (
            after_tax_income(
                person.salary_current_cents or 0,
                profile.medicare_levy,
                cfg.tax_brackets,
            )
            / mpy,
            person.salary_growth_pa,
        )
        for person in scenario.people
        if not person.is_primary
    ]
    steppers = [LoanStepper(loan) for loan in scenario.loans]
    super_growth = 1 + profile.return_super_pa / mpy

    forecast = []
    for month in range(1, total_months + 1):
        years = (month - 1) / mpy

        # Income
        salary = salary_monthly * (1 + profile.wage_growth_pa) ** years
        for earner_monthly, growth_pa in earners:
            salary += earner_monthly * (1 + growth_pa) ** years
        salary_after_tax = round_cents(salary)

        rental_income = round_cents(
            sum(
                p.rent_pw_cents * (wpy - p.vacancy_weeks_pa) / mpy
                for p in scenario.properties
            )
        )
        total_income = salary_after_tax + rental_income

        # Expenses; maintenance runs on the grown value
        grown_values = [
            p.value_now_cents * (1 + p.value_growth_pa) ** years
            for p in scenario.properties
        ]
        property_expenses = round_cents(
            sum(
                (p.holding_costs_pa_cents + value * p.maintenance_pct_of_value) / mpy
                for p, value in zip(scenario.properties, grown_values)
            )
        )

        loan_payments = 0
        total_debt = 0
        for stepper in steppers:
            row = stepper.step()
            if row is not None:
                loan_payments += row.total_payment
                total_debt += row.ending_balance

        living_expenses = round_cents(
            (profile.living_expenses_monthly_cents or 0)
            * (1 + profile.inflation_cpi_pa) ** years
        )

        total_expenses = living_expenses + property_expenses + loan_payments
        net_cashflow = total_income - total_expenses
        cash_buffer += net_cashflow

        # Balances
        super_balance *= super_growth
        for holding in holdings:
            holding[0] *= 1 + holding[1] / mpy

        property_values = round_cents(sum(grown_values))
        super_cents = round_cents(super_balance)
        portfolio_cents = round_cents(sum(h[0] for h in holdings))

        total_assets = property_values + super_cents + portfolio_cents + cash_buffer
        net_worth = total_assets - total_debt
        net_worth_pv = present_value(net_worth, profile.inflation_cpi_pa, years)
        passive_income = round_cents(net_worth_pv * cfg.safe_withdrawal_rate / mpy)

        forecast.append(
            ForecastMonth(
                month=month,
                date=add_months(scenario.start_date, month - 1),
                salary_after_tax=salary_after_tax,
                rental_income=rental_income,
                total_income=total_income,
                living_expenses=living_expenses,
                property_expenses=property_expenses,
                loan_payments=loan_payments,
                total_expenses=total_expenses,
                net_cashflow=net_cashflow,
                cash_buffer=cash_buffer,
                property_values=property_values,
                super_balance=super_cents,
                portfolio_balance=portfolio_cents,
                total_assets=total_assets,
                total_debt=total_debt,
                net_worth=net_worth,
                net_worth_present_value=net_worth_pv,
                passive_income_capacity=passive_income,
            )
        )

    if forecast:
        logger.debug(
            "forecast %s done: net worth %d -> %d cents",
            scenario.id,
            forecast[0].net_worth,
            forecast[-1].net_worth,
        )
    return tuple(forecast)
