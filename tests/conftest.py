"""
Shared fixtures: a household with one investment property and one
interest-only loan with an offset account.
"""

from datetime import date

import pytest

from propforecast.core.models import LoanTerms, Property, Scenario, UserProfile


@pytest.fixture
def offset_loan():
    """$770,561 at 6%, 2 years IO, 30-year term, $50k offset + $2k/month, redraw on."""
    return LoanTerms(
        id="ip-loan",
        start_date=date(2025, 1, 1),
        start_balance_cents=77_056_100,
        annual_rate=0.06,
        io_years=2,
        term_years=30,
        offset_start_cents=5_000_000,
        offset_contrib_monthly_cents=200_000,
        allow_redraw=True,
    )


@pytest.fixture
def plain_loan():
    """$400,000 at 6% over 30 years, no IO, no offset."""
    return LoanTerms(
        id="plain",
        start_date=date(2025, 1, 1),
        start_balance_cents=40_000_000,
        annual_rate=0.06,
        term_years=30,
    )


@pytest.fixture
def profile():
    return UserProfile(
        name="Test Household",
        date_of_birth=date(1990, 6, 15),
        retirement_age=60,
        inflation_cpi_pa=0.025,
        wage_growth_pa=0.03,
        return_super_pa=0.07,
        return_portfolio_pa=0.08,
        medicare_levy=0.02,
        salary_gross_pa_cents=12_000_000,
        savings_cents=1_000_000,
        super_balance_cents=50_000_000,
        living_expenses_monthly_cents=500_000,
    )


@pytest.fixture
def rental_property():
    return Property(
        id="unit",
        name="Investment Unit",
        purchase_price_cents=60_000_000,
        purchase_date=date(2020, 3, 1),
        value_now_cents=80_000_000,
        value_growth_pa=0.05,
        maintenance_pct_of_value=0.01,
        rates_pa_cents=240_000,
        insurance_pa_cents=120_000,
        rent_pw_cents=60_000,
        vacancy_weeks_pa=2,
    )


@pytest.fixture
def scenario(profile, rental_property, offset_loan):
    return Scenario(
        id="base",
        name="Base",
        start_date=date(2025, 1, 1),
        profile=profile,
        horizon_years=30,
        properties=(rental_property,),
        loans=(offset_loan,),
        stress_rate_bump_pct=2.0,
        stress_growth_haircut_pct=1.5,
        stress_vacancy_weeks=6,
    )
