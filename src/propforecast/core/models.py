"""
Plain data records consumed and produced by the projection engine.

All records are frozen dataclasses. Monetary fields are integer cents and
rates are annual fractions (0.06 for 6%). Collections on a Scenario are
stored as tuples so a Scenario is a hashable, comparable value; transforms
build new records with ``dataclasses.replace`` instead of mutating.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from .utils import MONTHS_PER_YEAR

ASSET_TYPES = ("cash", "shares", "super", "other")


def _freeze(obj, *names: str) -> None:
    """Coerce list-valued fields on a frozen dataclass to tuples."""
    for name in names:
        value = getattr(obj, name)
        if not isinstance(value, tuple):
            object.__setattr__(obj, name, tuple(value or ()))


# --- Inputs -------------------------------------------------------------------


@dataclass(frozen=True)
class LoanTerms:
    """
    Terms of one loan with an optional linked offset account.

    Attributes:
        id: Loan identifier
        start_date: Date of the first repayment month
        start_balance_cents: Principal owed at start
        annual_rate: Annual interest rate
        io_years: Interest-only period at the start of the loan
        term_years: Total loan term
        offset_start_cents: Opening offset account balance
        offset_contrib_monthly_cents: Amount added to the offset every month
        allow_redraw: If False, the offset is capped at the loan balance
        property_id: Property securing the loan, if any
    """

    id: str
    start_date: date
    start_balance_cents: int
    annual_rate: float
    io_years: float = 0
    term_years: int = 30
    offset_start_cents: int = 0
    offset_contrib_monthly_cents: int = 0
    allow_redraw: bool = False
    property_id: str | None = None

    @property
    def term_months(self) -> int:
        return int(self.term_years * MONTHS_PER_YEAR)

    @property
    def io_months(self) -> float:
        return self.io_years * MONTHS_PER_YEAR


@dataclass(frozen=True)
class Property:
    """
    A property held at the scenario start.

    Values, growth and rent are projected forward from the scenario start
    ("now"), not from the purchase date. Annual cost fields are in cents per
    year; ``maintenance_pct_of_value`` is a fraction of the grown value.
    """

    id: str
    name: str
    purchase_price_cents: int
    purchase_date: date
    value_now_cents: int
    value_growth_pa: float = 0.0
    costs_fixed_pa_cents: int = 0
    maintenance_pct_of_value: float = 0.0
    strata_pa_cents: int = 0
    rates_pa_cents: int = 0
    insurance_pa_cents: int = 0
    land_tax_pa_cents: int = 0
    rent_pw_cents: int = 0
    vacancy_weeks_pa: float = 0
    depreciation_capital_pa_cents: int = 0
    depreciation_plant_pa_cents: int = 0
    becomes_ip_on: date | None = None
    becomes_ppor_on: date | None = None
    sold_on: date | None = None

    @property
    def holding_costs_pa_cents(self) -> int:
        """Annual costs that do not scale with value."""
        return (
            self.costs_fixed_pa_cents
            + self.strata_pa_cents
            + self.rates_pa_cents
            + self.insurance_pa_cents
            + self.land_tax_pa_cents
        )


@dataclass(frozen=True)
class UserProfile:
    """Household assumptions and current balances."""

    name: str
    date_of_birth: date
    retirement_age: int = 65
    inflation_cpi_pa: float = 0.025
    wage_growth_pa: float = 0.03
    return_super_pa: float = 0.07
    return_portfolio_pa: float = 0.08
    tax_marginal_rate: float = 0.37
    medicare_levy: float = 0.02
    state_code: str = "NSW"
    salary_gross_pa_cents: int = 0
    savings_cents: int = 0
    super_balance_cents: int = 0
    investments_cents: int = 0
    living_expenses_monthly_cents: int = 0


@dataclass(frozen=True)
class Person:
    """Another household member with their own salary and retirement balance."""

    id: str
    name: str
    date_of_birth: date | None = None
    salary_current_cents: int = 0
    salary_growth_pa: float = 0.03
    super_current_cents: int = 0
    is_primary: bool = False


@dataclass(frozen=True)
class Asset:
    """A current non-property holding, bucketed by ``asset_type``."""

    id: str
    name: str
    asset_type: str = "other"
    current_value_cents: int = 0
    growth_rate_pa: float = 0.0


@dataclass(frozen=True)
class Scenario:
    """
    The aggregate root handed to the forecast engine.

    Stress parameters are percentages (1.5 = +1.5 percentage points);
    ``stress_vacancy_weeks`` is a floor in weeks per year.
    """

    id: str
    name: str
    start_date: date
    profile: UserProfile
    horizon_years: int = 30
    properties: tuple[Property, ...] = ()
    loans: tuple[LoanTerms, ...] = ()
    people: tuple[Person, ...] = ()
    assets: tuple[Asset, ...] = ()
    stress_rate_bump_pct: float = 0.0
    stress_growth_haircut_pct: float = 0.0
    stress_vacancy_weeks: float = 0
    stress_borrow_cap_down_pct: float = 0.0

    def __post_init__(self):
        _freeze(self, "properties", "loans", "people", "assets")

    @property
    def horizon_months(self) -> int:
        return int(self.horizon_years * MONTHS_PER_YEAR)

    def loan(self, loan_id: str) -> LoanTerms | None:
        return next((ln for ln in self.loans if ln.id == loan_id), None)


# --- Outputs ------------------------------------------------------------------


@dataclass(frozen=True)
class LoanMonth:
    """One simulated loan month. All amounts in cents."""

    month: int
    date: date
    starting_balance: int
    offset_balance: int
    effective_balance: int
    interest_charged: int
    principal_payment: int
    total_payment: int
    ending_balance: int
    is_interest_only: bool


@dataclass(frozen=True)
class LoanSchedule:
    """Ordered loan months for one loan plus run totals."""

    loan_id: str
    months: tuple[LoanMonth, ...]
    total_interest: int
    total_payments: int

    def __post_init__(self):
        _freeze(self, "months")


@dataclass(frozen=True)
class ForecastMonth:
    """One month of the household projection. All amounts in cents."""

    month: int
    date: date

    # Income
    salary_after_tax: int
    rental_income: int
    total_income: int

    # Expenses
    living_expenses: int
    property_expenses: int
    loan_payments: int
    total_expenses: int

    # Net position
    net_cashflow: int
    cash_buffer: int

    # Assets
    property_values: int
    super_balance: int
    portfolio_balance: int
    total_assets: int

    # Liabilities
    total_debt: int

    # Net worth
    net_worth: int
    net_worth_present_value: int

    # 4% rule, monthly
    passive_income_capacity: int


@dataclass(frozen=True)
class ForecastSummary:
    """Forecast records picked at fixed milestones."""

    now: ForecastMonth
    year10: ForecastMonth
    year20: ForecastMonth
    retirement: ForecastMonth
    year30: ForecastMonth


@dataclass(frozen=True)
class MilestoneFigures:
    """Headline figures for one milestone; ``passive_income`` is annual."""

    net_worth_nominal: int
    net_worth_pv: int
    total_assets: int
    total_debt: int
    super_balance: int
    passive_income: int
