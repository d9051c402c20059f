"""
propforecast - Long-horizon property and household finance projections

propforecast projects a household's finances month by month over several
decades: salary and rent coming in, living costs, property costs and loan
repayments going out, and the resulting cash buffer, retirement balance,
property values, debt and net worth in both nominal and today's dollars.

Key Features:
- **Loans with offset accounts**: interest-only periods, redraw rules and
  monthly re-amortization against the effective (offset-reduced) balance
- **Monthly forecast**: deterministic, pure and incremental over loans
- **Stress testing**: rate bumps, growth haircuts and vacancy floors applied
  to a copy of the scenario
- **Milestones**: now / 10y / 20y / retirement / 30y snapshots
- **Analysis**: pandas frames, KPIs and optional plotly charts

Quick Start:
    ```python
    from datetime import date
    from propforecast import LoanTerms, Scenario, UserProfile, run_forecast

    profile = UserProfile(
        name="Household",
        date_of_birth=date(1990, 6, 15),
        salary_gross_pa_cents=15_000_000,
        living_expenses_monthly_cents=450_000,
    )
    loan = LoanTerms(
        id="home-loan",
        start_date=date(2026, 1, 1),
        start_balance_cents=70_000_000,
        annual_rate=0.0615,
        term_years=30,
        offset_start_cents=3_000_000,
    )
    scenario = Scenario(
        id="base", name="Base", start_date=date(2026, 1, 1),
        profile=profile, loans=[loan],
    )
    forecast = run_forecast(scenario)
    ```

All amounts are integer cents; all rates are annual fractions.
"""

# Version information
__version__ = "0.1.0"
__description__ = "Long-horizon property and household finance projections"

from .core import (
    AU_TAX_BRACKETS_2024_25,
    DEFAULT_CONFIG,
    Asset,
    ConfigError,
    EngineConfig,
    ForecastMonth,
    ForecastSummary,
    LoanMonth,
    LoanSchedule,
    LoanTerms,
    MilestoneFigures,
    Person,
    Property,
    PropForecastWarning,
    Scenario,
    TaxBracket,
    UserProfile,
    after_tax_income,
    interest_only_payment,
    monthly_payment,
    present_value,
)
from .engine import (
    LoanStepper,
    apply_stress_test,
    generate_summary,
    offset_savings,
    payment_for_month,
    refinance,
    refinance_loan,
    run_forecast,
    simulate_loan,
    summary_table,
)
from .frames import compare_forecasts, forecast_to_frame, schedule_to_frame, to_freq
from .kpi import (
    breakeven_month,
    interest_paid_cum,
    liquidity_runway,
    ltv,
    max_drawdown,
    savings_rate,
)
from .loader import (
    ScenarioLoadError,
    load_scenario,
    scenario_from_dict,
    scenario_to_dict,
)

__all__ = [
    # Records
    "Asset",
    "ForecastMonth",
    "ForecastSummary",
    "LoanMonth",
    "LoanSchedule",
    "LoanTerms",
    "MilestoneFigures",
    "Person",
    "Property",
    "Scenario",
    "UserProfile",
    # Errors
    "ConfigError",
    "PropForecastWarning",
    "ScenarioLoadError",
    # Config and tax
    "AU_TAX_BRACKETS_2024_25",
    "DEFAULT_CONFIG",
    "EngineConfig",
    "TaxBracket",
    "after_tax_income",
    # Formulas
    "interest_only_payment",
    "monthly_payment",
    "present_value",
    # Engine
    "LoanStepper",
    "apply_stress_test",
    "generate_summary",
    "offset_savings",
    "payment_for_month",
    "refinance",
    "refinance_loan",
    "run_forecast",
    "simulate_loan",
    "summary_table",
    # Loading
    "load_scenario",
    "scenario_from_dict",
    "scenario_to_dict",
    # Frames
    "compare_forecasts",
    "forecast_to_frame",
    "schedule_to_frame",
    "to_freq",
    # KPIs
    "breakeven_month",
    "interest_paid_cum",
    "liquidity_runway",
    "ltv",
    "max_drawdown",
    "savings_rate",
    # Version info
    "__version__",
    "__description__",
]
