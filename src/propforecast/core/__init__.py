"""
Core module for propforecast.

Data records, amortization formulas, cent rounding and configuration shared
by the projection engine.
"""

from .amortization import (
    annuity_payment,
    interest_only_payment,
    monthly_payment,
    present_value,
)
from .config import DEFAULT_CONFIG, EngineConfig
from .currency import RoundingPolicy, cents_to_dollars, dollars_to_cents, round_cents
from .errors import ConfigError, PropForecastWarning
from .models import (
    ASSET_TYPES,
    Asset,
    ForecastMonth,
    ForecastSummary,
    LoanMonth,
    LoanSchedule,
    LoanTerms,
    MilestoneFigures,
    Person,
    Property,
    Scenario,
    UserProfile,
)
from .tax import AU_TAX_BRACKETS_2024_25, TaxBracket, after_tax_income, income_tax
from .utils import add_months, age_on

__all__ = [
    # Errors
    "ConfigError",
    "PropForecastWarning",
    # Records
    "ASSET_TYPES",
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
    # Formulas
    "annuity_payment",
    "interest_only_payment",
    "monthly_payment",
    "present_value",
    # Money
    "RoundingPolicy",
    "cents_to_dollars",
    "dollars_to_cents",
    "round_cents",
    # Tax
    "AU_TAX_BRACKETS_2024_25",
    "TaxBracket",
    "after_tax_income",
    "income_tax",
    # Config
    "DEFAULT_CONFIG",
    "EngineConfig",
    # Utils
    "add_months",
    "age_on",
]
