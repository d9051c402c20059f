"""
Projection engine: loan schedules, the monthly forecast, stress transforms
and milestone summaries.
"""

from .forecast import run_forecast
from .loans import (
    LoanStepper,
    offset_savings,
    payment_for_month,
    refinance,
    simulate_loan,
)
from .stress import apply_stress_test, refinance_loan
from .summary import (
    MILESTONE_LABELS,
    generate_summary,
    milestone_figures,
    retirement_index,
    summary_table,
)

__all__ = [
    "LoanStepper",
    "MILESTONE_LABELS",
    "apply_stress_test",
    "generate_summary",
    "milestone_figures",
    "offset_savings",
    "payment_for_month",
    "refinance",
    "refinance_loan",
    "retirement_index",
    "run_forecast",
    "simulate_loan",
    "summary_table",
]
