"""
Loan schedule simulation with offset accounts.

A loan is advanced one month at a time by ``LoanStepper``. Each month:

1. the monthly offset contribution is added to the offset balance;
2. without redraw the offset is capped at the loan balance;
3. interest is charged on the effective balance, max(0, balance - offset);
4. during the interest-only period only interest is paid; afterwards the
   payment is re-amortized every month against the live effective balance
   over the months left in the run, and principal is capped at the balance;
5. the balance drops by the principal paid.

Re-amortizing each month is what turns offset savings into faster payoff:
the payment formula never changes, only the balance and months it sees.
``simulate_loan`` and the forecast engine share the stepper, so a schedule
and a forecast read identical per-month values.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date

from propforecast.core.amortization import (
    annuity_payment,
    interest_only_payment,
    monthly_payment,
)
from propforecast.core.currency import round_cents, to_decimal
from propforecast.core.models import LoanMonth, LoanSchedule, LoanTerms
from propforecast.core.utils import MONTHS_PER_YEAR, add_months

logger = logging.getLogger(__name__)


class LoanStepper:
    """
    Incremental month-by-month state for one loan.

    Args:
        loan: Loan terms (never modified)
        months: Number of months in the run (default: the loan term). The
            P&I payment amortizes over the months left in this run.

    Example:
        ```python
        stepper = LoanStepper(loan)
        first = stepper.step()
        second = stepper.step()
        ```
    """

    def __init__(self, loan: LoanTerms, months: int | None = None):
        self.loan = loan
        self.n_months = loan.term_months if months is None else int(months)
        self.month = 0
        self.balance = loan.start_balance_cents
        self.offset = loan.offset_start_cents
        self.total_interest = 0
        self.total_payments = 0
        self._monthly_rate = to_decimal(loan.annual_rate) / MONTHS_PER_YEAR

    @property
    def done(self) -> bool:
        """True once the run length is reached or the loan is repaid."""
        return self.month >= self.n_months or self.balance <= 0

    def step(self) -> LoanMonth | None:
        """Advance one month; returns None when the run is finished."""
        if self.done:
            return None

        loan = self.loan
        month = self.month + 1
        starting_balance = self.balance

        self.offset += loan.offset_contrib_monthly_cents
        if not loan.allow_redraw and self.offset > starting_balance:
            self.offset = starting_balance

        effective = max(0, starting_balance - self.offset)
        interest = round_cents(effective * self._monthly_rate)

        principal = 0
        total = interest
        is_io = month <= loan.io_months

        if not is_io and effective > 0:
            remaining = self.n_months - month + 1
            payment = annuity_payment(effective, loan.annual_rate, remaining)
            principal = payment - interest
            total = payment
            # final month rounding
            if principal > starting_balance:
                principal = starting_balance
                total = principal + interest

        self.balance = starting_balance - principal
        self.month = month
        self.total_interest += interest
        self.total_payments += total

        if self.balance <= 0 and month < self.n_months:
            logger.debug(
                "loan %s repaid in month %d of %d", loan.id, month, self.n_months
            )

        return LoanMonth(
            month=month,
            date=add_months(loan.start_date, month - 1),
            starting_balance=starting_balance,
            offset_balance=self.offset,
            effective_balance=effective,
            interest_charged=interest,
            principal_payment=principal,
            total_payment=total,
            ending_balance=self.balance,
            is_interest_only=is_io,
        )


def simulate_loan(loan: LoanTerms, months: int | None = None) -> LoanSchedule:
    """
    Simulate a full loan schedule.

    Args:
        loan: Loan terms
        months: Run length in months (default: loan term). The run stops
            early once the balance reaches zero.

    Returns:
        LoanSchedule with every simulated month and the run totals
    """
    stepper = LoanStepper(loan, months)
    rows = []
    row = stepper.step()
    while row is not None:
        rows.append(row)
        row = stepper.step()
    return LoanSchedule(
        loan_id=loan.id,
        months=tuple(rows),
        total_interest=stepper.total_interest,
        total_payments=stepper.total_payments,
    )


def payment_for_month(
    loan: LoanTerms, month: int, current_balance: int, offset_balance: int
) -> int:
    """
    Scheduled payment for a given 1-based month and balances.

    Interest-only inside the IO period; otherwise the P&I payment on the
    effective balance over the months left in the loan term.
    """
    effective = max(0, current_balance - offset_balance)
    if month <= loan.io_months:
        return interest_only_payment(effective, loan.annual_rate)
    remaining_months = loan.term_months - month + 1
    remaining_years = remaining_months / MONTHS_PER_YEAR
    return monthly_payment(effective, loan.annual_rate, remaining_years)


def offset_savings(loan: LoanTerms, months: int | None = None) -> int:
    """
    Interest saved by the offset account over a run, in cents.

    Runs the schedule once as given and once with the offset zeroed and
    returns the difference in total interest.
    """
    with_offset = simulate_loan(loan, months)
    without_offset = simulate_loan(
        replace(loan, offset_start_cents=0, offset_contrib_monthly_cents=0), months
    )
    return without_offset.total_interest - with_offset.total_interest


def refinance(
    loan: LoanTerms,
    new_date: date,
    new_rate: float,
    new_io_years: float = 0,
    new_term_years: int = 30,
) -> LoanTerms:
    """
    New loan terms effective from ``new_date``.

    Only the terms change; callers that need a schedule simulate the
    returned loan from scratch.
    """
    return replace(
        loan,
        start_date=new_date,
        annual_rate=new_rate,
        io_years=new_io_years,
        term_years=new_term_years,
    )
