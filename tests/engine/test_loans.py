"""
Tests for loan simulation with offset accounts.
"""

from dataclasses import replace
from datetime import date

import pytest

from propforecast.core.amortization import interest_only_payment, monthly_payment
from propforecast.core.models import LoanTerms
from propforecast.engine.loans import (
    LoanStepper,
    offset_savings,
    payment_for_month,
    refinance,
    simulate_loan,
)


class TestFirstMonth:
    """Month 1 of the interest-only offset loan, worked by hand."""

    def test_interest_only_month_one(self, offset_loan):
        first = simulate_loan(offset_loan, 1).months[0]

        assert first.month == 1
        assert first.date == date(2025, 1, 1)
        assert first.starting_balance == 77_056_100
        assert first.offset_balance == 5_200_000
        assert first.effective_balance == 71_856_100
        assert first.interest_charged == 359_281
        assert first.principal_payment == 0
        assert first.total_payment == 359_281
        assert first.ending_balance == 77_056_100
        assert first.is_interest_only

    def test_totals_for_one_month(self, offset_loan):
        schedule = simulate_loan(offset_loan, 1)
        assert schedule.loan_id == "ip-loan"
        assert schedule.total_interest == 359_281
        assert schedule.total_payments == 359_281


class TestScheduleInvariants:
    def test_offset_capped_without_redraw(self):
        loan = LoanTerms(
            id="capped",
            start_date=date(2025, 1, 1),
            start_balance_cents=10_000_000,
            annual_rate=0.06,
            term_years=2,
            offset_start_cents=12_000_000,
        )
        schedule = simulate_loan(loan)
        first = schedule.months[0]
        assert first.offset_balance == 10_000_000
        assert first.effective_balance == 0
        assert first.interest_charged == 0
        assert first.total_payment == 0
        assert all(m.offset_balance <= m.starting_balance for m in schedule.months)
        assert len(schedule.months) == loan.term_months

    def test_row_identities(self, offset_loan):
        for row in simulate_loan(offset_loan).months:
            assert row.ending_balance == row.starting_balance - row.principal_payment
            assert 0 <= row.effective_balance <= row.starting_balance
            assert row.total_payment == row.interest_charged + row.principal_payment
            assert row.principal_payment >= 0

    def test_balance_never_increases(self, offset_loan):
        balances = [m.ending_balance for m in simulate_loan(offset_loan).months]
        assert all(a >= b for a, b in zip(balances, balances[1:]))

    def test_interest_only_period(self, offset_loan):
        months = simulate_loan(offset_loan).months
        assert all(m.is_interest_only for m in months[:24])
        assert all(m.principal_payment == 0 for m in months[:24])
        assert not months[24].is_interest_only
        assert months[24].principal_payment > 0

    def test_dates_advance_monthly(self, offset_loan):
        months = simulate_loan(offset_loan, 14).months
        assert months[1].date == date(2025, 2, 1)
        assert months[13].date == date(2026, 2, 1)

    def test_plain_loan_fully_repaid_at_term(self, plain_loan):
        schedule = simulate_loan(plain_loan)
        assert len(schedule.months) == 360
        assert schedule.months[-1].ending_balance == 0
        assert schedule.total_payments == (
            plain_loan.start_balance_cents + schedule.total_interest
        )

    def test_plain_loan_level_payment(self, plain_loan):
        """Without an offset the re-amortized payment stays within a cent."""
        expected = monthly_payment(40_000_000, 0.06, 30)
        payments = [m.total_payment for m in simulate_loan(plain_loan).months[:120]]
        assert all(abs(p - expected) <= 1 for p in payments)

    def test_zero_rate_straight_line(self):
        loan = LoanTerms(
            id="zero",
            start_date=date(2025, 1, 1),
            start_balance_cents=1_200_000,
            annual_rate=0.0,
            term_years=1,
        )
        schedule = simulate_loan(loan)
        assert [m.total_payment for m in schedule.months] == [100_000] * 12
        assert schedule.months[-1].ending_balance == 0
        assert schedule.total_interest == 0

    def test_zero_balance_loan_has_no_months(self):
        loan = LoanTerms(
            id="empty",
            start_date=date(2025, 1, 1),
            start_balance_cents=0,
            annual_rate=0.05,
        )
        schedule = simulate_loan(loan)
        assert schedule.months == ()
        assert schedule.total_interest == 0
        assert schedule.total_payments == 0

    def test_run_length_override(self, offset_loan):
        assert len(simulate_loan(offset_loan, 36).months) == 36


class TestLoanStepper:
    def test_matches_simulate_loan(self, offset_loan):
        schedule = simulate_loan(offset_loan)
        stepper = LoanStepper(offset_loan)
        stepped = [stepper.step() for _ in range(len(schedule.months))]
        assert tuple(stepped) == schedule.months
        assert stepper.total_interest == schedule.total_interest

    def test_returns_none_when_done(self, offset_loan):
        stepper = LoanStepper(offset_loan, 2)
        assert stepper.step() is not None
        assert stepper.step() is not None
        assert stepper.done
        assert stepper.step() is None

    def test_does_not_modify_loan(self, offset_loan):
        snapshot = replace(offset_loan)
        stepper = LoanStepper(offset_loan)
        for _ in range(30):
            stepper.step()
        assert offset_loan == snapshot


class TestPaymentForMonth:
    def test_interest_only_month(self, offset_loan):
        assert payment_for_month(offset_loan, 1, 77_056_100, 5_200_000) == 359_281

    def test_principal_and_interest_month(self, offset_loan):
        payment = payment_for_month(offset_loan, 25, 77_056_100, 10_000_000)
        assert payment == monthly_payment(67_056_100, 0.06, 336 / 12)
        assert payment > interest_only_payment(67_056_100, 0.06)

    def test_offset_above_balance(self, offset_loan):
        assert payment_for_month(offset_loan, 30, 1_000_000, 2_000_000) == 0


class TestOffsetSavings:
    def test_offset_saves_interest(self, offset_loan):
        assert offset_savings(offset_loan) > 0

    def test_no_offset_saves_nothing(self, plain_loan):
        assert offset_savings(plain_loan) == 0

    def test_matches_schedule_difference(self, offset_loan):
        without = replace(
            offset_loan, offset_start_cents=0, offset_contrib_monthly_cents=0
        )
        expected = (
            simulate_loan(without, 60).total_interest
            - simulate_loan(offset_loan, 60).total_interest
        )
        assert offset_savings(offset_loan, 60) == expected


class TestRefinance:
    def test_new_terms(self, offset_loan):
        new = refinance(offset_loan, date(2027, 1, 1), 0.055, 0, 25)
        assert new.id == offset_loan.id
        assert new.start_date == date(2027, 1, 1)
        assert new.annual_rate == 0.055
        assert new.io_years == 0
        assert new.term_years == 25
        assert new.start_balance_cents == offset_loan.start_balance_cents
        assert new.offset_start_cents == offset_loan.offset_start_cents

    def test_input_loan_unchanged(self, offset_loan):
        refinance(offset_loan, date(2027, 1, 1), 0.055)
        assert offset_loan.annual_rate == 0.06
        assert offset_loan.io_years == 2

    @pytest.mark.parametrize("rate", [0.04, 0.08])
    def test_rate_drives_first_payment(self, plain_loan, rate):
        new = refinance(plain_loan, date(2026, 1, 1), rate)
        # a one-month run would re-amortize the whole balance into month 1
        first = simulate_loan(new).months[0]
        assert first.total_payment == monthly_payment(40_000_000, rate, 30)
