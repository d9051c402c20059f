"""
Tests for payment and present-value formulas.
"""

from decimal import Decimal

import pytest

from propforecast.core.amortization import (
    annuity_payment,
    interest_only_payment,
    monthly_payment,
    present_value,
)
from propforecast.core.currency import (
    RoundingPolicy,
    cents_to_dollars,
    dollars_to_cents,
    round_cents,
)


class TestMonthlyPayment:
    """Fixed principal-and-interest payment."""

    def test_thirty_year_six_percent(self):
        """$1m over 30 years at 6% is the textbook ~$5,995.51 payment."""
        payment = monthly_payment(100_000_000, 0.06, 30)
        assert abs(payment - 599_550) <= 1

    @pytest.mark.parametrize(
        "principal,term_years",
        [(1_200_000, 1), (1_000_000, 3), (77_056_100, 30), (1, 1)],
    )
    def test_zero_rate_is_straight_line(self, principal, term_years):
        """A zero rate divides evenly instead of evaluating 0/0."""
        expected = round_cents(Decimal(principal) / (term_years * 12))
        assert monthly_payment(principal, 0.0, term_years) == expected

    def test_zero_rate_exact_values(self):
        assert monthly_payment(1_200_000, 0.0, 1) == 100_000
        assert monthly_payment(1_000_000, 0.0, 3) == 27_778

    def test_fractional_term_rounds_to_whole_months(self):
        """Remaining-months terms (e.g. 336/12) amortize over exactly 336 payments."""
        assert monthly_payment(50_000_000, 0.05, 336 / 12) == annuity_payment(
            50_000_000, 0.05, 336
        )

    def test_payment_covers_interest(self):
        principal = 50_000_000
        assert monthly_payment(principal, 0.07, 25) > interest_only_payment(
            principal, 0.07
        )

    def test_single_month_repays_principal_plus_interest(self):
        """With one payment left the payment is P(1+r)."""
        assert annuity_payment(10_000_000, 0.06, 1) == 10_050_000


class TestInterestOnlyPayment:
    def test_half_cent_rounds_up(self):
        """71,856,100 x 0.005 = 359,280.5, which rounds to 359,281."""
        assert interest_only_payment(71_856_100, 0.06) == 359_281

    def test_zero_principal(self):
        assert interest_only_payment(0, 0.06) == 0


class TestPresentValue:
    def test_ten_years_at_two_and_a_half_percent(self):
        assert present_value(1_000_000, 0.025, 10) == 781_198

    @pytest.mark.parametrize("amount", [0, 1, 54_263_744, -2_500_000])
    def test_year_zero_is_identity(self, amount):
        assert present_value(amount, 0.025, 0) == amount

    def test_fractional_years_compound_annually(self):
        """Half a year discounts by sqrt(1 + rate), not by a monthly rate."""
        expected = round(10_000_000 / (1.04**0.5))
        assert abs(present_value(10_000_000, 0.04, 0.5) - expected) <= 1

    def test_negative_amounts_discount_toward_zero(self):
        assert present_value(-1_000_000, 0.025, 10) == -781_198


class TestCurrency:
    def test_round_cents_half_up(self):
        assert round_cents(359_280.5) == 359_281
        assert round_cents(Decimal("2.5")) == 3
        assert round_cents(Decimal("-2.5")) == -3

    def test_round_cents_bankers(self):
        assert round_cents(Decimal("2.5"), RoundingPolicy.BANKERS) == 2

    def test_round_cents_passes_ints_through(self):
        assert round_cents(12_345) == 12_345

    def test_dollar_conversions(self):
        assert dollars_to_cents("770561.00") == 77_056_100
        assert dollars_to_cents(0.1) == 10
        assert cents_to_dollars(123) == Decimal("1.23")
