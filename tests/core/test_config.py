"""
Tests for engine configuration.
"""

from datetime import date

import pytest

from propforecast.core.config import DEFAULT_CONFIG, EngineConfig
from propforecast.core.models import LoanTerms, Scenario, UserProfile
from propforecast.core.utils import MONTHS_PER_YEAR


class TestEngineConfig:
    def test_default_milestones_are_read_only(self):
        with pytest.raises(TypeError):
            DEFAULT_CONFIG.milestone_months["year10"] = 1
        assert DEFAULT_CONFIG.milestone_months["year10"] == 120

    def test_custom_milestones_are_copied(self):
        milestones = {"year10": 60, "year20": 120, "year30": 180}
        config = EngineConfig(milestone_months=milestones)
        milestones["year10"] = 1
        assert config.milestone_months["year10"] == 60
        with pytest.raises(TypeError):
            config.milestone_months["year20"] = 1

    def test_months_per_year_is_not_a_setting(self):
        assert EngineConfig().milestone_months == DEFAULT_CONFIG.milestone_months
        assert not hasattr(DEFAULT_CONFIG, "months_per_year")


class TestMonthsPerYear:
    def test_records_use_calendar_months(self):
        loan = LoanTerms(
            id="l",
            start_date=date(2025, 1, 1),
            start_balance_cents=1,
            annual_rate=0.05,
            io_years=1.5,
            term_years=25,
        )
        assert loan.term_months == 25 * MONTHS_PER_YEAR
        assert loan.io_months == 18

        scenario = Scenario(
            id="s",
            name="S",
            start_date=date(2025, 1, 1),
            profile=UserProfile(name="P", date_of_birth=date(1990, 1, 1)),
            horizon_years=2,
        )
        assert scenario.horizon_months == 2 * MONTHS_PER_YEAR
