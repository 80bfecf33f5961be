"""
Unit tests for the accrual calculator.
"""

from datetime import timedelta

import pytest

from comptoir.domain.services.accrual import (
    BORROWING_ANNUAL_RATE_PERCENT,
    accrue,
    staking_reward,
)


class TestAccrual:
    """Simple interest over elapsed time."""

    def test_staking_reward_ten_days(self):
        """1000 tokens staked for 10 days earn 5 tokens."""
        assert staking_reward(1000, timedelta(days=10)) == pytest.approx(5.0)

    def test_staking_reward_one_day(self):
        assert staking_reward(100, timedelta(days=1)) == pytest.approx(0.05)

    def test_zero_elapsed_accrues_nothing(self):
        assert accrue(1000, 5.0, timedelta(0)) == 0.0

    def test_negative_elapsed_treated_as_zero(self):
        """Clock skew never produces negative interest."""
        assert accrue(1000, 5.0, timedelta(seconds=-30)) == 0.0

    def test_one_year_at_annual_rate(self):
        assert accrue(1000, BORROWING_ANNUAL_RATE_PERCENT, timedelta(days=365)) == (
            pytest.approx(80.0)
        )

    def test_monotonic_in_time(self):
        """Holding longer never earns less."""
        values = [
            staking_reward(500, timedelta(hours=hours)) for hours in range(0, 240, 6)
        ]
        assert values == sorted(values)

    def test_monotonic_in_rate(self):
        """A higher rate never earns less over the same period."""
        elapsed = timedelta(days=45)
        rates = [0.0, 0.5, 5.0, 8.0, 18.25, 50.0, 100.0, 250.0]
        values = [accrue(1000, rate, elapsed) for rate in rates]
        assert values == sorted(values)
        assert values[0] == 0.0

    def test_linear_in_principal(self):
        elapsed = timedelta(days=30)
        assert accrue(2000, 5.0, elapsed) == pytest.approx(2 * accrue(1000, 5.0, elapsed))
