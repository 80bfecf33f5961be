"""
Accrual calculator - simple (non-compounding) time-based interest.

Every interest or reward figure in the service goes through ``accrue`` so
staking rewards, lending views and loan repayment share one formula.
"""

from datetime import timedelta

SECONDS_PER_DAY = 24 * 60 * 60
SECONDS_PER_YEAR = 365 * SECONDS_PER_DAY

# Staking pays 0.05% of principal per day
STAKING_DAILY_RATE_PERCENT = 0.05
STAKING_ANNUAL_RATE_PERCENT = STAKING_DAILY_RATE_PERCENT * 365

LENDING_ANNUAL_RATE_PERCENT = 5.0
BORROWING_ANNUAL_RATE_PERCENT = 8.0


def accrue(
    principal: float,
    annual_rate_percent: float,
    elapsed: timedelta,
) -> float:
    """
    Compute simple interest accrued over a period.

    Args:
        principal: Position principal
        annual_rate_percent: Annual rate in percent (5.0 means 5%)
        elapsed: Time since the position opened; negative is treated as 0

    Returns:
        principal * (annual_rate_percent / 100) * (elapsed / 1 year)
    """
    seconds = max(elapsed.total_seconds(), 0.0)
    return principal * (annual_rate_percent / 100) * (seconds / SECONDS_PER_YEAR)


def staking_reward(principal: float, elapsed: timedelta) -> float:
    """Reward earned by a staking position held for ``elapsed``."""
    return accrue(principal, STAKING_ANNUAL_RATE_PERCENT, elapsed)
