"""Pure domain services."""

from comptoir.domain.services.accrual import (
    BORROWING_ANNUAL_RATE_PERCENT,
    LENDING_ANNUAL_RATE_PERCENT,
    SECONDS_PER_YEAR,
    STAKING_ANNUAL_RATE_PERCENT,
    STAKING_DAILY_RATE_PERCENT,
    accrue,
    staking_reward,
)
from comptoir.domain.services.clock import Clock, utc_now

__all__ = [
    "accrue",
    "staking_reward",
    "SECONDS_PER_YEAR",
    "STAKING_DAILY_RATE_PERCENT",
    "STAKING_ANNUAL_RATE_PERCENT",
    "LENDING_ANNUAL_RATE_PERCENT",
    "BORROWING_ANNUAL_RATE_PERCENT",
    "Clock",
    "utc_now",
]
