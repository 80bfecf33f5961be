"""
LendingPosition entity - supplied or borrowed tokens at a fixed rate.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional

from comptoir.domain.entities.staking_position import PositionStatus
from comptoir.domain.services.accrual import accrue
from comptoir.domain.services.clock import utc_now

COLLATERAL_RATIO = 1.5


class LendingType(str, Enum):
    """Side of a lending position."""

    LEND = "lend"
    BORROW = "borrow"


def required_collateral(borrow_amount: float) -> float:
    """Minimum collateral accepted for a loan of ``borrow_amount``."""
    return borrow_amount * COLLATERAL_RATIO


@dataclass
class LendingPosition:
    """
    Lending position entity.

    Business rules:
    - Amount must be positive
    - Interest is simple, on principal only
    - Lend positions earn interest; borrow positions owe it
    - Status transitions: active -> completed (borrow, on repay)
    """

    id: Optional[int] = field(default=None)
    user_id: int = field(default=0)
    type: LendingType = field(default=LendingType.LEND)
    token: str = field(default="")
    amount: float = field(default=0.0)
    interest_rate: float = field(default=0.0)
    start_date: datetime = field(default_factory=utc_now)
    status: PositionStatus = field(default=PositionStatus.ACTIVE)

    def __post_init__(self):
        """Validate position data after initialization."""
        if not self.token:
            raise ValueError("Token is required")
        if self.amount <= 0:
            raise ValueError("Amount must be positive")
        if self.interest_rate < 0:
            raise ValueError("Interest rate cannot be negative")

    def is_active(self) -> bool:
        return self.status == PositionStatus.ACTIVE

    def interest_accrued(self, now: datetime) -> float:
        """Interest accrued since the position opened."""
        return accrue(self.amount, self.interest_rate, now - self.start_date)

    def total_value(self, now: datetime) -> float:
        """Principal plus earned interest for lends; principal for borrows."""
        if self.type == LendingType.LEND:
            return self.amount + self.interest_accrued(now)
        return self.amount

    def to_dict(self) -> dict:
        """Convert entity to dictionary representation."""
        return {
            "id": self.id,
            "user_id": self.user_id,
            "type": self.type.value,
            "token": self.token,
            "amount": self.amount,
            "interest_rate": self.interest_rate,
            "start_date": self.start_date.isoformat(),
            "status": self.status.value,
        }
