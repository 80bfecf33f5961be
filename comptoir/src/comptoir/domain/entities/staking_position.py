"""
StakingPosition entity - tokens locked for daily rewards.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional

from comptoir.domain.services.accrual import staking_reward
from comptoir.domain.services.clock import utc_now

MIN_STAKE_AMOUNT = 100.0


class PositionStatus(str, Enum):
    """Lifecycle shared by staking and lending positions."""

    ACTIVE = "active"
    COMPLETED = "completed"


@dataclass
class StakingPosition:
    """
    Staking position entity.

    Business rules:
    - Principal must be at least MIN_STAKE_AMOUNT
    - Rewards are 0 until the position is finalized
    - Status transitions: active -> completed (once)
    """

    id: Optional[int] = field(default=None)
    user_id: int = field(default=0)
    amount: float = field(default=MIN_STAKE_AMOUNT)
    rewards: float = field(default=0.0)
    start_date: datetime = field(default_factory=utc_now)
    status: PositionStatus = field(default=PositionStatus.ACTIVE)

    def __post_init__(self):
        """Validate position data after initialization."""
        if self.amount < MIN_STAKE_AMOUNT:
            raise ValueError(
                f"Minimum stake amount is {MIN_STAKE_AMOUNT:g} tokens"
            )

    def is_active(self) -> bool:
        return self.status == PositionStatus.ACTIVE

    def pending_rewards(self, now: datetime) -> float:
        """Rewards accrued so far without finalizing the position."""
        return staking_reward(self.amount, now - self.start_date)

    def earned_rewards(self, now: datetime) -> float:
        """Stored rewards when completed, live accrual when active."""
        if self.is_active():
            return self.pending_rewards(now)
        return self.rewards

    def complete(self, now: datetime) -> float:
        """
        Snapshot rewards and close the position.

        Raises:
            ValueError: If position is already completed
        """
        if not self.is_active():
            raise ValueError("Staking position is already completed")

        self.rewards = self.pending_rewards(now)
        self.status = PositionStatus.COMPLETED
        return self.rewards

    def to_dict(self) -> dict:
        """Convert entity to dictionary representation."""
        return {
            "id": self.id,
            "user_id": self.user_id,
            "amount": self.amount,
            "rewards": self.rewards,
            "start_date": self.start_date.isoformat(),
            "status": self.status.value,
        }
