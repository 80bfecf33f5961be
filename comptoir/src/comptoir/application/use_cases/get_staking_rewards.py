"""
Get staking rewards use case.
"""

from dataclasses import dataclass, field

from comptoir.application.use_cases.common import resolve_user
from comptoir.domain.entities.staking_position import StakingPosition
from comptoir.domain.repositories.i_staking_position_repository import (
    IStakingPositionRepository,
)
from comptoir.domain.repositories.i_user_repository import IUserRepository
from comptoir.domain.services.clock import Clock, utc_now


@dataclass
class StakingPositionView:
    """A staking position with rewards evaluated at read time."""

    position: StakingPosition
    earned_rewards: float


@dataclass
class StakingRewardsSummary:
    """Staking totals for one user."""

    total_staked: float = 0.0
    total_rewards: float = 0.0
    active_positions: int = 0
    positions: list[StakingPositionView] = field(default_factory=list)


class GetStakingRewards:
    """
    Summarize a user's staking.

    Active positions contribute their principal and live pending rewards;
    completed positions contribute their stored reward snapshot.
    """

    def __init__(
        self,
        user_repository: IUserRepository,
        staking_repository: IStakingPositionRepository,
        clock: Clock = utc_now,
    ):
        self.user_repository = user_repository
        self.staking_repository = staking_repository
        self.clock = clock

    async def execute(self, wallet_address: str) -> StakingRewardsSummary:
        user = await resolve_user(self.user_repository, wallet_address)
        positions = await self.staking_repository.list_by_user(user.id)
        now = self.clock()

        summary = StakingRewardsSummary()
        for position in positions:
            earned = position.earned_rewards(now)
            if position.is_active():
                summary.total_staked += position.amount
                summary.active_positions += 1
            summary.total_rewards += earned
            summary.positions.append(StakingPositionView(position, earned))

        return summary
