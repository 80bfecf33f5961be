"""
Get performance use case.
"""

from dataclasses import dataclass

from comptoir.application.use_cases.common import resolve_user
from comptoir.domain.repositories.i_staking_position_repository import (
    IStakingPositionRepository,
)
from comptoir.domain.repositories.i_transaction_repository import (
    ITransactionRepository,
)
from comptoir.domain.repositories.i_user_repository import IUserRepository


@dataclass
class Performance:
    """Trading activity and realized staking rewards for one user."""

    total_transactions: int = 0
    total_fees_paid: float = 0.0
    swaps: int = 0
    buys: int = 0
    sells: int = 0
    staking_rewards: float = 0.0

    @property
    def profit_loss(self) -> float:
        return self.staking_rewards - self.total_fees_paid


class GetPerformance:
    """
    Summarize a user's performance.

    Staking rewards are the stored snapshots only, so active positions
    contribute nothing until unstaked.
    """

    def __init__(
        self,
        user_repository: IUserRepository,
        transaction_repository: ITransactionRepository,
        staking_repository: IStakingPositionRepository,
    ):
        self.user_repository = user_repository
        self.transaction_repository = transaction_repository
        self.staking_repository = staking_repository

    async def execute(self, wallet_address: str) -> Performance:
        user = await resolve_user(self.user_repository, wallet_address)

        stats = await self.transaction_repository.get_user_stats(user.id)
        rewards = await self.staking_repository.total_rewards_for_user(user.id)

        return Performance(
            total_transactions=stats.total_transactions,
            total_fees_paid=stats.total_fees,
            swaps=stats.swaps,
            buys=stats.buys,
            sells=stats.sells,
            staking_rewards=rewards,
        )
