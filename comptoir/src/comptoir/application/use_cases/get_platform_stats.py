"""
Get platform stats use case.
"""

from dataclasses import dataclass

from comptoir.domain.repositories.i_staking_position_repository import (
    IStakingPositionRepository,
)
from comptoir.domain.repositories.i_transaction_repository import (
    ITransactionRepository,
)


@dataclass
class PlatformStats:
    """Platform-wide totals."""

    total_users: int = 0
    total_transactions: int = 0
    total_fees: float = 0.0
    total_staked: float = 0.0
    total_stakers: int = 0


class GetPlatformStats:
    """
    Aggregate trading and staking across all users.

    ``total_users`` counts users with at least one transaction and
    ``total_stakers`` counts active staking positions.
    """

    def __init__(
        self,
        transaction_repository: ITransactionRepository,
        staking_repository: IStakingPositionRepository,
    ):
        self.transaction_repository = transaction_repository
        self.staking_repository = staking_repository

    async def execute(self) -> PlatformStats:
        trading = await self.transaction_repository.get_platform_stats()
        total_staked, active_positions = (
            await self.staking_repository.get_active_totals()
        )

        return PlatformStats(
            total_users=trading.total_users,
            total_transactions=trading.total_transactions,
            total_fees=trading.total_fees,
            total_staked=total_staked,
            total_stakers=active_positions,
        )
