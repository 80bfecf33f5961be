"""
Get portfolio use case.
"""

from dataclasses import dataclass

from comptoir.application.use_cases.common import resolve_user
from comptoir.domain.entities.lending_position import LendingType
from comptoir.domain.repositories.i_lending_position_repository import (
    ILendingPositionRepository,
)
from comptoir.domain.repositories.i_staking_position_repository import (
    IStakingPositionRepository,
)
from comptoir.domain.repositories.i_user_repository import IUserRepository


@dataclass
class Portfolio:
    """Principal held in a user's active positions."""

    total_staked: float = 0.0
    total_lent: float = 0.0
    total_borrowed: float = 0.0
    staking_positions: int = 0
    lending_positions: int = 0

    @property
    def total_value(self) -> float:
        return self.total_staked + self.total_lent - self.total_borrowed


class GetPortfolio:
    """
    Aggregate a user's active positions.

    Only principal is counted; accrued interest and rewards are not.
    """

    def __init__(
        self,
        user_repository: IUserRepository,
        staking_repository: IStakingPositionRepository,
        lending_repository: ILendingPositionRepository,
    ):
        self.user_repository = user_repository
        self.staking_repository = staking_repository
        self.lending_repository = lending_repository

    async def execute(self, wallet_address: str) -> Portfolio:
        user = await resolve_user(self.user_repository, wallet_address)

        staking = await self.staking_repository.list_by_user(
            user.id, active_only=True
        )
        lending = await self.lending_repository.list_by_user(
            user.id, active_only=True
        )

        return Portfolio(
            total_staked=sum(p.amount for p in staking),
            total_lent=sum(p.amount for p in lending if p.type == LendingType.LEND),
            total_borrowed=sum(
                p.amount for p in lending if p.type == LendingType.BORROW
            ),
            staking_positions=len(staking),
            lending_positions=len(lending),
        )
