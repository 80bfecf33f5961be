"""
Get lending positions use case.
"""

from dataclasses import dataclass

from comptoir.application.use_cases.common import resolve_user
from comptoir.domain.entities.lending_position import LendingPosition
from comptoir.domain.repositories.i_lending_position_repository import (
    ILendingPositionRepository,
)
from comptoir.domain.repositories.i_user_repository import IUserRepository
from comptoir.domain.services.clock import Clock, utc_now


@dataclass
class LendingPositionView:
    """A lending position with figures computed at read time."""

    position: LendingPosition
    interest_accrued: float
    total_value: float


class GetLendingPositions:
    """List a user's lend and borrow positions, newest first."""

    def __init__(
        self,
        user_repository: IUserRepository,
        lending_repository: ILendingPositionRepository,
        clock: Clock = utc_now,
    ):
        self.user_repository = user_repository
        self.lending_repository = lending_repository
        self.clock = clock

    async def execute(self, wallet_address: str) -> list[LendingPositionView]:
        user = await resolve_user(self.user_repository, wallet_address)
        positions = await self.lending_repository.list_by_user(user.id)
        now = self.clock()

        return [
            LendingPositionView(
                position=position,
                interest_accrued=position.interest_accrued(now),
                total_value=position.total_value(now),
            )
            for position in positions
        ]
