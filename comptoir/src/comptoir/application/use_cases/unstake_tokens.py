"""
Unstake tokens use case.
"""

from comptoir.application.use_cases.common import resolve_user
from comptoir.domain.entities.staking_position import StakingPosition
from comptoir.domain.exceptions import EntityNotFoundError
from comptoir.domain.repositories.i_staking_position_repository import (
    IStakingPositionRepository,
)
from comptoir.domain.repositories.i_user_repository import IUserRepository
from comptoir.domain.services.clock import Clock, utc_now


class UnstakeTokens:
    """
    Close a staking position and record its rewards.

    Rewards are computed at call time and stored on the position. Nothing
    is paid out. Two concurrent calls on one position cannot both
    succeed: the status change is a conditional update.
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

    async def execute(self, wallet_address: str, position_id: int) -> StakingPosition:
        """
        Finalize the caller's active position ``position_id``.

        Returns:
            The completed position with its reward snapshot

        Raises:
            EntityNotFoundError: If wallet is unknown, or no active
                position with that id belongs to the user
        """
        user = await resolve_user(self.user_repository, wallet_address)

        position = await self.staking_repository.get_active_for_user(
            position_id, user.id
        )
        if not position:
            raise EntityNotFoundError("Staking position", position_id)

        rewards = position.complete(self.clock())

        if not await self.staking_repository.complete(position.id, rewards):
            raise EntityNotFoundError("Staking position", position_id)

        return position
