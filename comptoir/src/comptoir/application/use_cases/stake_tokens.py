"""
Stake tokens use case.
"""

from comptoir.application.use_cases.common import resolve_user
from comptoir.domain.entities.staking_position import (
    MIN_STAKE_AMOUNT,
    StakingPosition,
)
from comptoir.domain.exceptions import ValidationError
from comptoir.domain.repositories.i_staking_position_repository import (
    IStakingPositionRepository,
)
from comptoir.domain.repositories.i_user_repository import IUserRepository
from comptoir.domain.services.clock import Clock, utc_now


class StakeTokens:
    """
    Open a staking position.

    Business rules:
    - Amount must be at least MIN_STAKE_AMOUNT
    - Wallet must belong to a registered user
    - Position starts active with zero rewards
    """

    def __init__(
        self,
        user_repository: IUserRepository,
        staking_repository: IStakingPositionRepository,
        clock: Clock = utc_now,
    ):
        """
        Initialize use case.

        Args:
            user_repository: User repository
            staking_repository: Staking position repository
            clock: Source of the current time
        """
        self.user_repository = user_repository
        self.staking_repository = staking_repository
        self.clock = clock

    async def execute(self, wallet_address: str, amount: float) -> StakingPosition:
        """
        Stake ``amount`` tokens for the wallet's owner.

        Returns:
            Created StakingPosition

        Raises:
            ValidationError: If amount is below the minimum
            EntityNotFoundError: If wallet is not registered
        """
        if amount < MIN_STAKE_AMOUNT:
            raise ValidationError(
                field="amount",
                reason=f"Minimum stake amount is {MIN_STAKE_AMOUNT:g} tokens",
            )

        user = await resolve_user(self.user_repository, wallet_address)

        position = StakingPosition(
            user_id=user.id,
            amount=amount,
            start_date=self.clock(),
        )
        return await self.staking_repository.create(position)
