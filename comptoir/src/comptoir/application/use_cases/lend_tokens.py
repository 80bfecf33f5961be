"""
Lend tokens use case.
"""

from comptoir.application.use_cases.common import resolve_user
from comptoir.domain.entities.lending_position import LendingPosition, LendingType
from comptoir.domain.exceptions import ValidationError
from comptoir.domain.repositories.i_lending_position_repository import (
    ILendingPositionRepository,
)
from comptoir.domain.repositories.i_user_repository import IUserRepository
from comptoir.domain.services.accrual import LENDING_ANNUAL_RATE_PERCENT
from comptoir.domain.services.clock import Clock, utc_now


class LendTokens:
    """
    Open a lend position at the fixed lending rate.

    Business rules:
    - Token is required and amount must be positive
    - Wallet must belong to a registered user
    """

    def __init__(
        self,
        user_repository: IUserRepository,
        lending_repository: ILendingPositionRepository,
        clock: Clock = utc_now,
    ):
        """
        Initialize use case.

        Args:
            user_repository: User repository
            lending_repository: Lending position repository
            clock: Source of the current time
        """
        self.user_repository = user_repository
        self.lending_repository = lending_repository
        self.clock = clock

    async def execute(
        self, wallet_address: str, token: str, amount: float
    ) -> LendingPosition:
        """
        Record a lend position.

        Raises:
            ValidationError: Token missing or amount not positive
            EntityNotFoundError: Wallet not registered
        """
        if not token or not token.strip():
            raise ValidationError(field="token", reason="Token is required")
        if amount <= 0:
            raise ValidationError(field="amount", reason="Amount must be positive")

        user = await resolve_user(self.user_repository, wallet_address)

        position = LendingPosition(
            user_id=user.id,
            type=LendingType.LEND,
            token=token.strip(),
            amount=amount,
            interest_rate=LENDING_ANNUAL_RATE_PERCENT,
            start_date=self.clock(),
        )
        return await self.lending_repository.create(position)
