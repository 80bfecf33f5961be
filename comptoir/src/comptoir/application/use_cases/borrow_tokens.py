"""
Borrow tokens use case.

Collateral is checked once, when the loan is opened. It is echoed back
to the caller but not persisted: there is no health check afterwards and
no liquidation.
"""

from dataclasses import dataclass

from comptoir.application.use_cases.common import resolve_user
from comptoir.domain.entities.lending_position import (
    LendingPosition,
    LendingType,
    required_collateral,
)
from comptoir.domain.exceptions import InsufficientCollateralError, ValidationError
from comptoir.domain.repositories.i_lending_position_repository import (
    ILendingPositionRepository,
)
from comptoir.domain.repositories.i_user_repository import IUserRepository
from comptoir.domain.services.accrual import BORROWING_ANNUAL_RATE_PERCENT
from comptoir.domain.services.clock import Clock, utc_now


@dataclass
class BorrowCommand:
    """Command to open a loan."""

    wallet_address: str
    collateral_token: str
    borrow_token: str
    collateral_amount: float
    borrow_amount: float


@dataclass
class BorrowResult:
    """Opened loan plus the collateral it was accepted against."""

    position: LendingPosition
    collateral_token: str
    collateral_amount: float


class BorrowTokens:
    """
    Use case for opening a collateralized loan.

    Business rules:
    - Both tokens are required, borrow amount must be positive
    - collateral_amount >= COLLATERAL_RATIO * borrow_amount
    - Fixed borrowing rate
    """

    def __init__(
        self,
        user_repository: IUserRepository,
        lending_repository: ILendingPositionRepository,
        clock: Clock = utc_now,
    ):
        self.user_repository = user_repository
        self.lending_repository = lending_repository
        self.clock = clock

    async def execute(self, command: BorrowCommand) -> BorrowResult:
        """
        Open a borrow position.

        Args:
            command: Borrow parameters

        Returns:
            BorrowResult with the created position

        Raises:
            ValidationError: Missing token or non-positive amounts
            InsufficientCollateralError: Collateral below the required ratio
            EntityNotFoundError: Wallet not registered
        """
        if not command.collateral_token or not command.borrow_token:
            raise ValidationError(
                field="token", reason="Collateral and borrow tokens are required"
            )
        if command.borrow_amount <= 0:
            raise ValidationError(
                field="borrow_amount", reason="Amount must be positive"
            )
        if command.collateral_amount < 0:
            raise ValidationError(
                field="collateral_amount", reason="Amount cannot be negative"
            )

        required = required_collateral(command.borrow_amount)
        if command.collateral_amount < required:
            raise InsufficientCollateralError(
                required=required,
                provided=command.collateral_amount,
            )

        user = await resolve_user(self.user_repository, command.wallet_address)

        position = LendingPosition(
            user_id=user.id,
            type=LendingType.BORROW,
            token=command.borrow_token,
            amount=command.borrow_amount,
            interest_rate=BORROWING_ANNUAL_RATE_PERCENT,
            start_date=self.clock(),
        )
        created = await self.lending_repository.create(position)

        return BorrowResult(
            position=created,
            collateral_token=command.collateral_token,
            collateral_amount=command.collateral_amount,
        )
