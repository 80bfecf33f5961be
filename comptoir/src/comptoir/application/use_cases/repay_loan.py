"""
Repay loan use case.
"""

from dataclasses import dataclass

from comptoir.application.use_cases.common import resolve_user
from comptoir.domain.entities.lending_position import LendingType
from comptoir.domain.exceptions import EntityNotFoundError
from comptoir.domain.repositories.i_lending_position_repository import (
    ILendingPositionRepository,
)
from comptoir.domain.repositories.i_user_repository import IUserRepository
from comptoir.domain.services.clock import Clock, utc_now


@dataclass
class RepaymentResult:
    """Amounts settled when a loan is closed."""

    loan_id: int
    principal: float
    interest: float
    total_repayment: float


class RepayLoan:
    """
    Close an active borrow position.

    Interest is simple interest on the principal at the loan's rate for
    the time it was open. The closing update only matches an active row,
    so a loan is repaid at most once.
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

    async def execute(self, wallet_address: str, loan_id: int) -> RepaymentResult:
        """
        Raises:
            EntityNotFoundError: Wallet unknown, or no active borrow with
                that id belongs to the user
        """
        user = await resolve_user(self.user_repository, wallet_address)

        loan = await self.lending_repository.get_active_for_user(
            loan_id, user.id, LendingType.BORROW
        )
        if not loan:
            raise EntityNotFoundError("Loan", loan_id)

        interest = loan.interest_accrued(self.clock())

        if not await self.lending_repository.complete(loan.id):
            raise EntityNotFoundError("Loan", loan_id)

        return RepaymentResult(
            loan_id=loan.id,
            principal=loan.amount,
            interest=interest,
            total_repayment=loan.amount + interest,
        )
