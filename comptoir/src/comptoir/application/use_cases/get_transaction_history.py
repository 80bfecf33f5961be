"""
Get transaction history use case.
"""

from dataclasses import dataclass, field

from comptoir.application.use_cases.common import resolve_user
from comptoir.domain.entities.transaction import Transaction
from comptoir.domain.exceptions import ValidationError
from comptoir.domain.repositories.i_transaction_repository import (
    ITransactionRepository,
)
from comptoir.domain.repositories.i_user_repository import IUserRepository

DEFAULT_PAGE_SIZE = 50
MAX_PAGE_SIZE = 500


@dataclass
class TransactionPage:
    """One page of a user's transactions."""

    transactions: list[Transaction] = field(default_factory=list)
    total: int = 0
    limit: int = DEFAULT_PAGE_SIZE
    offset: int = 0


class GetTransactionHistory:
    """Paginated transaction history, newest first."""

    def __init__(
        self,
        user_repository: IUserRepository,
        transaction_repository: ITransactionRepository,
    ):
        self.user_repository = user_repository
        self.transaction_repository = transaction_repository

    async def execute(
        self,
        wallet_address: str,
        limit: int = DEFAULT_PAGE_SIZE,
        offset: int = 0,
    ) -> TransactionPage:
        """
        Raises:
            ValidationError: limit outside 1..MAX_PAGE_SIZE or negative offset
            EntityNotFoundError: Wallet not registered
        """
        if limit < 1 or limit > MAX_PAGE_SIZE:
            raise ValidationError(
                field="limit", reason=f"Limit must be between 1 and {MAX_PAGE_SIZE}"
            )
        if offset < 0:
            raise ValidationError(field="offset", reason="Offset cannot be negative")

        user = await resolve_user(self.user_repository, wallet_address)

        transactions = await self.transaction_repository.list_by_user(
            user.id, limit=limit, offset=offset
        )
        total = await self.transaction_repository.count_by_user(user.id)

        return TransactionPage(
            transactions=transactions,
            total=total,
            limit=limit,
            offset=offset,
        )
