"""
List orders use case.
"""

from comptoir.application.use_cases.common import resolve_user
from comptoir.domain.entities.transaction import Transaction
from comptoir.domain.repositories.i_transaction_repository import (
    ITransactionRepository,
)
from comptoir.domain.repositories.i_user_repository import IUserRepository

RECENT_ORDERS_LIMIT = 100


class ListOrders:
    """A user's most recent trades of any type, newest first."""

    def __init__(
        self,
        user_repository: IUserRepository,
        transaction_repository: ITransactionRepository,
    ):
        self.user_repository = user_repository
        self.transaction_repository = transaction_repository

    async def execute(self, wallet_address: str) -> list[Transaction]:
        user = await resolve_user(self.user_repository, wallet_address)
        return await self.transaction_repository.list_by_user(
            user.id, limit=RECENT_ORDERS_LIMIT
        )
