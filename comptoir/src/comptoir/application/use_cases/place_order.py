"""
Place order use case.

There is no order book: every order is recorded as filled at the
requested price.
"""

from dataclasses import dataclass

from comptoir.application.use_cases.common import resolve_user
from comptoir.domain.entities.transaction import (
    Transaction,
    TransactionStatus,
    TransactionType,
)
from comptoir.domain.exceptions import ValidationError
from comptoir.domain.repositories.i_transaction_repository import (
    ITransactionRepository,
)
from comptoir.domain.repositories.i_user_repository import IUserRepository
from comptoir.domain.services.clock import Clock, utc_now

ORDER_TYPES = (TransactionType.BUY.value, TransactionType.SELL.value)


@dataclass
class OrderCommand:
    """Command to place a buy or sell order."""

    wallet_address: str
    type: str
    token: str
    amount: float
    price: float


class PlaceOrder:
    """Record a buy or sell order with fee = amount * price * fee_percent / 100."""

    def __init__(
        self,
        user_repository: IUserRepository,
        transaction_repository: ITransactionRepository,
        fee_percent: float,
        clock: Clock = utc_now,
    ):
        self.user_repository = user_repository
        self.transaction_repository = transaction_repository
        self.fee_percent = fee_percent
        self.clock = clock

    async def execute(self, command: OrderCommand) -> Transaction:
        """
        Raises:
            ValidationError: Type not buy/sell, missing token, bad amounts
            EntityNotFoundError: Wallet not registered
        """
        if command.type not in ORDER_TYPES:
            raise ValidationError(field="type", reason="Type must be buy or sell")
        if not command.token:
            raise ValidationError(field="token", reason="Token is required")
        if command.amount <= 0:
            raise ValidationError(field="amount", reason="Amount must be positive")
        if command.price <= 0:
            raise ValidationError(field="price", reason="Price must be positive")

        user = await resolve_user(self.user_repository, command.wallet_address)

        transaction = Transaction(
            user_id=user.id,
            type=TransactionType(command.type),
            token_in=command.token,
            amount_in=command.amount,
            price=command.price,
            fee=command.amount * command.price * (self.fee_percent / 100),
            status=TransactionStatus.COMPLETED,
            created_at=self.clock(),
        )
        return await self.transaction_repository.create(transaction)
