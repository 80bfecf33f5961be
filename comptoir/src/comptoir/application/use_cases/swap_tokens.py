"""
Swap tokens use case.
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
from comptoir.domain.value_objects.token_catalog import SWAP_EXCHANGE_RATE
from comptoir.domain.value_objects.wallet_address import EVM_ADDRESS_PATTERN


@dataclass
class SwapCommand:
    """Command to swap one token for another."""

    wallet_address: str
    token_in: str
    token_out: str
    amount_in: float


class SwapTokens:
    """
    Record a token swap at the fixed exchange rate.

    Business rules:
    - Wallet must be a 0x-prefixed 40 hex digit address
    - amount_out = amount_in * SWAP_EXCHANGE_RATE
    - fee = amount_in * fee_percent / 100
    - Swaps complete immediately; no tokens move
    """

    def __init__(
        self,
        user_repository: IUserRepository,
        transaction_repository: ITransactionRepository,
        fee_percent: float,
        clock: Clock = utc_now,
    ):
        """
        Initialize use case.

        Args:
            user_repository: User repository
            transaction_repository: Transaction repository
            fee_percent: Trading fee in percent (0.25 means 0.25%)
            clock: Source of the current time
        """
        self.user_repository = user_repository
        self.transaction_repository = transaction_repository
        self.fee_percent = fee_percent
        self.clock = clock

    async def execute(self, command: SwapCommand) -> Transaction:
        """
        Execute the swap.

        Returns:
            Recorded swap transaction

        Raises:
            ValidationError: Malformed wallet, missing token, bad amount
            EntityNotFoundError: Wallet not registered
        """
        if not command.wallet_address or not EVM_ADDRESS_PATTERN.match(
            command.wallet_address
        ):
            raise ValidationError(
                field="wallet_address", reason="Invalid wallet address format"
            )
        if not command.token_in or not command.token_out:
            raise ValidationError(field="token", reason="Both tokens are required")
        if command.amount_in <= 0:
            raise ValidationError(field="amount_in", reason="Amount must be positive")

        user = await resolve_user(self.user_repository, command.wallet_address)

        transaction = Transaction(
            user_id=user.id,
            type=TransactionType.SWAP,
            token_in=command.token_in,
            token_out=command.token_out,
            amount_in=command.amount_in,
            amount_out=command.amount_in * SWAP_EXCHANGE_RATE,
            fee=command.amount_in * (self.fee_percent / 100),
            status=TransactionStatus.COMPLETED,
            created_at=self.clock(),
        )
        return await self.transaction_repository.create(transaction)
