"""
Transaction repository interface.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from comptoir.domain.entities.transaction import Transaction


@dataclass
class TradingStats:
    """Aggregate trade figures for one user."""

    total_transactions: int = 0
    total_fees: float = 0.0
    swaps: int = 0
    buys: int = 0
    sells: int = 0


@dataclass
class PlatformTradingStats:
    """Aggregate trade figures across all users."""

    total_users: int = 0
    total_transactions: int = 0
    total_fees: float = 0.0


class ITransactionRepository(ABC):
    """Interface for the append-only trade log."""

    @abstractmethod
    async def create(self, transaction: Transaction) -> Transaction:
        """Append a transaction and return it with its ID."""

    @abstractmethod
    async def list_by_user(
        self, user_id: int, limit: int = 100, offset: int = 0
    ) -> list[Transaction]:
        """List a user's transactions, newest first."""

    @abstractmethod
    async def count_by_user(self, user_id: int) -> int:
        """Count a user's transactions."""

    @abstractmethod
    async def get_user_stats(self, user_id: int) -> TradingStats:
        """Aggregate counts and fees for one user."""

    @abstractmethod
    async def get_platform_stats(self) -> PlatformTradingStats:
        """Aggregate counts and fees for the whole platform."""
