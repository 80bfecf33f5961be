"""
Transaction entity - append-only record of swaps and orders.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional

from comptoir.domain.services.clock import utc_now


class TransactionType(str, Enum):
    """Kinds of recorded trades."""

    SWAP = "swap"
    BUY = "buy"
    SELL = "sell"


class TransactionStatus(str, Enum):
    """Transaction processing states."""

    PENDING = "pending"
    COMPLETED = "completed"


@dataclass
class Transaction:
    """
    Transaction entity representing a trade recorded for a user.

    Business rules:
    - Amount in must be positive
    - Fee cannot be negative
    - Swaps carry both tokens; orders carry only token_in and a price
    """

    id: Optional[int] = field(default=None)
    user_id: int = field(default=0)
    type: TransactionType = field(default=TransactionType.SWAP)
    token_in: str = field(default="")
    token_out: Optional[str] = field(default=None)
    amount_in: float = field(default=0.0)
    amount_out: Optional[float] = field(default=None)
    price: Optional[float] = field(default=None)
    fee: float = field(default=0.0)
    status: TransactionStatus = field(default=TransactionStatus.PENDING)
    tx_hash: Optional[str] = field(default=None)
    created_at: datetime = field(default_factory=utc_now)

    def __post_init__(self):
        """Validate transaction data after initialization."""
        if not self.token_in:
            raise ValueError("Token is required")
        if self.amount_in <= 0:
            raise ValueError("Transaction amount must be positive")
        if self.fee < 0:
            raise ValueError("Fee cannot be negative")

    def to_dict(self) -> dict:
        """Convert entity to dictionary representation."""
        return {
            "id": self.id,
            "user_id": self.user_id,
            "type": self.type.value,
            "token_in": self.token_in,
            "token_out": self.token_out,
            "amount_in": self.amount_in,
            "amount_out": self.amount_out,
            "price": self.price,
            "fee": self.fee,
            "status": self.status.value,
            "tx_hash": self.tx_hash,
            "created_at": self.created_at.isoformat(),
        }
