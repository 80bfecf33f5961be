"""
Trading API schemas.
"""

from datetime import datetime
from typing import Optional

from comptoir.domain.entities.transaction import Transaction
from comptoir.presentation.schemas.base import CamelModel


class TokenResponse(CamelModel):
    symbol: str
    name: str
    address: str
    price: float
    change_24h: float
    volume_24h: float


class TokensResponse(CamelModel):
    tokens: list[TokenResponse]


class SwapRequest(CamelModel):
    token_in: str
    token_out: str
    amount_in: float
    wallet_address: str


class SwapResponse(CamelModel):
    transaction_id: int
    token_in: str
    token_out: str
    amount_in: float
    amount_out: float
    fee: float
    status: str
    message: str = "Swap executed successfully"


class OrderRequest(CamelModel):
    type: str
    token: str
    amount: float
    price: float
    wallet_address: str


class OrderResponse(CamelModel):
    order_id: int
    type: str
    token: str
    amount: float
    price: float
    fee: float
    status: str
    message: str


class TransactionResponse(CamelModel):
    """Recorded trade."""

    id: int
    type: str
    token_in: str
    token_out: Optional[str] = None
    amount_in: float
    amount_out: Optional[float] = None
    price: Optional[float] = None
    fee: float
    status: str
    tx_hash: Optional[str] = None
    created_at: datetime

    @classmethod
    def from_entity(cls, transaction: Transaction) -> "TransactionResponse":
        return cls(
            id=transaction.id,
            type=transaction.type.value,
            token_in=transaction.token_in,
            token_out=transaction.token_out,
            amount_in=transaction.amount_in,
            amount_out=transaction.amount_out,
            price=transaction.price,
            fee=transaction.fee,
            status=transaction.status.value,
            tx_hash=transaction.tx_hash,
            created_at=transaction.created_at,
        )


class TransactionsResponse(CamelModel):
    transactions: list[TransactionResponse]
