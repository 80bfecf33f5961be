"""Domain value objects."""

from comptoir.domain.value_objects.token_catalog import (
    SUPPORTED_TOKENS,
    SWAP_EXCHANGE_RATE,
    TokenInfo,
)
from comptoir.domain.value_objects.wallet_address import WalletAddress

__all__ = [
    "WalletAddress",
    "TokenInfo",
    "SUPPORTED_TOKENS",
    "SWAP_EXCHANGE_RATE",
]
