"""
Static token catalog served by the trading endpoints.

Prices are indicative only; swaps execute at a fixed 1:1 rate.
"""

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class TokenInfo:
    """Display data for a listed token."""

    symbol: str
    name: str
    address: str
    price: float
    change_24h: float
    volume_24h: float

    def to_dict(self) -> dict:
        return asdict(self)


SUPPORTED_TOKENS: tuple[TokenInfo, ...] = (
    TokenInfo(
        symbol="EXC",
        name="Exchange Token",
        address="0x...",
        price=1.5,
        change_24h=5.2,
        volume_24h=1_500_000,
    ),
    TokenInfo(
        symbol="ETH",
        name="Ethereum",
        address="0x...",
        price=2500.00,
        change_24h=-2.1,
        volume_24h=50_000_000,
    ),
    TokenInfo(
        symbol="USDC",
        name="USD Coin",
        address="0x...",
        price=1.00,
        change_24h=0.01,
        volume_24h=25_000_000,
    ),
)

SWAP_EXCHANGE_RATE = 1.0
