"""
Analytics API schemas.
"""

from comptoir.presentation.schemas.base import CamelModel
from comptoir.presentation.schemas.trading_schemas import TransactionResponse


class PortfolioData(CamelModel):
    total_staked: float
    total_lent: float
    total_borrowed: float
    total_value: float
    staking_positions: int
    lending_positions: int


class PortfolioResponse(CamelModel):
    portfolio: PortfolioData


class Pagination(CamelModel):
    total: int
    limit: int
    offset: int


class TransactionHistoryResponse(CamelModel):
    transactions: list[TransactionResponse]
    pagination: Pagination


class PerformanceData(CamelModel):
    total_transactions: int
    total_fees_paid: float
    swaps: int
    buys: int
    sells: int
    staking_rewards: float
    profit_loss: float


class PerformanceResponse(CamelModel):
    performance: PerformanceData


class PlatformData(CamelModel):
    total_users: int
    total_transactions: int
    total_fees: float
    total_staked: float
    total_stakers: int


class PlatformResponse(CamelModel):
    platform: PlatformData
