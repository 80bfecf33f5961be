"""
Analytics API routes.
"""

from fastapi import APIRouter, Depends, Query

from comptoir.application.use_cases.get_performance import GetPerformance
from comptoir.application.use_cases.get_platform_stats import GetPlatformStats
from comptoir.application.use_cases.get_portfolio import GetPortfolio
from comptoir.application.use_cases.get_transaction_history import (
    DEFAULT_PAGE_SIZE,
    GetTransactionHistory,
)
from comptoir.di.dependencies import (
    get_get_performance,
    get_get_platform_stats,
    get_get_portfolio,
    get_get_transaction_history,
)
from comptoir.presentation.schemas.analytics_schemas import (
    Pagination,
    PerformanceData,
    PerformanceResponse,
    PlatformData,
    PlatformResponse,
    PortfolioData,
    PortfolioResponse,
    TransactionHistoryResponse,
)
from comptoir.presentation.schemas.trading_schemas import TransactionResponse

router = APIRouter(prefix="/analytics", tags=["Analytics"])


@router.get(
    "/portfolio/{wallet_address}",
    response_model=PortfolioResponse,
    summary="Portfolio totals",
)
async def get_portfolio(
    wallet_address: str,
    use_case: GetPortfolio = Depends(get_get_portfolio),
) -> PortfolioResponse:
    portfolio = await use_case.execute(wallet_address)

    return PortfolioResponse(
        portfolio=PortfolioData(
            total_staked=portfolio.total_staked,
            total_lent=portfolio.total_lent,
            total_borrowed=portfolio.total_borrowed,
            total_value=portfolio.total_value,
            staking_positions=portfolio.staking_positions,
            lending_positions=portfolio.lending_positions,
        )
    )


@router.get(
    "/transactions/{wallet_address}",
    response_model=TransactionHistoryResponse,
    summary="Transaction history",
)
async def get_transactions(
    wallet_address: str,
    limit: int = Query(default=DEFAULT_PAGE_SIZE),
    offset: int = Query(default=0),
    use_case: GetTransactionHistory = Depends(get_get_transaction_history),
) -> TransactionHistoryResponse:
    page = await use_case.execute(wallet_address, limit=limit, offset=offset)

    return TransactionHistoryResponse(
        transactions=[TransactionResponse.from_entity(t) for t in page.transactions],
        pagination=Pagination(total=page.total, limit=page.limit, offset=page.offset),
    )


@router.get(
    "/performance/{wallet_address}",
    response_model=PerformanceResponse,
    summary="Performance metrics",
)
async def get_performance(
    wallet_address: str,
    use_case: GetPerformance = Depends(get_get_performance),
) -> PerformanceResponse:
    performance = await use_case.execute(wallet_address)

    return PerformanceResponse(
        performance=PerformanceData(
            total_transactions=performance.total_transactions,
            total_fees_paid=performance.total_fees_paid,
            swaps=performance.swaps,
            buys=performance.buys,
            sells=performance.sells,
            staking_rewards=performance.staking_rewards,
            profit_loss=performance.profit_loss,
        )
    )


@router.get("/platform", response_model=PlatformResponse, summary="Platform stats")
async def get_platform(
    use_case: GetPlatformStats = Depends(get_get_platform_stats),
) -> PlatformResponse:
    stats = await use_case.execute()

    return PlatformResponse(
        platform=PlatformData(
            total_users=stats.total_users,
            total_transactions=stats.total_transactions,
            total_fees=stats.total_fees,
            total_staked=stats.total_staked,
            total_stakers=stats.total_stakers,
        )
    )
