"""
FastAPI dependency injection.

Provides dependencies for FastAPI routes using the DI container.
Every use case built here shares the request's single database session,
so one request is one transaction.
"""

from typing import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from comptoir.application.use_cases.borrow_tokens import BorrowTokens
from comptoir.application.use_cases.cast_vote import CastVote
from comptoir.application.use_cases.create_proposal import CreateProposal
from comptoir.application.use_cases.execute_proposal import ExecuteProposal
from comptoir.application.use_cases.get_lending_positions import (
    GetLendingPositions,
)
from comptoir.application.use_cases.get_performance import GetPerformance
from comptoir.application.use_cases.get_platform_stats import GetPlatformStats
from comptoir.application.use_cases.get_portfolio import GetPortfolio
from comptoir.application.use_cases.get_proposals import GetProposal, ListProposals
from comptoir.application.use_cases.get_staking_rewards import GetStakingRewards
from comptoir.application.use_cases.get_transaction_history import (
    GetTransactionHistory,
)
from comptoir.application.use_cases.get_user_profile import GetUserProfile
from comptoir.application.use_cases.leaderboard import (
    GetGameStats,
    GetLeaderboard,
    GetPlayerRank,
    UpdateScore,
)
from comptoir.application.use_cases.lend_tokens import LendTokens
from comptoir.application.use_cases.list_orders import ListOrders
from comptoir.application.use_cases.login_user import LoginUser
from comptoir.application.use_cases.place_order import PlaceOrder
from comptoir.application.use_cases.register_user import RegisterUser
from comptoir.application.use_cases.repay_loan import RepayLoan
from comptoir.application.use_cases.stake_tokens import StakeTokens
from comptoir.application.use_cases.submit_kyc import SubmitKYC
from comptoir.application.use_cases.swap_tokens import SwapTokens
from comptoir.application.use_cases.unstake_tokens import UnstakeTokens
from comptoir.config.settings import get_settings
from comptoir.di.container import get_container

# ================================================================
# Database Dependencies
# ================================================================


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Get database session dependency.

    Yields async database session from container.
    Commits after the endpoint returns, rolls back if it raises.
    """
    container = get_container()
    async with container.database.session() as session:
        yield session


# ================================================================
# Auth Use Case Dependencies
# ================================================================


def get_register_user(
    session: AsyncSession = Depends(get_db_session),
) -> RegisterUser:
    """Get RegisterUser use case dependency."""
    container = get_container()
    return RegisterUser(user_repository=container.get_user_repository(session))


def get_login_user(
    session: AsyncSession = Depends(get_db_session),
) -> LoginUser:
    """Get LoginUser use case dependency."""
    container = get_container()
    return LoginUser(user_repository=container.get_user_repository(session))


def get_submit_kyc(
    session: AsyncSession = Depends(get_db_session),
) -> SubmitKYC:
    """Get SubmitKYC use case dependency."""
    container = get_container()
    return SubmitKYC(user_repository=container.get_user_repository(session))


def get_get_user_profile(
    session: AsyncSession = Depends(get_db_session),
) -> GetUserProfile:
    """Get GetUserProfile use case dependency."""
    container = get_container()
    return GetUserProfile(user_repository=container.get_user_repository(session))


# ================================================================
# Staking Use Case Dependencies
# ================================================================


def get_stake_tokens(
    session: AsyncSession = Depends(get_db_session),
) -> StakeTokens:
    """Get StakeTokens use case dependency."""
    container = get_container()
    return StakeTokens(
        user_repository=container.get_user_repository(session),
        staking_repository=container.get_staking_repository(session),
    )


def get_unstake_tokens(
    session: AsyncSession = Depends(get_db_session),
) -> UnstakeTokens:
    """Get UnstakeTokens use case dependency."""
    container = get_container()
    return UnstakeTokens(
        user_repository=container.get_user_repository(session),
        staking_repository=container.get_staking_repository(session),
    )


def get_get_staking_rewards(
    session: AsyncSession = Depends(get_db_session),
) -> GetStakingRewards:
    """Get GetStakingRewards use case dependency."""
    container = get_container()
    return GetStakingRewards(
        user_repository=container.get_user_repository(session),
        staking_repository=container.get_staking_repository(session),
    )


# ================================================================
# Lending Use Case Dependencies
# ================================================================


def get_lend_tokens(
    session: AsyncSession = Depends(get_db_session),
) -> LendTokens:
    """Get LendTokens use case dependency."""
    container = get_container()
    return LendTokens(
        user_repository=container.get_user_repository(session),
        lending_repository=container.get_lending_repository(session),
    )


def get_borrow_tokens(
    session: AsyncSession = Depends(get_db_session),
) -> BorrowTokens:
    """Get BorrowTokens use case dependency."""
    container = get_container()
    return BorrowTokens(
        user_repository=container.get_user_repository(session),
        lending_repository=container.get_lending_repository(session),
    )


def get_repay_loan(
    session: AsyncSession = Depends(get_db_session),
) -> RepayLoan:
    """Get RepayLoan use case dependency."""
    container = get_container()
    return RepayLoan(
        user_repository=container.get_user_repository(session),
        lending_repository=container.get_lending_repository(session),
    )


def get_get_lending_positions(
    session: AsyncSession = Depends(get_db_session),
) -> GetLendingPositions:
    """Get GetLendingPositions use case dependency."""
    container = get_container()
    return GetLendingPositions(
        user_repository=container.get_user_repository(session),
        lending_repository=container.get_lending_repository(session),
    )


# ================================================================
# Governance Use Case Dependencies
# ================================================================


def get_create_proposal(
    session: AsyncSession = Depends(get_db_session),
) -> CreateProposal:
    """Get CreateProposal use case dependency."""
    container = get_container()
    return CreateProposal(
        user_repository=container.get_user_repository(session),
        proposal_repository=container.get_proposal_repository(session),
    )


def get_list_proposals(
    session: AsyncSession = Depends(get_db_session),
) -> ListProposals:
    """Get ListProposals use case dependency."""
    container = get_container()
    return ListProposals(
        proposal_repository=container.get_proposal_repository(session)
    )


def get_get_proposal(
    session: AsyncSession = Depends(get_db_session),
) -> GetProposal:
    """Get GetProposal use case dependency."""
    container = get_container()
    return GetProposal(proposal_repository=container.get_proposal_repository(session))


def get_cast_vote(
    session: AsyncSession = Depends(get_db_session),
) -> CastVote:
    """Get CastVote use case dependency."""
    container = get_container()
    return CastVote(
        user_repository=container.get_user_repository(session),
        proposal_repository=container.get_proposal_repository(session),
    )


def get_execute_proposal(
    session: AsyncSession = Depends(get_db_session),
) -> ExecuteProposal:
    """Get ExecuteProposal use case dependency."""
    container = get_container()
    return ExecuteProposal(
        proposal_repository=container.get_proposal_repository(session)
    )


# ================================================================
# Trading Use Case Dependencies
# ================================================================


def get_swap_tokens(
    session: AsyncSession = Depends(get_db_session),
) -> SwapTokens:
    """Get SwapTokens use case dependency."""
    container = get_container()
    return SwapTokens(
        user_repository=container.get_user_repository(session),
        transaction_repository=container.get_transaction_repository(session),
        fee_percent=get_settings().TRADING_FEE_PERCENT,
    )


def get_place_order(
    session: AsyncSession = Depends(get_db_session),
) -> PlaceOrder:
    """Get PlaceOrder use case dependency."""
    container = get_container()
    return PlaceOrder(
        user_repository=container.get_user_repository(session),
        transaction_repository=container.get_transaction_repository(session),
        fee_percent=get_settings().TRADING_FEE_PERCENT,
    )


def get_list_orders(
    session: AsyncSession = Depends(get_db_session),
) -> ListOrders:
    """Get ListOrders use case dependency."""
    container = get_container()
    return ListOrders(
        user_repository=container.get_user_repository(session),
        transaction_repository=container.get_transaction_repository(session),
    )


# ================================================================
# Analytics Use Case Dependencies
# ================================================================


def get_get_portfolio(
    session: AsyncSession = Depends(get_db_session),
) -> GetPortfolio:
    """Get GetPortfolio use case dependency."""
    container = get_container()
    return GetPortfolio(
        user_repository=container.get_user_repository(session),
        staking_repository=container.get_staking_repository(session),
        lending_repository=container.get_lending_repository(session),
    )


def get_get_transaction_history(
    session: AsyncSession = Depends(get_db_session),
) -> GetTransactionHistory:
    """Get GetTransactionHistory use case dependency."""
    container = get_container()
    return GetTransactionHistory(
        user_repository=container.get_user_repository(session),
        transaction_repository=container.get_transaction_repository(session),
    )


def get_get_performance(
    session: AsyncSession = Depends(get_db_session),
) -> GetPerformance:
    """Get GetPerformance use case dependency."""
    container = get_container()
    return GetPerformance(
        user_repository=container.get_user_repository(session),
        transaction_repository=container.get_transaction_repository(session),
        staking_repository=container.get_staking_repository(session),
    )


def get_get_platform_stats(
    session: AsyncSession = Depends(get_db_session),
) -> GetPlatformStats:
    """Get GetPlatformStats use case dependency."""
    container = get_container()
    return GetPlatformStats(
        transaction_repository=container.get_transaction_repository(session),
        staking_repository=container.get_staking_repository(session),
    )


# ================================================================
# Leaderboard Use Case Dependencies
# ================================================================


def get_update_score() -> UpdateScore:
    """Get UpdateScore use case dependency."""
    return UpdateScore(get_container().leaderboard_repository)


def get_get_leaderboard() -> GetLeaderboard:
    """Get GetLeaderboard use case dependency."""
    return GetLeaderboard(get_container().leaderboard_repository)


def get_get_player_rank() -> GetPlayerRank:
    """Get GetPlayerRank use case dependency."""
    return GetPlayerRank(get_container().leaderboard_repository)


def get_get_game_stats() -> GetGameStats:
    """Get GetGameStats use case dependency."""
    return GetGameStats(get_container().leaderboard_repository)
