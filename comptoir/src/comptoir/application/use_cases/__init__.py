"""Application use cases."""

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

__all__ = [
    "RegisterUser",
    "LoginUser",
    "SubmitKYC",
    "GetUserProfile",
    "StakeTokens",
    "UnstakeTokens",
    "GetStakingRewards",
    "LendTokens",
    "BorrowTokens",
    "RepayLoan",
    "GetLendingPositions",
    "CreateProposal",
    "ListProposals",
    "GetProposal",
    "CastVote",
    "ExecuteProposal",
    "SwapTokens",
    "PlaceOrder",
    "ListOrders",
    "GetPortfolio",
    "GetTransactionHistory",
    "GetPerformance",
    "GetPlatformStats",
    "UpdateScore",
    "GetLeaderboard",
    "GetPlayerRank",
    "GetGameStats",
]
