"""Domain repository interfaces."""

from comptoir.domain.repositories.i_leaderboard_repository import (
    ILeaderboardRepository,
)
from comptoir.domain.repositories.i_lending_position_repository import (
    ILendingPositionRepository,
)
from comptoir.domain.repositories.i_proposal_repository import (
    IProposalRepository,
)
from comptoir.domain.repositories.i_staking_position_repository import (
    IStakingPositionRepository,
)
from comptoir.domain.repositories.i_transaction_repository import (
    ITransactionRepository,
    PlatformTradingStats,
    TradingStats,
)
from comptoir.domain.repositories.i_user_repository import IUserRepository

__all__ = [
    "IUserRepository",
    "ITransactionRepository",
    "TradingStats",
    "PlatformTradingStats",
    "IStakingPositionRepository",
    "ILendingPositionRepository",
    "IProposalRepository",
    "ILeaderboardRepository",
]
