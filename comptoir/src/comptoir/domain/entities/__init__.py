"""Domain entities."""

from comptoir.domain.entities.leaderboard_entry import LeaderboardEntry
from comptoir.domain.entities.lending_position import (
    COLLATERAL_RATIO,
    LendingPosition,
    LendingType,
    required_collateral,
)
from comptoir.domain.entities.proposal import (
    VOTING_PERIOD,
    Proposal,
    ProposalStatus,
)
from comptoir.domain.entities.staking_position import (
    MIN_STAKE_AMOUNT,
    PositionStatus,
    StakingPosition,
)
from comptoir.domain.entities.transaction import (
    Transaction,
    TransactionStatus,
    TransactionType,
)
from comptoir.domain.entities.user import KYCStatus, User

__all__ = [
    "User",
    "KYCStatus",
    "Transaction",
    "TransactionType",
    "TransactionStatus",
    "StakingPosition",
    "PositionStatus",
    "MIN_STAKE_AMOUNT",
    "LendingPosition",
    "LendingType",
    "COLLATERAL_RATIO",
    "required_collateral",
    "Proposal",
    "ProposalStatus",
    "VOTING_PERIOD",
    "LeaderboardEntry",
]
