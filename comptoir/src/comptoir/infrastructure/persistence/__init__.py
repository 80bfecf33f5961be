"""
Infrastructure persistence package.
"""

from comptoir.infrastructure.persistence.database import Database
from comptoir.infrastructure.persistence.models import (
    Base,
    LendingPositionModel,
    ProposalModel,
    StakingPositionModel,
    TransactionModel,
    UserModel,
)

__all__ = [
    "Database",
    "Base",
    "UserModel",
    "TransactionModel",
    "StakingPositionModel",
    "LendingPositionModel",
    "ProposalModel",
]
