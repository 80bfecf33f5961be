"""Repository implementations."""

from comptoir.infrastructure.persistence.repositories.lending_position_repository import (  # noqa: E501
    LendingPositionRepository,
)
from comptoir.infrastructure.persistence.repositories.proposal_repository import (
    ProposalRepository,
)
from comptoir.infrastructure.persistence.repositories.staking_position_repository import (  # noqa: E501
    StakingPositionRepository,
)
from comptoir.infrastructure.persistence.repositories.transaction_repository import (  # noqa: E501
    TransactionRepository,
)
from comptoir.infrastructure.persistence.repositories.user_repository import (
    UserRepository,
)

__all__ = [
    "UserRepository",
    "TransactionRepository",
    "StakingPositionRepository",
    "LendingPositionRepository",
    "ProposalRepository",
]
