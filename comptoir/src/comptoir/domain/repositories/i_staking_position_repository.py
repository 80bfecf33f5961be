"""
Staking position repository interface.
"""

from abc import ABC, abstractmethod
from typing import Optional

from comptoir.domain.entities.staking_position import StakingPosition


class IStakingPositionRepository(ABC):
    """Interface for staking position persistence."""

    @abstractmethod
    async def create(self, position: StakingPosition) -> StakingPosition:
        """Persist a new position and return it with its ID."""

    @abstractmethod
    async def get_active_for_user(
        self, position_id: int, user_id: int
    ) -> Optional[StakingPosition]:
        """
        Get an active position owned by a user.

        Returns:
            Position if it exists, belongs to the user and is active
        """

    @abstractmethod
    async def complete(self, position_id: int, rewards: float) -> bool:
        """
        Finalize a position if it is still active.

        Implementations must make the check and the write one atomic step.

        Returns:
            True if this call completed the position, False if it was
            already completed (or does not exist)
        """

    @abstractmethod
    async def list_by_user(
        self, user_id: int, active_only: bool = False
    ) -> list[StakingPosition]:
        """List a user's positions, oldest first."""

    @abstractmethod
    async def total_rewards_for_user(self, user_id: int) -> float:
        """Sum of stored (finalized) rewards for a user."""

    @abstractmethod
    async def get_active_totals(self) -> tuple[float, int]:
        """Platform-wide (total actively staked, number of active positions)."""
