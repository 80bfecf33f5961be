"""
Lending position repository interface.
"""

from abc import ABC, abstractmethod
from typing import Optional

from comptoir.domain.entities.lending_position import LendingPosition, LendingType


class ILendingPositionRepository(ABC):
    """Interface for lending/borrowing position persistence."""

    @abstractmethod
    async def create(self, position: LendingPosition) -> LendingPosition:
        """Persist a new position and return it with its ID."""

    @abstractmethod
    async def get_active_for_user(
        self,
        position_id: int,
        user_id: int,
        position_type: LendingType,
    ) -> Optional[LendingPosition]:
        """Get an active position of the given type owned by a user."""

    @abstractmethod
    async def complete(self, position_id: int) -> bool:
        """
        Finalize a position if it is still active.

        Returns:
            True if this call completed the position, False otherwise
        """

    @abstractmethod
    async def list_by_user(
        self, user_id: int, active_only: bool = False
    ) -> list[LendingPosition]:
        """List a user's positions, newest first."""
