"""
User repository interface.
"""

from abc import ABC, abstractmethod
from typing import Optional

from comptoir.domain.entities.user import User


class IUserRepository(ABC):
    """Interface for user persistence operations."""

    @abstractmethod
    async def create(self, user: User) -> User:
        """
        Create new user.

        Args:
            user: User entity to create

        Returns:
            Created user entity with its assigned ID
        """

    @abstractmethod
    async def get_by_id(self, user_id: int) -> Optional[User]:
        """
        Get user by ID.

        Args:
            user_id: User identifier

        Returns:
            User entity if found, None otherwise
        """

    @abstractmethod
    async def get_by_wallet(self, wallet_address: str) -> Optional[User]:
        """
        Get user by wallet address (case-insensitive).

        Args:
            wallet_address: Wallet address in any letter case

        Returns:
            User entity if found, None otherwise
        """

    @abstractmethod
    async def update(self, user: User) -> User:
        """
        Update mutable profile fields of an existing user.

        Args:
            user: User entity with updated data

        Returns:
            Updated user entity
        """
