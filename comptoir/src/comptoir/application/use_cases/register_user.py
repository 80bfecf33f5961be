"""
Register User use case.
"""

from typing import Optional

from comptoir.application.use_cases.common import parse_wallet
from comptoir.domain.entities.user import User
from comptoir.domain.exceptions import ValidationError
from comptoir.domain.repositories.i_user_repository import IUserRepository


class RegisterUser:
    """
    Register a new user by wallet address.

    Business rules:
    - Wallet address is required and unique (case-insensitive)
    - Email and username are optional
    - KYC starts pending
    """

    def __init__(self, user_repository: IUserRepository):
        """
        Initialize use case with dependencies.

        Args:
            user_repository: Repository for user persistence
        """
        self.user_repository = user_repository

    async def execute(
        self,
        wallet_address: str,
        email: Optional[str] = None,
        username: Optional[str] = None,
    ) -> User:
        """
        Execute user registration.

        Args:
            wallet_address: Wallet address in any letter case
            email: Optional contact email
            username: Optional display name

        Returns:
            Created User entity

        Raises:
            ValidationError: If wallet is blank or already registered
        """
        wallet = parse_wallet(wallet_address)

        existing_user = await self.user_repository.get_by_wallet(str(wallet))
        if existing_user:
            raise ValidationError(
                field="wallet_address",
                reason="Wallet address already registered",
            )

        user = User(
            wallet_address=str(wallet),
            email=email or None,
            username=username or None,
        )

        return await self.user_repository.create(user)
