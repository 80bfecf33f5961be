"""
User repository implementation.
"""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from comptoir.domain.entities.user import KYCStatus, User
from comptoir.domain.exceptions import EntityNotFoundError, ValidationError
from comptoir.domain.repositories.i_user_repository import IUserRepository
from comptoir.domain.value_objects.wallet_address import WalletAddress
from comptoir.infrastructure.persistence.models import UserModel


class UserRepository(IUserRepository):
    """
    SQLAlchemy implementation of user repository.

    Wallet addresses are normalized through WalletAddress on the way in,
    so lookups are case-insensitive against the lower-cased column.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def create(self, user: User) -> User:
        """
        Create new user in database.

        Args:
            user: User entity to create

        Returns:
            Created user entity with ID assigned
        """
        model = UserModel(
            wallet_address=user.wallet_address,
            email=user.email,
            username=user.username,
            kyc_status=user.kyc_status.value,
            premium_account=user.premium_account,
            created_at=user.created_at,
        )

        self.session.add(model)
        try:
            await self.session.flush()
        except IntegrityError as e:
            # Concurrent registration of the same wallet
            raise ValidationError(
                field="wallet_address",
                reason="Wallet address already registered",
            ) from e
        await self.session.refresh(model)

        return self._to_entity(model)

    async def get_by_id(self, user_id: int) -> Optional[User]:
        """
        Get user by ID.

        Args:
            user_id: User identifier

        Returns:
            User entity if found, None otherwise
        """
        stmt = select(UserModel).where(UserModel.id == user_id)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def get_by_wallet(self, wallet_address: str) -> Optional[User]:
        """
        Get user by wallet address.

        Args:
            wallet_address: Wallet address in any letter case

        Returns:
            User entity if found, None otherwise
        """
        normalized = str(WalletAddress(wallet_address))
        stmt = select(UserModel).where(UserModel.wallet_address == normalized)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def update(self, user: User) -> User:
        """
        Update existing user.

        Wallet address is immutable and never written here.

        Args:
            user: User entity with updated data

        Returns:
            Updated user entity

        Raises:
            EntityNotFoundError: If the user does not exist
        """
        stmt = select(UserModel).where(UserModel.id == user.id)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()

        if not model:
            raise EntityNotFoundError("User", user.id)

        model.email = user.email
        model.username = user.username
        model.kyc_status = user.kyc_status.value
        model.premium_account = user.premium_account

        await self.session.flush()
        await self.session.refresh(model)

        return self._to_entity(model)

    def _to_entity(self, model: UserModel) -> User:
        """
        Convert UserModel to User entity.

        Args:
            model: SQLAlchemy model

        Returns:
            User domain entity
        """
        return User(
            id=model.id,
            wallet_address=model.wallet_address,
            email=model.email,
            username=model.username,
            kyc_status=KYCStatus(model.kyc_status),
            premium_account=bool(model.premium_account),
            created_at=model.created_at,
        )
