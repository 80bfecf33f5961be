"""
Get user profile use case.
"""

from comptoir.domain.entities.user import User
from comptoir.domain.exceptions import EntityNotFoundError
from comptoir.domain.repositories.i_user_repository import IUserRepository


class GetUserProfile:
    """Fetch the current state of a user."""

    def __init__(self, user_repository: IUserRepository):
        self.user_repository = user_repository

    async def execute(self, user_id: int) -> User:
        user = await self.user_repository.get_by_id(user_id)
        if not user:
            raise EntityNotFoundError("User", user_id)
        return user
