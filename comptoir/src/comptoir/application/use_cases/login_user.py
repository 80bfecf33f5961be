"""
Login user use case.
"""

from comptoir.application.use_cases.common import resolve_user
from comptoir.domain.entities.user import User
from comptoir.domain.repositories.i_user_repository import IUserRepository


class LoginUser:
    """
    Look up an existing user by wallet address.

    No signature check: possession of the wallet is asserted by the
    client. The caller issues the access token.
    """

    def __init__(self, user_repository: IUserRepository):
        self._user_repository = user_repository

    async def execute(self, wallet_address: str) -> User:
        """
        Raises:
            ValidationError: Wallet address missing
            EntityNotFoundError: User not found
        """
        return await resolve_user(self._user_repository, wallet_address)
