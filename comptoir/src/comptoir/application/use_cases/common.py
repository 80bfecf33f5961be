"""
Helpers shared by use cases that act on behalf of a wallet.
"""

from comptoir.domain.entities.user import User
from comptoir.domain.exceptions import EntityNotFoundError, ValidationError
from comptoir.domain.repositories.i_user_repository import IUserRepository
from comptoir.domain.value_objects.wallet_address import WalletAddress


def parse_wallet(wallet_address: str | None) -> WalletAddress:
    """
    Normalize a raw wallet address.

    Raises:
        ValidationError: If the address is missing or blank
    """
    try:
        return WalletAddress.parse(wallet_address)
    except ValueError as e:
        raise ValidationError(field="wallet_address", reason=str(e)) from e


async def resolve_user(
    user_repository: IUserRepository, wallet_address: str | None
) -> User:
    """
    Load the registered user owning ``wallet_address``.

    Raises:
        ValidationError: If the address is missing or blank
        EntityNotFoundError: If no user is registered with the address
    """
    wallet = parse_wallet(wallet_address)
    user = await user_repository.get_by_wallet(str(wallet))
    if not user:
        raise EntityNotFoundError("User")
    return user
