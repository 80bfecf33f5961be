"""
Authentication dependencies for JWT bearer tokens.
"""

from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from comptoir.di.container import get_container
from comptoir.di.dependencies import get_db_session
from comptoir.domain.entities.user import User
from comptoir.domain.exceptions import (
    AuthenticationError,
    AuthenticationRequiredError,
)
from comptoir.infrastructure.auth.jwt_handler import decode_access_token

# Missing credentials are reported by get_current_user, not by FastAPI
security = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    session: AsyncSession = Depends(get_db_session),
) -> User:
    """
    Load the user identified by the bearer token.

    Args:
        credentials: HTTP Authorization header with Bearer token
        session: Database session from dependency injection

    Returns:
        User domain entity

    Raises:
        AuthenticationRequiredError: No bearer token (401)
        InvalidTokenError: Token invalid or expired (403)
        AuthenticationError: Token user no longer exists (401)
    """
    if credentials is None or not credentials.credentials:
        raise AuthenticationRequiredError()

    payload = decode_access_token(credentials.credentials)

    user_repo = get_container().get_user_repository(session)
    user = await user_repo.get_by_id(payload["user_id"])

    if not user:
        raise AuthenticationError("User not found")

    return user
