"""
JWT token handler for authentication.
Provides token creation and validation.
"""

from datetime import datetime, timedelta, timezone
from typing import Dict

from jose import ExpiredSignatureError, JWTError, jwt

from comptoir.config.settings import get_settings
from comptoir.domain.exceptions.auth import ExpiredTokenError, InvalidTokenError


def create_access_token(user_id: int, wallet_address: str) -> str:
    """
    Create JWT access token for a registered user.

    Args:
        user_id: User ID
        wallet_address: Normalized wallet address

    Returns:
        Encoded JWT token string

    Example:
        >>> token = create_access_token(user_id=1, wallet_address="0xab...")
    """
    settings = get_settings()
    now = datetime.now(timezone.utc)
    expire = now + timedelta(hours=settings.JWT_EXPIRATION_HOURS)
    payload = {
        "sub": str(user_id),
        "wallet": wallet_address,
        "iat": now,
        "exp": expire,
        "type": "access",
    }
    return jwt.encode(payload, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str) -> Dict[str, object]:
    """
    Decode and validate JWT access token.

    Args:
        token: JWT token string

    Returns:
        Dictionary with ``user_id`` (int) and ``wallet_address``

    Raises:
        ExpiredTokenError: If token has expired
        InvalidTokenError: If token is invalid or malformed
    """
    settings = get_settings()
    try:
        payload = jwt.decode(
            token,
            settings.JWT_SECRET_KEY,
            algorithms=[settings.JWT_ALGORITHM],
        )
    except ExpiredSignatureError:
        raise ExpiredTokenError()
    except JWTError:
        raise InvalidTokenError()

    subject = payload.get("sub")
    wallet = payload.get("wallet")
    if not subject or not wallet:
        raise InvalidTokenError()

    try:
        user_id = int(subject)
    except (TypeError, ValueError):
        raise InvalidTokenError()

    return {"user_id": user_id, "wallet_address": wallet}
