"""
Domain exceptions package.
"""

# Auth exceptions
from comptoir.domain.exceptions.auth import (
    AuthenticationError,
    AuthenticationRequiredError,
    ExpiredTokenError,
    InvalidTokenError,
)

# Base exceptions
from comptoir.domain.exceptions.base import (
    ComptoirException,
    EntityNotFoundError,
    StorageError,
    ValidationError,
)

# Lending exceptions
from comptoir.domain.exceptions.lending import InsufficientCollateralError

__all__ = [
    # Base
    "ComptoirException",
    "EntityNotFoundError",
    "ValidationError",
    "StorageError",
    # Auth
    "AuthenticationError",
    "AuthenticationRequiredError",
    "InvalidTokenError",
    "ExpiredTokenError",
    # Lending
    "InsufficientCollateralError",
]
