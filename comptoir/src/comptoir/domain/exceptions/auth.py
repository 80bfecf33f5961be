"""
Authentication domain exceptions.
"""

from comptoir.domain.exceptions.base import ComptoirException


class AuthenticationError(ComptoirException):
    """Raised when authentication fails."""

    def __init__(self, message: str = "Authentication failed", code: str = None):
        super().__init__(message, code=code or "AUTHENTICATION_ERROR")


class AuthenticationRequiredError(AuthenticationError):
    """Raised when a protected endpoint is called without a bearer token."""

    def __init__(self):
        super().__init__("Access token required", code="AUTHENTICATION_REQUIRED")


class InvalidTokenError(AuthenticationError):
    """Raised when JWT token is malformed or invalid."""

    def __init__(self, message: str = "Invalid or expired token"):
        super().__init__(message, code="INVALID_TOKEN")


class ExpiredTokenError(InvalidTokenError):
    """Raised when JWT token has expired."""

    def __init__(self):
        super().__init__("Authentication token has expired")
