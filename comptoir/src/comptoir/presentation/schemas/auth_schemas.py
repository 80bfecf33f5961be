"""
Auth and user API schemas.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from comptoir.domain.entities.user import User
from comptoir.presentation.schemas.base import CamelModel


class RegisterRequest(CamelModel):
    """Register a wallet."""

    wallet_address: str = Field(..., description="Wallet address, any case")
    email: Optional[str] = Field(default=None, max_length=255)
    username: Optional[str] = Field(default=None, max_length=100)


class RegisterResponse(CamelModel):
    user_id: int
    token: str
    message: str = "User registered successfully"


class LoginRequest(CamelModel):
    """Log in with a registered wallet."""

    wallet_address: str


class UserResponse(CamelModel):
    """Public view of a user."""

    id: int
    wallet_address: str
    email: Optional[str] = None
    username: Optional[str] = None
    kyc_status: str
    premium_account: bool
    created_at: datetime

    @classmethod
    def from_entity(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            wallet_address=user.wallet_address,
            email=user.email,
            username=user.username,
            kyc_status=user.kyc_status.value,
            premium_account=user.premium_account,
            created_at=user.created_at,
        )


class LoginResponse(CamelModel):
    user: UserResponse
    token: str
    message: str = "Login successful"


class KYCRequest(CamelModel):
    """
    Identity data for KYC.

    Every field is optional: submissions are verified without review.
    """

    full_name: Optional[str] = None
    date_of_birth: Optional[str] = None
    country: Optional[str] = None
    id_document: Optional[str] = None


class KYCResponse(CamelModel):
    status: str
    message: str = "KYC verification completed"
