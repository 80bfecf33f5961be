"""
User entity - Domain model for exchange users.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional

from comptoir.domain.services.clock import utc_now
from comptoir.domain.value_objects.wallet_address import WalletAddress


class KYCStatus(str, Enum):
    """Know-your-customer verification states."""

    PENDING = "pending"
    VERIFIED = "verified"


@dataclass
class User:
    """
    User entity - wallet-keyed identity.

    Business rules:
    - Wallet address is required and stored lower-cased
    - Wallet address never changes after registration
    - KYC starts pending
    """

    id: Optional[int] = field(default=None)
    wallet_address: str = field(default="")
    email: Optional[str] = field(default=None)
    username: Optional[str] = field(default=None)
    kyc_status: KYCStatus = field(default=KYCStatus.PENDING)
    premium_account: bool = field(default=False)
    created_at: datetime = field(default_factory=utc_now)

    def __post_init__(self):
        """Normalize wallet address after initialization."""
        if not self.wallet_address:
            raise ValueError("Wallet address is required")
        self.wallet_address = str(WalletAddress(self.wallet_address))

    def verify_kyc(self) -> None:
        """Mark KYC as verified."""
        self.kyc_status = KYCStatus.VERIFIED

    def to_dict(self) -> dict:
        """Convert entity to dictionary representation."""
        return {
            "id": self.id,
            "wallet_address": self.wallet_address,
            "email": self.email,
            "username": self.username,
            "kyc_status": self.kyc_status.value,
            "premium_account": self.premium_account,
            "created_at": self.created_at.isoformat(),
        }
