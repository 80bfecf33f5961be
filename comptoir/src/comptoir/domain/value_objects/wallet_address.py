"""
WalletAddress value object - normalized, case-insensitive wallet key.
"""

import re
from dataclasses import dataclass

EVM_ADDRESS_PATTERN = re.compile(r"^0x[a-fA-F0-9]{40}$")


@dataclass(frozen=True)
class WalletAddress:
    """
    Value object representing a user's wallet address.

    Business rules:
    - Cannot be empty or blank
    - Stored lower-cased, so two spellings of one address compare equal
    - Immutable once created

    Format is not enforced here: registration accepts any non-empty
    address. ``EVM_ADDRESS_PATTERN`` checks the 0x-hex format where required.
    """

    address: str

    def __post_init__(self):
        """Normalize and validate wallet address on creation."""
        if self.address is None or not str(self.address).strip():
            raise ValueError("Wallet address cannot be empty")

        object.__setattr__(self, "address", str(self.address).strip().lower())

    @classmethod
    def parse(cls, raw: str) -> "WalletAddress":
        """Build from raw user input."""
        return cls(raw)

    def __str__(self) -> str:
        return self.address
