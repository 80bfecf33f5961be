"""
LeaderboardEntry entity - a player's latest game score.
"""

from dataclasses import dataclass, field
from datetime import datetime

from comptoir.domain.services.clock import utc_now


@dataclass
class LeaderboardEntry:
    """Latest reported score for one player address."""

    address: str
    score: int
    resources: int = 0
    nft_count: int = 0
    last_updated: datetime = field(default_factory=utc_now)

    def __post_init__(self):
        if not self.address or not self.address.strip():
            raise ValueError("Address is required")

    @property
    def key(self) -> str:
        """Case-insensitive lookup key."""
        return self.address.lower()

    def to_dict(self) -> dict:
        return {
            "address": self.address,
            "score": self.score,
            "resources": self.resources,
            "nft_count": self.nft_count,
            "last_updated": self.last_updated.isoformat(),
        }
