"""
Proposal entity - governance proposal with a fixed voting window.
"""

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from enum import Enum
from typing import Optional

from comptoir.domain.services.clock import utc_now

VOTING_PERIOD = timedelta(days=3)


class ProposalStatus(str, Enum):
    """Proposal lifecycle states."""

    ACTIVE = "active"
    EXECUTED = "executed"
    DEFEATED = "defeated"


@dataclass
class Proposal:
    """
    Proposal entity.

    Business rules:
    - Title and description are required
    - Votes accumulate without limit; no per-voter bookkeeping
    - Voting is open while status is active and now <= end_date
    - Outcome is decided once now >= end_date: executed when for_votes
      strictly exceeds against_votes, defeated otherwise
    """

    id: Optional[int] = field(default=None)
    proposer_id: int = field(default=0)
    title: str = field(default="")
    description: str = field(default="")
    for_votes: float = field(default=0.0)
    against_votes: float = field(default=0.0)
    status: ProposalStatus = field(default=ProposalStatus.ACTIVE)
    created_at: datetime = field(default_factory=utc_now)
    end_date: Optional[datetime] = field(default=None)
    proposer_username: Optional[str] = field(default=None)
    proposer_wallet: Optional[str] = field(default=None)

    def __post_init__(self):
        """Validate proposal data after initialization."""
        if not self.title or not self.title.strip():
            raise ValueError("Title is required")
        if not self.description or not self.description.strip():
            raise ValueError("Description is required")
        if self.end_date is None:
            self.end_date = self.created_at + VOTING_PERIOD

    def is_active(self) -> bool:
        return self.status == ProposalStatus.ACTIVE

    def voting_open(self, now: datetime) -> bool:
        """True while votes are accepted."""
        return self.is_active() and now <= self.end_date

    def voting_ended(self, now: datetime) -> bool:
        """True once the proposal may be executed."""
        return now >= self.end_date

    def passed(self) -> bool:
        return self.for_votes > self.against_votes

    def outcome(self) -> ProposalStatus:
        """Status the proposal resolves to with the current tally."""
        return ProposalStatus.EXECUTED if self.passed() else ProposalStatus.DEFEATED

    def to_dict(self) -> dict:
        """Convert entity to dictionary representation."""
        return {
            "id": self.id,
            "proposer_id": self.proposer_id,
            "title": self.title,
            "description": self.description,
            "for_votes": self.for_votes,
            "against_votes": self.against_votes,
            "status": self.status.value,
            "created_at": self.created_at.isoformat(),
            "end_date": self.end_date.isoformat(),
            "username": self.proposer_username,
            "wallet_address": self.proposer_wallet,
        }
