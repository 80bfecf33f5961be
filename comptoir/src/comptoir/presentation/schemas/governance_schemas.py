"""
Governance API schemas.
"""

from datetime import datetime
from typing import Optional

from pydantic import StrictInt

from comptoir.domain.entities.proposal import Proposal
from comptoir.presentation.schemas.base import CamelModel


class ProposalResponse(CamelModel):
    """Proposal with its proposer's username and wallet."""

    id: int
    proposer_id: int
    title: str
    description: str
    for_votes: float
    against_votes: float
    status: str
    created_at: datetime
    end_date: datetime
    username: Optional[str] = None
    wallet_address: Optional[str] = None

    @classmethod
    def from_entity(cls, proposal: Proposal) -> "ProposalResponse":
        return cls(
            id=proposal.id,
            proposer_id=proposal.proposer_id,
            title=proposal.title,
            description=proposal.description,
            for_votes=proposal.for_votes,
            against_votes=proposal.against_votes,
            status=proposal.status.value,
            created_at=proposal.created_at,
            end_date=proposal.end_date,
            username=proposal.proposer_username,
            wallet_address=proposal.proposer_wallet,
        )


class ProposalsResponse(CamelModel):
    proposals: list[ProposalResponse]


class ProposalDetailResponse(CamelModel):
    proposal: ProposalResponse


class ProposeRequest(CamelModel):
    title: str
    description: str
    wallet_address: str


class ProposeResponse(CamelModel):
    proposal_id: int
    title: str
    description: str
    status: str
    end_date: datetime
    message: str = "Proposal created successfully"


class VoteRequest(CamelModel):
    """
    Vote on a proposal.

    ``support`` is the integer 1 (for) or 0 (against); strings and floats
    are rejected. Range checks happen in the use case so that they surface
    as validation errors.
    """

    proposal_id: int
    support: Optional[StrictInt] = None
    vote_weight: Optional[float] = None
    wallet_address: str


class VoteResponse(CamelModel):
    proposal_id: int
    support: str
    vote_weight: float
    message: str = "Vote cast successfully"


class ExecuteResponse(CamelModel):
    proposal_id: int
    status: str
    for_votes: float
    against_votes: float
    passed: bool
    message: str


class GovernanceInfoResponse(CamelModel):
    voting_period: str
    voting_period_days: int
    quorum_percent: str
    quorum_enforced: bool
