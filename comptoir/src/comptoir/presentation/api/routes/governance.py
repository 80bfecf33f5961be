"""
Governance API routes.
"""

from fastapi import APIRouter, Depends

from comptoir.application.use_cases.cast_vote import CastVote, VoteCommand
from comptoir.application.use_cases.create_proposal import CreateProposal
from comptoir.application.use_cases.execute_proposal import ExecuteProposal
from comptoir.application.use_cases.get_proposals import GetProposal, ListProposals
from comptoir.di.dependencies import (
    get_cast_vote,
    get_create_proposal,
    get_execute_proposal,
    get_get_proposal,
    get_list_proposals,
)
from comptoir.domain.entities.proposal import VOTING_PERIOD
from comptoir.infrastructure.monitoring import metrics
from comptoir.presentation.schemas.governance_schemas import (
    ExecuteResponse,
    GovernanceInfoResponse,
    ProposalDetailResponse,
    ProposalResponse,
    ProposalsResponse,
    ProposeRequest,
    ProposeResponse,
    VoteRequest,
    VoteResponse,
)

router = APIRouter(prefix="/governance", tags=["Governance"])

# Published for clients; not checked on execute
QUORUM_PERCENT = 10


@router.get("/proposals", response_model=ProposalsResponse, summary="List proposals")
async def list_proposals(
    use_case: ListProposals = Depends(get_list_proposals),
) -> ProposalsResponse:
    proposals = await use_case.execute()
    return ProposalsResponse(
        proposals=[ProposalResponse.from_entity(p) for p in proposals]
    )


@router.get(
    "/proposals/{proposal_id}",
    response_model=ProposalDetailResponse,
    summary="Get proposal",
)
async def get_proposal(
    proposal_id: int,
    use_case: GetProposal = Depends(get_get_proposal),
) -> ProposalDetailResponse:
    proposal = await use_case.execute(proposal_id)
    return ProposalDetailResponse(proposal=ProposalResponse.from_entity(proposal))


@router.post("/propose", response_model=ProposeResponse, summary="Create proposal")
async def propose(
    request: ProposeRequest,
    use_case: CreateProposal = Depends(get_create_proposal),
) -> ProposeResponse:
    """
    Create a proposal open for voting for three days.

    Returns 404 if the proposer's wallet is not registered.
    """
    proposal = await use_case.execute(
        title=request.title,
        description=request.description,
        proposer_wallet=request.wallet_address,
    )
    metrics.proposals_total.labels(status="created").inc()

    return ProposeResponse(
        proposal_id=proposal.id,
        title=proposal.title,
        description=proposal.description,
        status=proposal.status.value,
        end_date=proposal.end_date,
    )


@router.post("/vote", response_model=VoteResponse, summary="Vote on proposal")
async def vote(
    request: VoteRequest,
    use_case: CastVote = Depends(get_cast_vote),
) -> VoteResponse:
    """
    Add a weighted vote.

    Errors:
    - 400: support not 0/1, weight not positive, voting period ended
    - 404: voter unknown, proposal missing or no longer active
    """
    result = await use_case.execute(
        VoteCommand(
            proposal_id=request.proposal_id,
            support=request.support,
            weight=request.vote_weight,
            voter_wallet=request.wallet_address,
        )
    )
    support = "for" if result.support else "against"
    metrics.governance_votes_total.labels(support=support).inc()

    return VoteResponse(
        proposal_id=result.proposal_id,
        support=support,
        vote_weight=result.weight,
    )


@router.post(
    "/execute/{proposal_id}",
    response_model=ExecuteResponse,
    summary="Execute proposal",
)
async def execute(
    proposal_id: int,
    use_case: ExecuteProposal = Depends(get_execute_proposal),
) -> ExecuteResponse:
    """
    Resolve a proposal after its voting period.

    Returns 400 while voting is still open.
    """
    proposal = await use_case.execute(proposal_id)
    passed = proposal.passed()
    metrics.proposals_total.labels(status=proposal.status.value).inc()

    return ExecuteResponse(
        proposal_id=proposal.id,
        status=proposal.status.value,
        for_votes=proposal.for_votes,
        against_votes=proposal.against_votes,
        passed=passed,
        message="Proposal executed successfully" if passed else "Proposal defeated",
    )


@router.get(
    "/info", response_model=GovernanceInfoResponse, summary="Governance terms"
)
async def get_info() -> GovernanceInfoResponse:
    return GovernanceInfoResponse(
        voting_period=f"{VOTING_PERIOD.days} days",
        voting_period_days=VOTING_PERIOD.days,
        quorum_percent=f"{QUORUM_PERCENT}%",
        quorum_enforced=False,
    )
