"""
Proposal queries.
"""

from comptoir.domain.entities.proposal import Proposal
from comptoir.domain.exceptions import EntityNotFoundError
from comptoir.domain.repositories.i_proposal_repository import IProposalRepository


class ListProposals:
    """All proposals, newest first, with proposer details."""

    def __init__(self, proposal_repository: IProposalRepository):
        self.proposal_repository = proposal_repository

    async def execute(self) -> list[Proposal]:
        return await self.proposal_repository.list_all()


class GetProposal:
    """Single proposal by ID."""

    def __init__(self, proposal_repository: IProposalRepository):
        self.proposal_repository = proposal_repository

    async def execute(self, proposal_id: int) -> Proposal:
        """
        Raises:
            EntityNotFoundError: If proposal does not exist
        """
        proposal = await self.proposal_repository.get_by_id(proposal_id)
        if not proposal:
            raise EntityNotFoundError("Proposal", proposal_id)
        return proposal
