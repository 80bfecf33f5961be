"""
Execute proposal use case.
"""

from comptoir.domain.entities.proposal import Proposal
from comptoir.domain.exceptions import EntityNotFoundError, ValidationError
from comptoir.domain.repositories.i_proposal_repository import IProposalRepository
from comptoir.domain.services.clock import Clock, utc_now


class ExecuteProposal:
    """
    Resolve a proposal once its voting period is over.

    The proposal is executed when for-votes strictly exceed against-votes
    and defeated otherwise, ties included. Calling again recomputes from
    the stored tally; since votes are only accepted while active, the
    outcome does not change.
    """

    def __init__(
        self,
        proposal_repository: IProposalRepository,
        clock: Clock = utc_now,
    ):
        """
        Initialize use case.

        Args:
            proposal_repository: Proposal repository
            clock: Source of the current time
        """
        self.proposal_repository = proposal_repository
        self.clock = clock

    async def execute(self, proposal_id: int) -> Proposal:
        """
        Decide and store the proposal's outcome.

        Returns:
            Proposal with its final status

        Raises:
            EntityNotFoundError: Proposal does not exist
            ValidationError: Voting period has not ended
        """
        proposal = await self.proposal_repository.get_by_id(proposal_id)
        if not proposal:
            raise EntityNotFoundError("Proposal", proposal_id)

        if not proposal.voting_ended(self.clock()):
            raise ValidationError(
                field="proposal", reason="Voting period has not ended"
            )

        proposal.status = proposal.outcome()
        await self.proposal_repository.set_status(proposal.id, proposal.status)

        return proposal
