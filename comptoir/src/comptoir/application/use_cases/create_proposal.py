"""
Create proposal use case.
"""

from comptoir.application.use_cases.common import resolve_user
from comptoir.domain.entities.proposal import Proposal
from comptoir.domain.exceptions import ValidationError
from comptoir.domain.repositories.i_proposal_repository import IProposalRepository
from comptoir.domain.repositories.i_user_repository import IUserRepository
from comptoir.domain.services.clock import Clock, utc_now


class CreateProposal:
    """
    Submit a governance proposal.

    Business rules:
    - Title and description are required
    - Proposer must be a registered user
    - Voting closes VOTING_PERIOD after creation
    """

    def __init__(
        self,
        user_repository: IUserRepository,
        proposal_repository: IProposalRepository,
        clock: Clock = utc_now,
    ):
        """
        Initialize use case.

        Args:
            user_repository: User repository
            proposal_repository: Proposal repository
            clock: Source of the current time
        """
        self.user_repository = user_repository
        self.proposal_repository = proposal_repository
        self.clock = clock

    async def execute(
        self, title: str, description: str, proposer_wallet: str
    ) -> Proposal:
        """
        Create an active proposal.

        Returns:
            Created Proposal with its end date

        Raises:
            ValidationError: Title or description missing
            EntityNotFoundError: Proposer not registered
        """
        if not title or not title.strip():
            raise ValidationError(field="title", reason="Title is required")
        if not description or not description.strip():
            raise ValidationError(
                field="description", reason="Description is required"
            )

        proposer = await resolve_user(self.user_repository, proposer_wallet)

        proposal = Proposal(
            proposer_id=proposer.id,
            title=title,
            description=description,
            created_at=self.clock(),
        )
        return await self.proposal_repository.create(proposal)
