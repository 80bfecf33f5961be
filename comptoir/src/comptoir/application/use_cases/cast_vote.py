"""
Cast vote use case.

Votes are weighted and anonymous: there is no per-voter record, so the
same wallet may vote more than once and the weight is not checked
against any balance.
"""

from dataclasses import dataclass
from typing import Optional

from comptoir.application.use_cases.common import resolve_user
from comptoir.domain.exceptions import EntityNotFoundError, ValidationError
from comptoir.domain.repositories.i_proposal_repository import IProposalRepository
from comptoir.domain.repositories.i_user_repository import IUserRepository
from comptoir.domain.services.clock import Clock, utc_now


@dataclass
class VoteCommand:
    """Command to vote on a proposal."""

    proposal_id: int
    support: Optional[int]
    weight: Optional[float]
    voter_wallet: str


@dataclass
class VoteResult:
    """Recorded vote."""

    proposal_id: int
    support: bool
    weight: float


class CastVote:
    """
    Add a weighted vote to a proposal's tally.

    Checks, in order: support is 0 or 1 and weight is positive; the
    voter is registered; the proposal exists and is active; its voting
    window has not closed.
    """

    def __init__(
        self,
        user_repository: IUserRepository,
        proposal_repository: IProposalRepository,
        clock: Clock = utc_now,
    ):
        self.user_repository = user_repository
        self.proposal_repository = proposal_repository
        self.clock = clock

    async def execute(self, command: VoteCommand) -> VoteResult:
        """
        Record the vote.

        Args:
            command: Vote parameters

        Returns:
            VoteResult echoing what was added

        Raises:
            ValidationError: Bad support/weight, or voting period ended
            EntityNotFoundError: Voter unknown, proposal missing or not active
        """
        if command.support not in (0, 1):
            raise ValidationError(field="support", reason="Support must be 0 or 1")
        if command.weight is None or command.weight <= 0:
            raise ValidationError(
                field="vote_weight", reason="Vote weight must be positive"
            )

        await resolve_user(self.user_repository, command.voter_wallet)

        proposal = await self.proposal_repository.get_by_id(command.proposal_id)
        if not proposal or not proposal.is_active():
            raise EntityNotFoundError("Active proposal", command.proposal_id)

        if not proposal.voting_open(self.clock()):
            raise ValidationError(field="proposal", reason="Voting period has ended")

        support = command.support == 1
        added = await self.proposal_repository.add_votes(
            proposal.id, support, command.weight
        )
        if not added:
            # Resolved between the read and the increment
            raise EntityNotFoundError("Active proposal", command.proposal_id)

        return VoteResult(
            proposal_id=proposal.id,
            support=support,
            weight=command.weight,
        )
