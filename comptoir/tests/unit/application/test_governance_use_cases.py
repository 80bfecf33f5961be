"""
Unit tests for governance use cases.
"""

from datetime import datetime, timedelta
from unittest.mock import AsyncMock

import pytest

from comptoir.application.use_cases.cast_vote import CastVote, VoteCommand
from comptoir.application.use_cases.create_proposal import CreateProposal
from comptoir.application.use_cases.execute_proposal import ExecuteProposal
from comptoir.application.use_cases.get_proposals import GetProposal
from comptoir.domain.entities.proposal import Proposal, ProposalStatus
from comptoir.domain.entities.user import User
from comptoir.domain.exceptions import EntityNotFoundError, ValidationError

WALLET = "0x" + "e5" * 20
T0 = datetime(2024, 6, 1, 0, 0, 0)


class FakeProposalRepository:
    """Minimal in-memory proposal store with additive tallies."""

    def __init__(self):
        self.proposals: dict[int, Proposal] = {}

    async def create(self, proposal: Proposal) -> Proposal:
        proposal.id = len(self.proposals) + 1
        self.proposals[proposal.id] = proposal
        return proposal

    async def get_by_id(self, proposal_id: int):
        return self.proposals.get(proposal_id)

    async def list_all(self):
        return list(reversed(self.proposals.values()))

    async def add_votes(self, proposal_id: int, support: bool, weight: float) -> bool:
        proposal = self.proposals.get(proposal_id)
        if not proposal or not proposal.is_active():
            return False
        if support:
            proposal.for_votes += weight
        else:
            proposal.against_votes += weight
        return True

    async def set_status(self, proposal_id: int, status: ProposalStatus) -> None:
        self.proposals[proposal_id].status = status


class TestGovernanceUseCases:
    """Proposal lifecycle: create, vote, execute."""

    # ================================================================
    # Helper Methods
    # ================================================================

    def _user_repo(self) -> AsyncMock:
        repo = AsyncMock()
        repo.get_by_wallet.return_value = User(id=1, wallet_address=WALLET)
        return repo

    async def _create(self, repo: FakeProposalRepository) -> Proposal:
        use_case = CreateProposal(self._user_repo(), repo, clock=lambda: T0)
        return await use_case.execute("Raise APR", "Raise staking APR", WALLET)

    def _vote(self, repo, now: datetime) -> CastVote:
        return CastVote(self._user_repo(), repo, clock=lambda: now)

    # ================================================================
    # Test Methods
    # ================================================================

    async def test_create_sets_three_day_window(self):
        proposal = await self._create(FakeProposalRepository())

        assert proposal.status == ProposalStatus.ACTIVE
        assert proposal.end_date == T0 + timedelta(days=3)
        assert proposal.for_votes == 0
        assert proposal.against_votes == 0

    async def test_create_requires_title(self):
        use_case = CreateProposal(self._user_repo(), FakeProposalRepository())
        with pytest.raises(ValidationError):
            await use_case.execute("", "desc", WALLET)

    async def test_votes_are_additive(self):
        repo = FakeProposalRepository()
        proposal = await self._create(repo)
        vote = self._vote(repo, T0 + timedelta(hours=1))

        await vote.execute(VoteCommand(proposal.id, 1, 2.5, WALLET))
        await vote.execute(VoteCommand(proposal.id, 1, 1.5, WALLET))
        await vote.execute(VoteCommand(proposal.id, 0, 3, WALLET))

        assert repo.proposals[proposal.id].for_votes == pytest.approx(4.0)
        assert repo.proposals[proposal.id].against_votes == pytest.approx(3.0)

    async def test_vote_result_echoes_support(self):
        repo = FakeProposalRepository()
        proposal = await self._create(repo)

        result = await self._vote(repo, T0).execute(
            VoteCommand(proposal.id, 0, 1, WALLET)
        )

        assert result.support is False
        assert result.weight == 1

    @pytest.mark.parametrize(
        "support,weight", [(2, 1.0), (None, 1.0), (1, 0), (1, -5), (1, None)]
    )
    async def test_vote_input_validation(self, support, weight):
        repo = FakeProposalRepository()
        proposal = await self._create(repo)

        with pytest.raises(ValidationError):
            await self._vote(repo, T0).execute(
                VoteCommand(proposal.id, support, weight, WALLET)
            )

    async def test_vote_on_missing_proposal(self):
        with pytest.raises(EntityNotFoundError):
            await self._vote(FakeProposalRepository(), T0).execute(
                VoteCommand(42, 1, 1, WALLET)
            )

    async def test_vote_after_end_date(self):
        repo = FakeProposalRepository()
        proposal = await self._create(repo)
        late = proposal.end_date + timedelta(seconds=1)

        with pytest.raises(ValidationError, match="Voting period has ended"):
            await self._vote(repo, late).execute(
                VoteCommand(proposal.id, 1, 1, WALLET)
            )

    async def test_execute_before_end_rejected(self):
        repo = FakeProposalRepository()
        proposal = await self._create(repo)
        use_case = ExecuteProposal(
            repo, clock=lambda: proposal.end_date - timedelta(seconds=1)
        )

        with pytest.raises(ValidationError):
            await use_case.execute(proposal.id)

        assert repo.proposals[proposal.id].status == ProposalStatus.ACTIVE

    async def test_execute_after_window_passes(self):
        """Votes 10 for, 4 against; executed at T0 + 3 days + 1 second."""
        repo = FakeProposalRepository()
        proposal = await self._create(repo)
        vote = self._vote(repo, T0 + timedelta(days=1))
        await vote.execute(VoteCommand(proposal.id, 1, 10, WALLET))
        await vote.execute(VoteCommand(proposal.id, 0, 4, WALLET))

        executed = await ExecuteProposal(
            repo, clock=lambda: T0 + timedelta(days=3, seconds=1)
        ).execute(proposal.id)

        assert executed.status == ProposalStatus.EXECUTED
        assert repo.proposals[proposal.id].status == ProposalStatus.EXECUTED

    async def test_tie_is_defeated(self):
        repo = FakeProposalRepository()
        proposal = await self._create(repo)
        vote = self._vote(repo, T0)
        await vote.execute(VoteCommand(proposal.id, 1, 5, WALLET))
        await vote.execute(VoteCommand(proposal.id, 0, 5, WALLET))

        executed = await ExecuteProposal(
            repo, clock=lambda: proposal.end_date
        ).execute(proposal.id)

        assert executed.status == ProposalStatus.DEFEATED

    async def test_vote_after_execution_rejected(self):
        repo = FakeProposalRepository()
        proposal = await self._create(repo)
        await ExecuteProposal(repo, clock=lambda: proposal.end_date).execute(
            proposal.id
        )

        with pytest.raises(EntityNotFoundError):
            await self._vote(repo, T0).execute(VoteCommand(proposal.id, 1, 1, WALLET))

    async def test_execute_missing_proposal(self):
        with pytest.raises(EntityNotFoundError):
            await ExecuteProposal(FakeProposalRepository()).execute(1)

    async def test_get_missing_proposal(self):
        with pytest.raises(EntityNotFoundError):
            await GetProposal(FakeProposalRepository()).execute(1)
