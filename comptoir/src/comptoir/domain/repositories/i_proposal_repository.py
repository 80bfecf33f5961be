"""
Proposal repository interface.
"""

from abc import ABC, abstractmethod
from typing import Optional

from comptoir.domain.entities.proposal import Proposal, ProposalStatus


class IProposalRepository(ABC):
    """Interface for governance proposal persistence."""

    @abstractmethod
    async def create(self, proposal: Proposal) -> Proposal:
        """Persist a new proposal and return it with its ID."""

    @abstractmethod
    async def get_by_id(self, proposal_id: int) -> Optional[Proposal]:
        """Get a proposal with proposer username and wallet attached."""

    @abstractmethod
    async def list_all(self) -> list[Proposal]:
        """List proposals, newest first, with proposer details."""

    @abstractmethod
    async def add_votes(self, proposal_id: int, support: bool, weight: float) -> bool:
        """
        Add ``weight`` to the for or against tally of an active proposal.

        The increment happens inside the store, not read-modify-write.

        Returns:
            True if an active proposal was updated
        """

    @abstractmethod
    async def set_status(self, proposal_id: int, status: ProposalStatus) -> None:
        """Set the proposal status."""
