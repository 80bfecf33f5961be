"""
Proposal repository implementation.
"""

from typing import Optional

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from comptoir.domain.entities.proposal import Proposal, ProposalStatus
from comptoir.domain.repositories.i_proposal_repository import (
    IProposalRepository,
)
from comptoir.infrastructure.persistence.models import ProposalModel


class ProposalRepository(IProposalRepository):
    """SQLAlchemy implementation of proposal repository."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, proposal: Proposal) -> Proposal:
        """Persist a new proposal."""
        model = ProposalModel(
            proposer_id=proposal.proposer_id,
            title=proposal.title,
            description=proposal.description,
            for_votes=proposal.for_votes,
            against_votes=proposal.against_votes,
            status=proposal.status.value,
            created_at=proposal.created_at,
            end_date=proposal.end_date,
        )

        self.session.add(model)
        await self.session.flush()

        return await self.get_by_id(model.id)

    async def get_by_id(self, proposal_id: int) -> Optional[Proposal]:
        """Get a proposal with its proposer loaded."""
        stmt = (
            select(ProposalModel)
            .where(ProposalModel.id == proposal_id)
            .options(selectinload(ProposalModel.proposer))
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def list_all(self) -> list[Proposal]:
        """List proposals, newest first."""
        stmt = (
            select(ProposalModel)
            .options(selectinload(ProposalModel.proposer))
            .order_by(ProposalModel.created_at.desc(), ProposalModel.id.desc())
        )
        result = await self.session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars().all()]

    async def add_votes(self, proposal_id: int, support: bool, weight: float) -> bool:
        """Increment a tally in place, only while the proposal is active."""
        column = ProposalModel.for_votes if support else ProposalModel.against_votes
        stmt = (
            update(ProposalModel)
            .where(
                ProposalModel.id == proposal_id,
                ProposalModel.status == ProposalStatus.ACTIVE.value,
            )
            .values({column: column + weight})
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        return result.rowcount == 1

    async def set_status(self, proposal_id: int, status: ProposalStatus) -> None:
        """Set the proposal status."""
        stmt = (
            update(ProposalModel)
            .where(ProposalModel.id == proposal_id)
            .values(status=status.value)
            .execution_options(synchronize_session=False)
        )
        await self.session.execute(stmt)

    def _to_entity(self, model: ProposalModel) -> Proposal:
        """Convert ProposalModel to Proposal entity."""
        proposer = model.proposer
        return Proposal(
            id=model.id,
            proposer_id=model.proposer_id,
            title=model.title,
            description=model.description,
            for_votes=model.for_votes,
            against_votes=model.against_votes,
            status=ProposalStatus(model.status),
            created_at=model.created_at,
            end_date=model.end_date,
            proposer_username=proposer.username if proposer else None,
            proposer_wallet=proposer.wallet_address if proposer else None,
        )
