"""
Lending position repository implementation.
"""

from typing import Optional

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from comptoir.domain.entities.lending_position import LendingPosition, LendingType
from comptoir.domain.entities.staking_position import PositionStatus
from comptoir.domain.repositories.i_lending_position_repository import (
    ILendingPositionRepository,
)
from comptoir.infrastructure.persistence.models import LendingPositionModel


class LendingPositionRepository(ILendingPositionRepository):
    """SQLAlchemy implementation of lending position repository."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, position: LendingPosition) -> LendingPosition:
        """Persist a new position."""
        model = LendingPositionModel(
            user_id=position.user_id,
            type=position.type.value,
            token=position.token,
            amount=position.amount,
            interest_rate=position.interest_rate,
            start_date=position.start_date,
            status=position.status.value,
        )

        self.session.add(model)
        await self.session.flush()
        await self.session.refresh(model)

        return self._to_entity(model)

    async def get_active_for_user(
        self,
        position_id: int,
        user_id: int,
        position_type: LendingType,
    ) -> Optional[LendingPosition]:
        """Get an active position of the given type owned by a user."""
        stmt = select(LendingPositionModel).where(
            LendingPositionModel.id == position_id,
            LendingPositionModel.user_id == user_id,
            LendingPositionModel.type == position_type.value,
            LendingPositionModel.status == PositionStatus.ACTIVE.value,
        )
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def complete(self, position_id: int) -> bool:
        """Finalize a position if it is still active."""
        stmt = (
            update(LendingPositionModel)
            .where(
                LendingPositionModel.id == position_id,
                LendingPositionModel.status == PositionStatus.ACTIVE.value,
            )
            .values(status=PositionStatus.COMPLETED.value)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        return result.rowcount == 1

    async def list_by_user(
        self, user_id: int, active_only: bool = False
    ) -> list[LendingPosition]:
        """List a user's positions, newest first."""
        stmt = select(LendingPositionModel).where(
            LendingPositionModel.user_id == user_id
        )
        if active_only:
            stmt = stmt.where(
                LendingPositionModel.status == PositionStatus.ACTIVE.value
            )
        stmt = stmt.order_by(
            LendingPositionModel.start_date.desc(), LendingPositionModel.id.desc()
        )

        result = await self.session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars().all()]

    def _to_entity(self, model: LendingPositionModel) -> LendingPosition:
        """Convert LendingPositionModel to LendingPosition entity."""
        return LendingPosition(
            id=model.id,
            user_id=model.user_id,
            type=LendingType(model.type),
            token=model.token,
            amount=model.amount,
            interest_rate=model.interest_rate,
            start_date=model.start_date,
            status=PositionStatus(model.status),
        )
