"""
Staking position repository implementation.
"""

from typing import Optional

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from comptoir.domain.entities.staking_position import (
    PositionStatus,
    StakingPosition,
)
from comptoir.domain.repositories.i_staking_position_repository import (
    IStakingPositionRepository,
)
from comptoir.infrastructure.persistence.models import StakingPositionModel


class StakingPositionRepository(IStakingPositionRepository):
    """SQLAlchemy implementation of staking position repository."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, position: StakingPosition) -> StakingPosition:
        """Persist a new position."""
        model = StakingPositionModel(
            user_id=position.user_id,
            amount=position.amount,
            rewards=position.rewards,
            start_date=position.start_date,
            status=position.status.value,
        )

        self.session.add(model)
        await self.session.flush()
        await self.session.refresh(model)

        return self._to_entity(model)

    async def get_active_for_user(
        self, position_id: int, user_id: int
    ) -> Optional[StakingPosition]:
        """Get an active position owned by a user."""
        stmt = select(StakingPositionModel).where(
            StakingPositionModel.id == position_id,
            StakingPositionModel.user_id == user_id,
            StakingPositionModel.status == PositionStatus.ACTIVE.value,
        )
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def complete(self, position_id: int, rewards: float) -> bool:
        """
        Finalize a position with a reward snapshot.

        Conditional UPDATE: only the first concurrent caller matches the
        active row, later callers see rowcount 0.
        """
        stmt = (
            update(StakingPositionModel)
            .where(
                StakingPositionModel.id == position_id,
                StakingPositionModel.status == PositionStatus.ACTIVE.value,
            )
            .values(status=PositionStatus.COMPLETED.value, rewards=rewards)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        return result.rowcount == 1

    async def list_by_user(
        self, user_id: int, active_only: bool = False
    ) -> list[StakingPosition]:
        """List a user's positions, oldest first."""
        stmt = select(StakingPositionModel).where(
            StakingPositionModel.user_id == user_id
        )
        if active_only:
            stmt = stmt.where(
                StakingPositionModel.status == PositionStatus.ACTIVE.value
            )
        stmt = stmt.order_by(StakingPositionModel.id)

        result = await self.session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars().all()]

    async def total_rewards_for_user(self, user_id: int) -> float:
        """Sum of stored rewards for a user."""
        stmt = select(func.coalesce(func.sum(StakingPositionModel.rewards), 0.0)).where(
            StakingPositionModel.user_id == user_id
        )
        result = await self.session.execute(stmt)
        return float(result.scalar_one() or 0.0)

    async def get_active_totals(self) -> tuple[float, int]:
        """Platform-wide total actively staked and active position count."""
        stmt = select(
            func.coalesce(func.sum(StakingPositionModel.amount), 0.0),
            func.count(StakingPositionModel.id),
        ).where(StakingPositionModel.status == PositionStatus.ACTIVE.value)
        row = (await self.session.execute(stmt)).one()
        return float(row[0] or 0.0), int(row[1] or 0)

    def _to_entity(self, model: StakingPositionModel) -> StakingPosition:
        """Convert StakingPositionModel to StakingPosition entity."""
        return StakingPosition(
            id=model.id,
            user_id=model.user_id,
            amount=model.amount,
            rewards=model.rewards,
            start_date=model.start_date,
            status=PositionStatus(model.status),
        )
