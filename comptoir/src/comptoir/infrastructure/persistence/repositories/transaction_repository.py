"""
Transaction repository implementation.
"""

from sqlalchemy import case, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from comptoir.domain.entities.transaction import (
    Transaction,
    TransactionStatus,
    TransactionType,
)
from comptoir.domain.repositories.i_transaction_repository import (
    ITransactionRepository,
    PlatformTradingStats,
    TradingStats,
)
from comptoir.infrastructure.persistence.models import TransactionModel


class TransactionRepository(ITransactionRepository):
    """SQLAlchemy implementation of the append-only trade log."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, transaction: Transaction) -> Transaction:
        """Append a transaction."""
        model = TransactionModel(
            user_id=transaction.user_id,
            type=transaction.type.value,
            token_in=transaction.token_in,
            token_out=transaction.token_out,
            amount_in=transaction.amount_in,
            amount_out=transaction.amount_out,
            price=transaction.price,
            fee=transaction.fee,
            status=transaction.status.value,
            tx_hash=transaction.tx_hash,
            created_at=transaction.created_at,
        )

        self.session.add(model)
        await self.session.flush()
        await self.session.refresh(model)

        return self._to_entity(model)

    async def list_by_user(
        self, user_id: int, limit: int = 100, offset: int = 0
    ) -> list[Transaction]:
        """List a user's transactions, newest first."""
        stmt = (
            select(TransactionModel)
            .where(TransactionModel.user_id == user_id)
            .order_by(TransactionModel.created_at.desc(), TransactionModel.id.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars().all()]

    async def count_by_user(self, user_id: int) -> int:
        """Count a user's transactions."""
        stmt = select(func.count(TransactionModel.id)).where(
            TransactionModel.user_id == user_id
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def get_user_stats(self, user_id: int) -> TradingStats:
        """Aggregate counts and fees for one user."""

        def count_type(tx_type: TransactionType):
            return func.coalesce(
                func.sum(case((TransactionModel.type == tx_type.value, 1), else_=0)),
                0,
            )

        stmt = select(
            func.count(TransactionModel.id),
            func.coalesce(func.sum(TransactionModel.fee), 0.0),
            count_type(TransactionType.SWAP),
            count_type(TransactionType.BUY),
            count_type(TransactionType.SELL),
        ).where(TransactionModel.user_id == user_id)

        row = (await self.session.execute(stmt)).one()
        return TradingStats(
            total_transactions=row[0] or 0,
            total_fees=float(row[1] or 0.0),
            swaps=int(row[2] or 0),
            buys=int(row[3] or 0),
            sells=int(row[4] or 0),
        )

    async def get_platform_stats(self) -> PlatformTradingStats:
        """Aggregate counts and fees for the whole platform."""
        stmt = select(
            func.count(func.distinct(TransactionModel.user_id)),
            func.count(TransactionModel.id),
            func.coalesce(func.sum(TransactionModel.fee), 0.0),
        )
        row = (await self.session.execute(stmt)).one()
        return PlatformTradingStats(
            total_users=row[0] or 0,
            total_transactions=row[1] or 0,
            total_fees=float(row[2] or 0.0),
        )

    def _to_entity(self, model: TransactionModel) -> Transaction:
        """Convert TransactionModel to Transaction entity."""
        return Transaction(
            id=model.id,
            user_id=model.user_id,
            type=TransactionType(model.type),
            token_in=model.token_in,
            token_out=model.token_out,
            amount_in=model.amount_in,
            amount_out=model.amount_out,
            price=model.price,
            fee=model.fee,
            status=TransactionStatus(model.status),
            tx_hash=model.tx_hash,
            created_at=model.created_at,
        )
