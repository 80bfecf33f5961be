"""
Integration tests for SQLAlchemy repositories.

Each test runs against a fresh in-memory SQLite database.
"""

from datetime import datetime
from typing import AsyncGenerator

import pytest
import pytest_asyncio

from comptoir.domain.entities.lending_position import LendingPosition, LendingType
from comptoir.domain.entities.proposal import Proposal, ProposalStatus
from comptoir.domain.entities.staking_position import PositionStatus, StakingPosition
from comptoir.domain.entities.transaction import (
    Transaction,
    TransactionStatus,
    TransactionType,
)
from comptoir.domain.entities.user import User
from comptoir.domain.exceptions import StorageError, ValidationError
from comptoir.infrastructure.persistence.database import Database
from comptoir.infrastructure.persistence.models import Base
from comptoir.infrastructure.persistence.repositories import (
    LendingPositionRepository,
    ProposalRepository,
    StakingPositionRepository,
    TransactionRepository,
    UserRepository,
)

WALLET = "0x" + "9c" * 20
START = datetime(2024, 9, 1, 8, 30)


@pytest_asyncio.fixture
async def db() -> AsyncGenerator[Database, None]:
    database = Database(database_url="sqlite+aiosqlite://", echo=False)
    await database.connect()
    await database.reset_schema_for_testing(Base.metadata)
    yield database
    await database.disconnect()


@pytest_asyncio.fixture
async def user(db: Database) -> User:
    async with db.session() as session:
        return await UserRepository(session).create(
            User(wallet_address=WALLET.upper().replace("0X", "0x"), username="carol")
        )


class TestUserRepository:
    async def test_lookup_by_wallet_any_case(self, db, user):
        async with db.session() as session:
            found = await UserRepository(session).get_by_wallet(WALLET.upper())

        assert found is not None
        assert found.id == user.id
        assert found.wallet_address == WALLET

    async def test_duplicate_wallet_is_validation_error(self, db, user):
        with pytest.raises(ValidationError):
            async with db.session() as session:
                await UserRepository(session).create(User(wallet_address=WALLET))

    async def test_update_persists_kyc(self, db, user):
        user.verify_kyc()
        async with db.session() as session:
            await UserRepository(session).update(user)

        async with db.session() as session:
            reloaded = await UserRepository(session).get_by_id(user.id)

        assert reloaded.kyc_status.value == "verified"


class TestStakingPositionRepository:
    async def test_complete_only_once(self, db, user):
        async with db.session() as session:
            repo = StakingPositionRepository(session)
            position = await repo.create(
                StakingPosition(user_id=user.id, amount=1000, start_date=START)
            )

        async with db.session() as session:
            repo = StakingPositionRepository(session)
            assert await repo.complete(position.id, 5.0) is True
            assert await repo.complete(position.id, 9.0) is False

        async with db.session() as session:
            repo = StakingPositionRepository(session)
            positions = await repo.list_by_user(user.id)
            assert await repo.get_active_for_user(position.id, user.id) is None
            assert await repo.total_rewards_for_user(user.id) == 5.0

        assert positions[0].status == PositionStatus.COMPLETED
        assert positions[0].rewards == 5.0
        assert positions[0].start_date == START

    async def test_active_totals(self, db, user):
        async with db.session() as session:
            repo = StakingPositionRepository(session)
            await repo.create(StakingPosition(user_id=user.id, amount=100))
            done = await repo.create(StakingPosition(user_id=user.id, amount=300))
            await repo.create(StakingPosition(user_id=user.id, amount=200))
            await repo.complete(done.id, 1.0)

        async with db.session() as session:
            totals = await StakingPositionRepository(session).get_active_totals()

        assert totals == (300.0, 2)

    async def test_active_totals_empty(self, db):
        async with db.session() as session:
            assert await StakingPositionRepository(session).get_active_totals() == (
                0.0,
                0,
            )


class TestLendingPositionRepository:
    async def test_active_lookup_filters_type(self, db, user):
        async with db.session() as session:
            repo = LendingPositionRepository(session)
            lend = await repo.create(
                LendingPosition(
                    user_id=user.id,
                    type=LendingType.LEND,
                    token="USDC",
                    amount=10,
                    interest_rate=5.0,
                )
            )
            found = await repo.get_active_for_user(lend.id, user.id, LendingType.BORROW)

        assert found is None

    async def test_list_active_only(self, db, user):
        async with db.session() as session:
            repo = LendingPositionRepository(session)
            loan = await repo.create(
                LendingPosition(
                    user_id=user.id,
                    type=LendingType.BORROW,
                    token="USDC",
                    amount=10,
                    interest_rate=8.0,
                )
            )
            await repo.complete(loan.id)

        async with db.session() as session:
            repo = LendingPositionRepository(session)
            assert await repo.list_by_user(user.id, active_only=True) == []
            assert len(await repo.list_by_user(user.id)) == 1


class TestProposalRepository:
    async def _create(self, db, user) -> Proposal:
        async with db.session() as session:
            return await ProposalRepository(session).create(
                Proposal(
                    proposer_id=user.id,
                    title="Fee holiday",
                    description="No fees for a week",
                    created_at=START,
                )
            )

    async def test_create_loads_proposer(self, db, user):
        proposal = await self._create(db, user)

        assert proposal.id is not None
        assert proposal.proposer_username == "carol"
        assert proposal.proposer_wallet == WALLET

    async def test_add_votes_additive(self, db, user):
        proposal = await self._create(db, user)

        async with db.session() as session:
            repo = ProposalRepository(session)
            await repo.add_votes(proposal.id, True, 1.25)
            await repo.add_votes(proposal.id, True, 0.75)
            await repo.add_votes(proposal.id, False, 3)

        async with db.session() as session:
            stored = await ProposalRepository(session).get_by_id(proposal.id)

        assert stored.for_votes == pytest.approx(2.0)
        assert stored.against_votes == pytest.approx(3.0)

    async def test_add_votes_rejected_once_resolved(self, db, user):
        proposal = await self._create(db, user)

        async with db.session() as session:
            repo = ProposalRepository(session)
            await repo.set_status(proposal.id, ProposalStatus.DEFEATED)
            assert await repo.add_votes(proposal.id, True, 1) is False

    async def test_list_newest_first(self, db, user):
        first = await self._create(db, user)
        second = await self._create(db, user)

        async with db.session() as session:
            proposals = await ProposalRepository(session).list_all()

        assert [p.id for p in proposals] == [second.id, first.id]


class TestTransactionRepository:
    async def test_stats(self, db, user):
        async with db.session() as session:
            repo = TransactionRepository(session)
            for tx_type, fee in [
                (TransactionType.SWAP, 0.25),
                (TransactionType.BUY, 1.0),
                (TransactionType.SELL, 0.5),
                (TransactionType.SWAP, 0.25),
            ]:
                await repo.create(
                    Transaction(
                        user_id=user.id,
                        type=tx_type,
                        token_in="ETH",
                        amount_in=1,
                        fee=fee,
                        status=TransactionStatus.COMPLETED,
                    )
                )

        async with db.session() as session:
            repo = TransactionRepository(session)
            stats = await repo.get_user_stats(user.id)
            platform = await repo.get_platform_stats()
            page = await repo.list_by_user(user.id, limit=3)

        assert stats.total_transactions == 4
        assert stats.total_fees == pytest.approx(2.0)
        assert (stats.swaps, stats.buys, stats.sells) == (2, 1, 1)
        assert platform.total_users == 1
        assert platform.total_transactions == 4
        assert len(page) == 3


class TestDatabase:
    async def test_health_check(self, db):
        assert await db.health_check() is True

    async def test_session_requires_connect(self):
        database = Database(database_url="sqlite+aiosqlite://")
        with pytest.raises(StorageError):
            async with database.session():
                pass
