"""
Unit tests for domain entities.
"""

from datetime import datetime, timedelta

import pytest

from comptoir.domain.entities.leaderboard_entry import LeaderboardEntry
from comptoir.domain.entities.lending_position import (
    LendingPosition,
    LendingType,
    required_collateral,
)
from comptoir.domain.entities.proposal import VOTING_PERIOD, Proposal, ProposalStatus
from comptoir.domain.entities.staking_position import (
    MIN_STAKE_AMOUNT,
    PositionStatus,
    StakingPosition,
)
from comptoir.domain.entities.transaction import Transaction, TransactionType
from comptoir.domain.entities.user import KYCStatus, User

START = datetime(2024, 1, 1, 12, 0, 0)


class TestUser:
    """Tests for User entity."""

    def test_wallet_is_lower_cased(self):
        user = User(wallet_address="0xABCDEF")
        assert user.wallet_address == "0xabcdef"

    def test_wallet_required(self):
        with pytest.raises(ValueError):
            User(wallet_address="")

    def test_kyc_starts_pending(self):
        user = User(wallet_address="0xabc")
        assert user.kyc_status == KYCStatus.PENDING

        user.verify_kyc()

        assert user.kyc_status == KYCStatus.VERIFIED


class TestStakingPosition:
    """Tests for StakingPosition entity."""

    def test_below_minimum_rejected(self):
        with pytest.raises(ValueError):
            StakingPosition(user_id=1, amount=MIN_STAKE_AMOUNT - 0.01)

    def test_minimum_accepted(self):
        position = StakingPosition(user_id=1, amount=MIN_STAKE_AMOUNT)
        assert position.is_active()
        assert position.rewards == 0.0

    def test_complete_snapshots_rewards(self):
        position = StakingPosition(user_id=1, amount=1000, start_date=START)

        rewards = position.complete(START + timedelta(days=10))

        assert rewards == pytest.approx(5.0)
        assert position.rewards == rewards
        assert position.status == PositionStatus.COMPLETED

    def test_complete_twice_rejected(self):
        position = StakingPosition(user_id=1, amount=1000, start_date=START)
        position.complete(START + timedelta(days=1))

        with pytest.raises(ValueError):
            position.complete(START + timedelta(days=2))

    def test_earned_rewards_frozen_after_completion(self):
        position = StakingPosition(user_id=1, amount=1000, start_date=START)
        position.complete(START + timedelta(days=10))

        assert position.earned_rewards(START + timedelta(days=100)) == pytest.approx(
            5.0
        )


class TestLendingPosition:
    """Tests for LendingPosition entity."""

    def test_required_collateral_ratio(self):
        assert required_collateral(100) == pytest.approx(150)

    def test_lend_total_value_includes_interest(self):
        position = LendingPosition(
            user_id=1,
            type=LendingType.LEND,
            token="USDC",
            amount=1000,
            interest_rate=5.0,
            start_date=START,
        )
        now = START + timedelta(days=365)

        assert position.interest_accrued(now) == pytest.approx(50.0)
        assert position.total_value(now) == pytest.approx(1050.0)

    def test_borrow_total_value_is_principal(self):
        position = LendingPosition(
            user_id=1,
            type=LendingType.BORROW,
            token="USDC",
            amount=1000,
            interest_rate=8.0,
            start_date=START,
        )
        assert position.total_value(START + timedelta(days=365)) == 1000

    def test_non_positive_amount_rejected(self):
        with pytest.raises(ValueError):
            LendingPosition(user_id=1, token="USDC", amount=0)


class TestProposal:
    """Tests for Proposal entity."""

    def _proposal(self, **kwargs) -> Proposal:
        return Proposal(
            proposer_id=1,
            title="Lower fees",
            description="Cut the trading fee",
            created_at=START,
            **kwargs,
        )

    def test_end_date_defaults_to_voting_period(self):
        assert self._proposal().end_date == START + VOTING_PERIOD

    def test_title_required(self):
        with pytest.raises(ValueError):
            Proposal(proposer_id=1, title=" ", description="x")

    def test_voting_window_boundaries(self):
        proposal = self._proposal()
        end = proposal.end_date

        assert proposal.voting_open(end)
        assert not proposal.voting_open(end + timedelta(seconds=1))
        assert not proposal.voting_ended(end - timedelta(seconds=1))
        assert proposal.voting_ended(end)

    def test_tie_is_defeated(self):
        proposal = self._proposal(for_votes=10, against_votes=10)
        assert proposal.outcome() == ProposalStatus.DEFEATED

    def test_majority_for_is_executed(self):
        proposal = self._proposal(for_votes=10.5, against_votes=10)
        assert proposal.outcome() == ProposalStatus.EXECUTED

    def test_voting_closed_once_resolved(self):
        proposal = self._proposal(status=ProposalStatus.DEFEATED)
        assert not proposal.voting_open(START)


class TestTransaction:
    """Tests for Transaction entity."""

    def test_amount_must_be_positive(self):
        with pytest.raises(ValueError):
            Transaction(user_id=1, type=TransactionType.SWAP, token_in="ETH", amount_in=0)

    def test_negative_fee_rejected(self):
        with pytest.raises(ValueError):
            Transaction(user_id=1, token_in="ETH", amount_in=1, fee=-0.1)


class TestLeaderboardEntry:
    def test_key_is_case_insensitive(self):
        assert LeaderboardEntry(address="0xABC", score=1).key == "0xabc"

    def test_blank_address_rejected(self):
        with pytest.raises(ValueError):
            LeaderboardEntry(address="  ", score=1)
