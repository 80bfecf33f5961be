"""
Unit tests for lending use cases.
"""

from datetime import datetime, timedelta
from unittest.mock import AsyncMock

import pytest

from comptoir.application.use_cases.borrow_tokens import BorrowCommand, BorrowTokens
from comptoir.application.use_cases.lend_tokens import LendTokens
from comptoir.application.use_cases.repay_loan import RepayLoan
from comptoir.domain.entities.lending_position import LendingPosition, LendingType
from comptoir.domain.entities.user import User
from comptoir.domain.exceptions import (
    EntityNotFoundError,
    InsufficientCollateralError,
    ValidationError,
)

WALLET = "0x" + "d4" * 20
START = datetime(2024, 5, 1)


def _user_repo() -> AsyncMock:
    repo = AsyncMock()
    repo.get_by_wallet.return_value = User(id=3, wallet_address=WALLET)
    return repo


def _lending_repo() -> AsyncMock:
    repo = AsyncMock()

    async def create(position):
        position.id = 11
        return position

    repo.create.side_effect = create
    repo.complete.return_value = True
    return repo


def _borrow(collateral: float, amount: float = 100) -> BorrowCommand:
    return BorrowCommand(
        wallet_address=WALLET,
        collateral_token="ETH",
        borrow_token="USDC",
        collateral_amount=collateral,
        borrow_amount=amount,
    )


class TestLendTokens:
    """Tests for LendTokens."""

    async def test_lend_at_fixed_rate(self):
        use_case = LendTokens(_user_repo(), _lending_repo(), clock=lambda: START)

        position = await use_case.execute(WALLET, "USDC", 500)

        assert position.type == LendingType.LEND
        assert position.interest_rate == 5.0
        assert position.start_date == START

    @pytest.mark.parametrize("token,amount", [("", 10), ("USDC", 0), ("USDC", -1)])
    async def test_invalid_input(self, token, amount):
        use_case = LendTokens(_user_repo(), _lending_repo())
        with pytest.raises(ValidationError):
            await use_case.execute(WALLET, token, amount)


class TestBorrowTokens:
    """Tests for BorrowTokens."""

    async def test_exact_ratio_accepted(self):
        use_case = BorrowTokens(_user_repo(), _lending_repo())

        result = await use_case.execute(_borrow(collateral=150))

        assert result.position.id == 11
        assert result.position.type == LendingType.BORROW
        assert result.position.interest_rate == 8.0
        assert result.collateral_amount == 150
        assert result.collateral_token == "ETH"

    async def test_just_below_ratio_rejected(self):
        user_repo = _user_repo()
        lending_repo = _lending_repo()
        use_case = BorrowTokens(user_repo, lending_repo)

        with pytest.raises(InsufficientCollateralError) as exc_info:
            await use_case.execute(_borrow(collateral=149.99))

        assert exc_info.value.required == pytest.approx(150)
        assert exc_info.value.provided == 149.99
        user_repo.get_by_wallet.assert_not_called()
        lending_repo.create.assert_not_called()

    async def test_error_details_carry_amounts(self):
        use_case = BorrowTokens(_user_repo(), _lending_repo())

        with pytest.raises(InsufficientCollateralError) as exc_info:
            await use_case.execute(_borrow(collateral=100))

        assert exc_info.value.details() == {"required": 150.0, "provided": 100}

    async def test_missing_token(self):
        command = _borrow(collateral=150)
        command.borrow_token = ""
        with pytest.raises(ValidationError):
            await BorrowTokens(_user_repo(), _lending_repo()).execute(command)

    async def test_non_positive_amount(self):
        with pytest.raises(ValidationError):
            await BorrowTokens(_user_repo(), _lending_repo()).execute(
                _borrow(collateral=150, amount=0)
            )


class TestRepayLoan:
    """Tests for RepayLoan."""

    async def test_repay_one_year(self):
        lending_repo = _lending_repo()
        lending_repo.get_active_for_user.return_value = LendingPosition(
            id=11,
            user_id=3,
            type=LendingType.BORROW,
            token="USDC",
            amount=1000,
            interest_rate=8.0,
            start_date=START,
        )
        use_case = RepayLoan(
            _user_repo(), lending_repo, clock=lambda: START + timedelta(days=365)
        )

        result = await use_case.execute(WALLET, 11)

        assert result.loan_id == 11
        assert result.principal == 1000
        assert result.interest == pytest.approx(80.0)
        assert result.total_repayment == pytest.approx(1080.0)
        lending_repo.get_active_for_user.assert_called_once_with(
            11, 3, LendingType.BORROW
        )
        lending_repo.complete.assert_called_once_with(11)

    async def test_repay_unknown_loan(self):
        lending_repo = _lending_repo()
        lending_repo.get_active_for_user.return_value = None

        with pytest.raises(EntityNotFoundError):
            await RepayLoan(_user_repo(), lending_repo).execute(WALLET, 404)

    async def test_repay_twice(self):
        """Second repayment finds no active row."""
        lending_repo = _lending_repo()
        lending_repo.get_active_for_user.return_value = LendingPosition(
            id=11, user_id=3, type=LendingType.BORROW, token="USDC", amount=10
        )
        lending_repo.complete.return_value = False

        with pytest.raises(EntityNotFoundError):
            await RepayLoan(_user_repo(), lending_repo).execute(WALLET, 11)
