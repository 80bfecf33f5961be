"""
Lending API routes.
"""

from fastapi import APIRouter, Depends

from comptoir.application.use_cases.borrow_tokens import BorrowCommand, BorrowTokens
from comptoir.application.use_cases.get_lending_positions import (
    GetLendingPositions,
)
from comptoir.application.use_cases.lend_tokens import LendTokens
from comptoir.application.use_cases.repay_loan import RepayLoan
from comptoir.di.dependencies import (
    get_borrow_tokens,
    get_get_lending_positions,
    get_lend_tokens,
    get_repay_loan,
)
from comptoir.domain.entities.lending_position import COLLATERAL_RATIO
from comptoir.domain.services.accrual import (
    BORROWING_ANNUAL_RATE_PERCENT,
    LENDING_ANNUAL_RATE_PERCENT,
)
from comptoir.infrastructure.monitoring import metrics
from comptoir.presentation.schemas.lending_schemas import (
    BorrowRequest,
    BorrowResponse,
    LendingInfoResponse,
    LendingPositionResponse,
    LendingPositionsResponse,
    LendRequest,
    LendResponse,
    RepayRequest,
    RepayResponse,
)

router = APIRouter(prefix="/lending", tags=["Lending"])


@router.post("/lend", response_model=LendResponse, summary="Lend tokens")
async def lend(
    request: LendRequest,
    use_case: LendTokens = Depends(get_lend_tokens),
) -> LendResponse:
    position = await use_case.execute(
        request.wallet_address, request.token, request.amount
    )
    metrics.lending_positions_total.labels(type="lend", action="open").inc()

    return LendResponse(
        position_id=position.id,
        type=position.type.value,
        token=position.token,
        amount=position.amount,
        interest_rate=position.interest_rate,
        status=position.status.value,
    )


@router.post("/borrow", response_model=BorrowResponse, summary="Borrow tokens")
async def borrow(
    request: BorrowRequest,
    use_case: BorrowTokens = Depends(get_borrow_tokens),
) -> BorrowResponse:
    """
    Open a collateralized loan.

    Returns 400 with ``required`` and ``provided`` when collateral is
    below 150% of the borrowed amount.
    """
    result = await use_case.execute(
        BorrowCommand(
            wallet_address=request.wallet_address,
            collateral_token=request.collateral_token,
            borrow_token=request.borrow_token,
            collateral_amount=request.collateral_amount,
            borrow_amount=request.borrow_amount,
        )
    )
    metrics.lending_positions_total.labels(type="borrow", action="open").inc()

    return BorrowResponse(
        loan_id=result.position.id,
        type=result.position.type.value,
        collateral_token=result.collateral_token,
        borrow_token=result.position.token,
        collateral_amount=result.collateral_amount,
        borrow_amount=result.position.amount,
        interest_rate=result.position.interest_rate,
        status=result.position.status.value,
    )


@router.post("/repay", response_model=RepayResponse, summary="Repay loan")
async def repay(
    request: RepayRequest,
    use_case: RepayLoan = Depends(get_repay_loan),
) -> RepayResponse:
    result = await use_case.execute(request.wallet_address, request.loan_id)
    metrics.lending_positions_total.labels(type="borrow", action="close").inc()

    return RepayResponse(
        loan_id=result.loan_id,
        principal=result.principal,
        interest=result.interest,
        total_repayment=result.total_repayment,
        status="completed",
    )


@router.get(
    "/positions/{wallet_address}",
    response_model=LendingPositionsResponse,
    summary="Lending positions with accrued interest",
)
async def get_positions(
    wallet_address: str,
    use_case: GetLendingPositions = Depends(get_get_lending_positions),
) -> LendingPositionsResponse:
    views = await use_case.execute(wallet_address)

    return LendingPositionsResponse(
        positions=[
            LendingPositionResponse(
                id=view.position.id,
                type=view.position.type.value,
                token=view.position.token,
                amount=view.position.amount,
                interest_rate=view.position.interest_rate,
                start_date=view.position.start_date,
                status=view.position.status.value,
                interest_accrued=view.interest_accrued,
                total_value=view.total_value,
            )
            for view in views
        ]
    )


@router.get("/info", response_model=LendingInfoResponse, summary="Lending terms")
async def get_info() -> LendingInfoResponse:
    return LendingInfoResponse(
        collateral_ratio=f"{COLLATERAL_RATIO * 100:g}%",
        lending_apr=f"{LENDING_ANNUAL_RATE_PERCENT:g}%",
        borrowing_apr=f"{BORROWING_ANNUAL_RATE_PERCENT:g}%",
    )
