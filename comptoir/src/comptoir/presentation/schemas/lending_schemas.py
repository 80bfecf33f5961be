"""
Lending API schemas.
"""

from datetime import datetime

from comptoir.presentation.schemas.base import CamelModel


class LendRequest(CamelModel):
    token: str
    amount: float
    wallet_address: str


class LendResponse(CamelModel):
    position_id: int
    type: str
    token: str
    amount: float
    interest_rate: float
    status: str
    message: str = "Lending position created successfully"


class BorrowRequest(CamelModel):
    collateral_token: str
    borrow_token: str
    collateral_amount: float
    borrow_amount: float
    wallet_address: str


class BorrowResponse(CamelModel):
    loan_id: int
    type: str
    collateral_token: str
    borrow_token: str
    collateral_amount: float
    borrow_amount: float
    interest_rate: float
    status: str
    message: str = "Loan created successfully"


class RepayRequest(CamelModel):
    loan_id: int
    wallet_address: str


class RepayResponse(CamelModel):
    loan_id: int
    principal: float
    interest: float
    total_repayment: float
    status: str
    message: str = "Loan repaid successfully"


class LendingPositionResponse(CamelModel):
    """Lending position with interest evaluated at request time."""

    id: int
    type: str
    token: str
    amount: float
    interest_rate: float
    start_date: datetime
    status: str
    interest_accrued: float
    total_value: float


class LendingPositionsResponse(CamelModel):
    positions: list[LendingPositionResponse]


class LendingInfoResponse(CamelModel):
    collateral_ratio: str
    lending_apr: str
    borrowing_apr: str
