"""
Lending domain exceptions.
"""

from comptoir.domain.exceptions.base import ComptoirException


class InsufficientCollateralError(ComptoirException):
    """Raised when a borrow request is below the collateralization ratio."""

    def __init__(self, required: float, provided: float):
        self.required = required
        self.provided = provided
        super().__init__("Insufficient collateral", code="INSUFFICIENT_COLLATERAL")

    def details(self) -> dict:
        return {"required": self.required, "provided": self.provided}
