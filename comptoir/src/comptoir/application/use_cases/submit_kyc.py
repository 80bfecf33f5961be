"""
Submit KYC use case.

Demo behavior: every submission is verified immediately. Documents are
accepted but neither stored nor checked.
"""

from dataclasses import dataclass
from typing import Optional

from comptoir.domain.entities.user import User
from comptoir.domain.exceptions import EntityNotFoundError
from comptoir.domain.repositories.i_user_repository import IUserRepository


@dataclass
class KYCSubmission:
    """Identity data submitted by a user."""

    user_id: int
    full_name: Optional[str] = None
    date_of_birth: Optional[str] = None
    country: Optional[str] = None
    id_document: Optional[str] = None


class SubmitKYC:
    """Mark a user's KYC as verified."""

    def __init__(self, user_repository: IUserRepository):
        """
        Initialize use case.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def execute(self, submission: KYCSubmission) -> User:
        """
        Verify the submitting user.

        Args:
            submission: KYC data

        Returns:
            Updated user with kyc_status verified

        Raises:
            EntityNotFoundError: If the user no longer exists
        """
        user = await self.user_repository.get_by_id(submission.user_id)
        if not user:
            raise EntityNotFoundError("User", submission.user_id)

        user.verify_kyc()
        return await self.user_repository.update(user)
