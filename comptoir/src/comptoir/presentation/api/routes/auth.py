"""
Auth API routes.

Wallet-only registration and login. Tokens are JWTs carrying the user id
and wallet address.
"""

from fastapi import APIRouter, Depends, status

from comptoir.application.use_cases.get_user_profile import GetUserProfile
from comptoir.application.use_cases.login_user import LoginUser
from comptoir.application.use_cases.register_user import RegisterUser
from comptoir.application.use_cases.submit_kyc import KYCSubmission, SubmitKYC
from comptoir.di.dependencies import (
    get_get_user_profile,
    get_login_user,
    get_register_user,
    get_submit_kyc,
)
from comptoir.domain.entities.user import User
from comptoir.infrastructure.auth.jwt_handler import create_access_token
from comptoir.infrastructure.monitoring import metrics
from comptoir.infrastructure.monitoring.logger import get_logger
from comptoir.presentation.api.middleware.auth import get_current_user
from comptoir.presentation.schemas.auth_schemas import (
    KYCRequest,
    KYCResponse,
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
    UserResponse,
)

logger = get_logger(__name__)

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_200_OK,
    summary="Register wallet",
)
async def register(
    request: RegisterRequest,
    use_case: RegisterUser = Depends(get_register_user),
) -> RegisterResponse:
    """
    Register a new user.

    Returns 400 if the wallet is blank or already registered.
    """
    user = await use_case.execute(
        wallet_address=request.wallet_address,
        email=request.email,
        username=request.username,
    )
    metrics.users_registered_total.inc()
    logger.info(f"User {user.id} registered")

    return RegisterResponse(
        user_id=user.id,
        token=create_access_token(user.id, user.wallet_address),
    )


@router.post(
    "/login",
    response_model=LoginResponse,
    summary="Login with wallet",
)
async def login(
    request: LoginRequest,
    use_case: LoginUser = Depends(get_login_user),
) -> LoginResponse:
    """
    Issue a token for a registered wallet.

    Returns 404 if the wallet is not registered.
    """
    user = await use_case.execute(request.wallet_address)

    return LoginResponse(
        user=UserResponse.from_entity(user),
        token=create_access_token(user.id, user.wallet_address),
    )


@router.post(
    "/kyc",
    response_model=KYCResponse,
    summary="Submit KYC",
    description="Verifies the caller immediately; documents are not reviewed.",
)
async def submit_kyc(
    request: KYCRequest,
    current_user: User = Depends(get_current_user),
    use_case: SubmitKYC = Depends(get_submit_kyc),
) -> KYCResponse:
    user = await use_case.execute(
        KYCSubmission(
            user_id=current_user.id,
            full_name=request.full_name,
            date_of_birth=request.date_of_birth,
            country=request.country,
            id_document=request.id_document,
        )
    )
    logger.info(f"KYC verified for user {user.id}")

    return KYCResponse(status=user.kyc_status.value)


@router.get(
    "/profile",
    response_model=UserResponse,
    summary="Get current user profile",
)
async def get_profile(
    current_user: User = Depends(get_current_user),
    use_case: GetUserProfile = Depends(get_get_user_profile),
) -> UserResponse:
    """
    Get the authenticated user's profile.

    Requires valid JWT token in Authorization header.
    """
    user = await use_case.execute(current_user.id)
    return UserResponse.from_entity(user)
