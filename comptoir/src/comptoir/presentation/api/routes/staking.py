"""
Staking API routes.
"""

from fastapi import APIRouter, Depends

from comptoir.application.use_cases.get_staking_rewards import GetStakingRewards
from comptoir.application.use_cases.stake_tokens import StakeTokens
from comptoir.application.use_cases.unstake_tokens import UnstakeTokens
from comptoir.di.dependencies import (
    get_get_staking_rewards,
    get_stake_tokens,
    get_unstake_tokens,
)
from comptoir.domain.entities.staking_position import MIN_STAKE_AMOUNT
from comptoir.domain.services.accrual import (
    STAKING_ANNUAL_RATE_PERCENT,
    STAKING_DAILY_RATE_PERCENT,
)
from comptoir.infrastructure.monitoring import metrics
from comptoir.presentation.schemas.staking_schemas import (
    StakeRequest,
    StakeResponse,
    StakingInfoResponse,
    StakingPositionResponse,
    StakingRewardsResponse,
    UnstakeRequest,
    UnstakeResponse,
)

router = APIRouter(prefix="/staking", tags=["Staking"])


@router.post("/stake", response_model=StakeResponse, summary="Stake tokens")
async def stake(
    request: StakeRequest,
    use_case: StakeTokens = Depends(get_stake_tokens),
) -> StakeResponse:
    """
    Open a staking position.

    Returns 400 below the minimum stake, 404 for an unknown wallet.
    """
    position = await use_case.execute(request.wallet_address, request.amount)
    metrics.staking_positions_total.labels(action="open").inc()

    return StakeResponse(
        position_id=position.id,
        amount=position.amount,
        status=position.status.value,
    )


@router.post("/unstake", response_model=UnstakeResponse, summary="Unstake tokens")
async def unstake(
    request: UnstakeRequest,
    use_case: UnstakeTokens = Depends(get_unstake_tokens),
) -> UnstakeResponse:
    """
    Close an active position and record its rewards.

    Returns 404 if no active position with that id belongs to the wallet.
    """
    position = await use_case.execute(request.wallet_address, request.position_id)
    metrics.staking_positions_total.labels(action="close").inc()

    return UnstakeResponse(
        position_id=position.id,
        amount=position.amount,
        rewards=position.rewards,
        status=position.status.value,
    )


@router.get(
    "/rewards/{wallet_address}",
    response_model=StakingRewardsResponse,
    summary="Staking rewards summary",
)
async def get_rewards(
    wallet_address: str,
    use_case: GetStakingRewards = Depends(get_get_staking_rewards),
) -> StakingRewardsResponse:
    summary = await use_case.execute(wallet_address)

    return StakingRewardsResponse(
        total_staked=summary.total_staked,
        total_rewards=summary.total_rewards,
        active_positions=summary.active_positions,
        positions=[
            StakingPositionResponse(
                id=view.position.id,
                amount=view.position.amount,
                rewards=view.position.rewards,
                earned_rewards=view.earned_rewards,
                start_date=view.position.start_date,
                status=view.position.status.value,
            )
            for view in summary.positions
        ],
    )


@router.get("/info", response_model=StakingInfoResponse, summary="Staking terms")
async def get_info() -> StakingInfoResponse:
    return StakingInfoResponse(
        min_stake_amount=MIN_STAKE_AMOUNT,
        reward_rate=f"{STAKING_DAILY_RATE_PERCENT:g}% per day",
        daily_rate_percent=STAKING_DAILY_RATE_PERCENT,
        apr=f"{STAKING_ANNUAL_RATE_PERCENT:g}%",
    )
