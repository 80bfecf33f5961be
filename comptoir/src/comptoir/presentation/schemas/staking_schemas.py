"""
Staking API schemas.
"""

from datetime import datetime

from comptoir.presentation.schemas.base import CamelModel


class StakeRequest(CamelModel):
    amount: float
    wallet_address: str


class StakeResponse(CamelModel):
    position_id: int
    amount: float
    status: str
    message: str = "Tokens staked successfully"


class UnstakeRequest(CamelModel):
    position_id: int
    wallet_address: str


class UnstakeResponse(CamelModel):
    position_id: int
    amount: float
    rewards: float
    status: str
    message: str = "Tokens unstaked successfully"


class StakingPositionResponse(CamelModel):
    """
    Staking position.

    ``rewards`` is the stored snapshot (0 while active);
    ``earned_rewards`` is evaluated at request time.
    """

    id: int
    amount: float
    rewards: float
    earned_rewards: float
    start_date: datetime
    status: str


class StakingRewardsResponse(CamelModel):
    total_staked: float
    total_rewards: float
    active_positions: int
    positions: list[StakingPositionResponse]


class StakingInfoResponse(CamelModel):
    min_stake_amount: float
    reward_rate: str
    daily_rate_percent: float
    apr: str
