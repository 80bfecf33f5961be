"""
Leaderboard API schemas.
"""

from datetime import datetime
from typing import Optional

from comptoir.presentation.schemas.base import CamelModel


class LeaderboardEntryResponse(CamelModel):
    address: str
    score: int
    resources: int
    nft_count: int
    last_updated: datetime


class UpdateScoreRequest(CamelModel):
    """Score report; address and score are checked by the use case."""

    address: Optional[str] = None
    score: Optional[int] = None
    resources: int = 0
    nft_count: int = 0


class UpdateScoreResponse(CamelModel):
    success: bool
    player: LeaderboardEntryResponse


class PlayerRankResponse(CamelModel):
    rank: Optional[int] = None
    total_players: int
    player: Optional[LeaderboardEntryResponse] = None
    message: Optional[str] = None


class GameStatsResponse(CamelModel):
    total_players: int
    total_score: int
    total_resources: int
    total_nfts: int
    average_score: int
