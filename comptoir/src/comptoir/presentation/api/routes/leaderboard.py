"""
Leaderboard API routes.

Scores live in process memory and reset on restart.
"""

from fastapi import APIRouter, Depends

from comptoir.application.use_cases.leaderboard import (
    GetGameStats,
    GetLeaderboard,
    GetPlayerRank,
    UpdateScore,
)
from comptoir.di.container import get_container
from comptoir.di.dependencies import (
    get_get_game_stats,
    get_get_leaderboard,
    get_get_player_rank,
    get_update_score,
)
from comptoir.infrastructure.monitoring import metrics
from comptoir.presentation.schemas.leaderboard_schemas import (
    GameStatsResponse,
    LeaderboardEntryResponse,
    PlayerRankResponse,
    UpdateScoreRequest,
    UpdateScoreResponse,
)

router = APIRouter(prefix="/leaderboard", tags=["Leaderboard"])


@router.get(
    "",
    response_model=list[LeaderboardEntryResponse],
    summary="Top players",
)
async def get_leaderboard(
    use_case: GetLeaderboard = Depends(get_get_leaderboard),
) -> list[LeaderboardEntryResponse]:
    entries = await use_case.execute()
    return [LeaderboardEntryResponse.model_validate(e) for e in entries]


@router.post("/update", response_model=UpdateScoreResponse, summary="Report score")
async def update_score(
    request: UpdateScoreRequest,
    use_case: UpdateScore = Depends(get_update_score),
) -> UpdateScoreResponse:
    """
    Insert or replace a player's score.

    Returns 400 if address or score is missing.
    """
    entry = await use_case.execute(
        address=request.address,
        score=request.score,
        resources=request.resources,
        nft_count=request.nft_count,
    )
    players = await get_container().leaderboard_repository.list_all()
    metrics.leaderboard_players.set(len(players))

    return UpdateScoreResponse(
        success=True,
        player=LeaderboardEntryResponse.model_validate(entry),
    )


@router.get(
    "/player/{address}/rank",
    response_model=PlayerRankResponse,
    summary="Player rank",
)
async def get_player_rank(
    address: str,
    use_case: GetPlayerRank = Depends(get_get_player_rank),
) -> PlayerRankResponse:
    result = await use_case.execute(address)

    if result.rank is None:
        return PlayerRankResponse(
            rank=None,
            total_players=result.total_players,
            message="Player not found in leaderboard",
        )

    return PlayerRankResponse(
        rank=result.rank,
        total_players=result.total_players,
        player=LeaderboardEntryResponse.model_validate(result.entry),
    )


@router.get("/stats", response_model=GameStatsResponse, summary="Game stats")
async def get_stats(
    use_case: GetGameStats = Depends(get_get_game_stats),
) -> GameStatsResponse:
    stats = await use_case.execute()

    return GameStatsResponse(
        total_players=stats.total_players,
        total_score=stats.total_score,
        total_resources=stats.total_resources,
        total_nfts=stats.total_nfts,
        average_score=stats.average_score,
    )
