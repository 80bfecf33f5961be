"""
Leaderboard use cases.

Players report their own scores; the latest report replaces the previous
one for that address.
"""

from dataclasses import dataclass
from typing import Optional

from comptoir.domain.entities.leaderboard_entry import LeaderboardEntry
from comptoir.domain.exceptions import ValidationError
from comptoir.domain.repositories.i_leaderboard_repository import (
    ILeaderboardRepository,
)
from comptoir.domain.services.clock import Clock, utc_now

LEADERBOARD_SIZE = 100


def _ranked(entries: list[LeaderboardEntry]) -> list[LeaderboardEntry]:
    """Highest score first; ties keep first-seen order."""
    return sorted(entries, key=lambda e: -e.score)


@dataclass
class PlayerRank:
    """A player's position on the full leaderboard."""

    rank: Optional[int]
    total_players: int
    entry: Optional[LeaderboardEntry] = None


@dataclass
class GameStats:
    """Totals across every player."""

    total_players: int = 0
    total_score: int = 0
    total_resources: int = 0
    total_nfts: int = 0
    average_score: int = 0


class UpdateScore:
    """Insert or replace a player's score."""

    def __init__(
        self,
        leaderboard_repository: ILeaderboardRepository,
        clock: Clock = utc_now,
    ):
        self.leaderboard_repository = leaderboard_repository
        self.clock = clock

    async def execute(
        self,
        address: Optional[str],
        score: Optional[int],
        resources: int = 0,
        nft_count: int = 0,
    ) -> LeaderboardEntry:
        """
        Raises:
            ValidationError: Address or score missing
        """
        if not address or not address.strip():
            raise ValidationError(field="address", reason="Address is required")
        if score is None:
            raise ValidationError(field="score", reason="Score is required")

        entry = LeaderboardEntry(
            address=address.strip(),
            score=score,
            resources=resources or 0,
            nft_count=nft_count or 0,
            last_updated=self.clock(),
        )
        return await self.leaderboard_repository.upsert(entry)


class GetLeaderboard:
    """Top LEADERBOARD_SIZE players by score."""

    def __init__(self, leaderboard_repository: ILeaderboardRepository):
        self.leaderboard_repository = leaderboard_repository

    async def execute(self) -> list[LeaderboardEntry]:
        entries = await self.leaderboard_repository.list_all()
        return _ranked(entries)[:LEADERBOARD_SIZE]


class GetPlayerRank:
    """1-based rank of one address; rank is None when absent."""

    def __init__(self, leaderboard_repository: ILeaderboardRepository):
        self.leaderboard_repository = leaderboard_repository

    async def execute(self, address: str) -> PlayerRank:
        ranked = _ranked(await self.leaderboard_repository.list_all())
        key = address.lower()

        for index, entry in enumerate(ranked):
            if entry.key == key:
                return PlayerRank(rank=index + 1, total_players=len(ranked), entry=entry)

        return PlayerRank(rank=None, total_players=len(ranked))


class GetGameStats:
    """Aggregate scores, resources and NFTs."""

    def __init__(self, leaderboard_repository: ILeaderboardRepository):
        self.leaderboard_repository = leaderboard_repository

    async def execute(self) -> GameStats:
        entries = await self.leaderboard_repository.list_all()
        if not entries:
            return GameStats()

        total_score = sum(e.score for e in entries)
        return GameStats(
            total_players=len(entries),
            total_score=total_score,
            total_resources=sum(e.resources for e in entries),
            total_nfts=sum(e.nft_count for e in entries),
            average_score=total_score // len(entries),
        )
