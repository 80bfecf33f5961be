"""Leaderboard storage."""

from comptoir.infrastructure.leaderboard.in_memory_leaderboard_repository import (
    InMemoryLeaderboardRepository,
)

__all__ = ["InMemoryLeaderboardRepository"]
