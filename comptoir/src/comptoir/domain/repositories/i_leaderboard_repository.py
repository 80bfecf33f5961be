"""
Leaderboard repository interface.
"""

from abc import ABC, abstractmethod

from comptoir.domain.entities.leaderboard_entry import LeaderboardEntry


class ILeaderboardRepository(ABC):
    """Interface for the game leaderboard store (address -> entry)."""

    @abstractmethod
    async def upsert(self, entry: LeaderboardEntry) -> LeaderboardEntry:
        """Insert or replace the entry for ``entry.address``."""

    @abstractmethod
    async def list_all(self) -> list[LeaderboardEntry]:
        """All entries, unordered."""
