"""
In-memory leaderboard repository.

Scores are kept for the life of the process only.
"""

import asyncio
from dataclasses import replace

from comptoir.domain.entities.leaderboard_entry import LeaderboardEntry
from comptoir.domain.repositories.i_leaderboard_repository import (
    ILeaderboardRepository,
)


class InMemoryLeaderboardRepository(ILeaderboardRepository):
    """Dict-backed leaderboard keyed by lower-cased address."""

    def __init__(self):
        self._entries: dict[str, LeaderboardEntry] = {}
        self._lock = asyncio.Lock()

    async def upsert(self, entry: LeaderboardEntry) -> LeaderboardEntry:
        async with self._lock:
            self._entries[entry.key] = entry
        return replace(entry)

    async def list_all(self) -> list[LeaderboardEntry]:
        async with self._lock:
            return [replace(entry) for entry in self._entries.values()]
