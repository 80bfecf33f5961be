"""
Integration tests for Leaderboard API routes.
"""


class TestLeaderboardRoutes:
    """Score reporting and ranking over HTTP."""

    async def _update(self, client, address, score, **extra):
        return await client.post(
            "/api/leaderboard/update",
            json={"address": address, "score": score, **extra},
        )

    async def test_update_and_list(self, client):
        first = await self._update(client, "0xAAA", 10, resources=4, nftCount=1)
        assert first.status_code == 200
        assert first.json()["success"] is True
        assert first.json()["player"]["nftCount"] == 1

        await self._update(client, "0xbbb", 30)

        board = (await client.get("/api/leaderboard")).json()
        assert [e["address"] for e in board] == ["0xbbb", "0xAAA"]

    async def test_update_requires_score(self, client):
        response = await client.post("/api/leaderboard/update", json={"address": "x"})

        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"

    async def test_player_rank(self, client):
        await self._update(client, "p1", 5)
        await self._update(client, "p2", 50)

        body = (await client.get("/api/leaderboard/player/P1/rank")).json()

        assert body["rank"] == 2
        assert body["totalPlayers"] == 2
        assert body["player"]["score"] == 5

    async def test_player_rank_absent(self, client):
        body = (await client.get("/api/leaderboard/player/ghost/rank")).json()

        assert body["rank"] is None
        assert body["message"] == "Player not found in leaderboard"

    async def test_stats(self, client):
        await self._update(client, "a", 10, resources=1)
        await self._update(client, "b", 5, nftCount=2)

        stats = (await client.get("/api/leaderboard/stats")).json()

        assert stats == {
            "totalPlayers": 2,
            "totalScore": 15,
            "totalResources": 1,
            "totalNfts": 2,
            "averageScore": 7,
        }
