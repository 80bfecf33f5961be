"""
Integration tests for Staking API routes.
"""

import pytest

from helpers import ALICE_WALLET, BOB_WALLET, post_json_text


class TestStakingRoutes:
    """Stake, unstake and reward summaries over HTTP."""

    async def _stake(self, client, amount: float, wallet: str = ALICE_WALLET):
        return await client.post(
            "/api/staking/stake", json={"amount": amount, "walletAddress": wallet}
        )

    async def test_stake_below_minimum(self, client, alice):
        response = await self._stake(client, 50)

        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"

    @pytest.mark.parametrize("amount", ["NaN", "Infinity", "-Infinity"])
    async def test_stake_rejects_non_finite_amount(self, client, alice, amount):
        response = await post_json_text(
            client,
            "/api/staking/stake",
            f'{{"amount": {amount}, "walletAddress": "{ALICE_WALLET}"}}',
        )

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "Missing or invalid fields"
        assert body["code"] == "VALIDATION_ERROR"

        rewards = await client.get(f"/api/staking/rewards/{ALICE_WALLET}")
        assert rewards.json()["activePositions"] == 0

    async def test_stake_unknown_wallet(self, client):
        response = await self._stake(client, 500, wallet=BOB_WALLET)
        assert response.status_code == 404

    async def test_stake_and_unstake(self, client, alice):
        staked = await self._stake(client, 1000)
        assert staked.status_code == 200
        position_id = staked.json()["positionId"]
        assert staked.json()["status"] == "active"

        rewards = await client.get(f"/api/staking/rewards/{ALICE_WALLET}")
        assert rewards.status_code == 200
        summary = rewards.json()
        assert summary["totalStaked"] == 1000
        assert summary["activePositions"] == 1
        assert summary["positions"][0]["id"] == position_id

        unstaked = await client.post(
            "/api/staking/unstake",
            json={"positionId": position_id, "walletAddress": ALICE_WALLET},
        )
        assert unstaked.status_code == 200
        assert unstaked.json()["status"] == "completed"
        assert unstaked.json()["rewards"] >= 0

        again = await client.post(
            "/api/staking/unstake",
            json={"positionId": position_id, "walletAddress": ALICE_WALLET},
        )
        assert again.status_code == 404

        after = (await client.get(f"/api/staking/rewards/{ALICE_WALLET}")).json()
        assert after["totalStaked"] == 0
        assert after["activePositions"] == 0

    async def test_cannot_unstake_other_users_position(self, client, alice):
        await client.post("/api/auth/register", json={"walletAddress": BOB_WALLET})
        position_id = (await self._stake(client, 200)).json()["positionId"]

        response = await client.post(
            "/api/staking/unstake",
            json={"positionId": position_id, "walletAddress": BOB_WALLET},
        )

        assert response.status_code == 404

    async def test_info(self, client):
        response = await client.get("/api/staking/info")

        assert response.status_code == 200
        body = response.json()
        assert body["minStakeAmount"] == 100
        assert body["dailyRatePercent"] == 0.05
