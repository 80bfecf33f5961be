"""
Integration tests for Trading API routes.
"""

import pytest

from helpers import ALICE_WALLET, BOB_WALLET, post_json_text, register


class TestTradingRoutes:
    """Token catalog, swaps and orders over HTTP."""

    async def test_tokens(self, client):
        response = await client.get("/api/trading/tokens")

        assert response.status_code == 200
        symbols = [t["symbol"] for t in response.json()["tokens"]]
        assert symbols == ["EXC", "ETH", "USDC"]

    async def test_swap(self, client, alice):
        response = await client.post(
            "/api/trading/swap",
            json={
                "tokenIn": "ETH",
                "tokenOut": "USDC",
                "amountIn": 400,
                "walletAddress": ALICE_WALLET,
            },
        )

        assert response.status_code == 200
        body = response.json()
        assert body["amountOut"] == 400
        assert body["fee"] == pytest.approx(1.0)
        assert body["status"] == "completed"

    @pytest.mark.parametrize("amount", ["NaN", "Infinity"])
    async def test_swap_rejects_non_finite_amount(self, client, alice, amount):
        response = await post_json_text(
            client,
            "/api/trading/swap",
            '{"tokenIn": "ETH", "tokenOut": "USDC", '
            f'"amountIn": {amount}, "walletAddress": "{ALICE_WALLET}"}}',
        )

        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"

        listed = await client.get(f"/api/trading/orders/{ALICE_WALLET}")
        assert listed.json()["transactions"] == []

    @pytest.mark.parametrize("wallet", ["0x123", "alice", "0x" + "z" * 40])
    async def test_swap_rejects_malformed_wallet(self, client, wallet):
        response = await client.post(
            "/api/trading/swap",
            json={
                "tokenIn": "ETH",
                "tokenOut": "USDC",
                "amountIn": 1,
                "walletAddress": wallet,
            },
        )

        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"

    async def test_swap_unregistered(self, client):
        response = await client.post(
            "/api/trading/swap",
            json={
                "tokenIn": "ETH",
                "tokenOut": "USDC",
                "amountIn": 1,
                "walletAddress": BOB_WALLET,
            },
        )
        assert response.status_code == 404

    async def test_orders_placed_and_listed(self, client, alice):
        placed = await client.post(
            "/api/trading/orders",
            json={
                "type": "buy",
                "token": "ETH",
                "amount": 2,
                "price": 2500,
                "walletAddress": ALICE_WALLET,
            },
        )
        assert placed.status_code == 200
        assert placed.json()["message"] == "buy order placed successfully"
        assert placed.json()["fee"] == pytest.approx(12.5)

        listed = await client.get(f"/api/trading/orders/{ALICE_WALLET}")
        transactions = listed.json()["transactions"]
        assert len(transactions) == 1
        assert transactions[0]["type"] == "buy"
        assert transactions[0]["price"] == 2500

    async def test_invalid_order_type(self, client, alice):
        response = await client.post(
            "/api/trading/orders",
            json={
                "type": "short",
                "token": "ETH",
                "amount": 1,
                "price": 1,
                "walletAddress": ALICE_WALLET,
            },
        )
        assert response.status_code == 400

    async def test_orders_isolated_per_user(self, client, alice):
        await register(client, BOB_WALLET)
        await client.post(
            "/api/trading/orders",
            json={
                "type": "sell",
                "token": "EXC",
                "amount": 5,
                "price": 1.5,
                "walletAddress": BOB_WALLET,
            },
        )

        listed = await client.get(f"/api/trading/orders/{ALICE_WALLET}")

        assert listed.json()["transactions"] == []
