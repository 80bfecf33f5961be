"""
Test helper utilities.

Shared settings, wallets and request shortcuts for API tests.
"""

import httpx

from comptoir.config.settings import Settings

TEST_JWT_SECRET = "test-secret-key-for-comptoir"

ALICE_WALLET = "0x" + "a1" * 20
BOB_WALLET = "0x" + "b2" * 20


def make_settings(**overrides) -> Settings:
    """Settings for an isolated in-memory test app."""
    values = {
        "ENV": "test",
        "DATABASE_URL": "sqlite+aiosqlite://",
        "JWT_SECRET_KEY": TEST_JWT_SECRET,
        "REDIS_ENABLED": False,
        "RATE_LIMIT_ENABLED": False,
        "METRICS_ENABLED": True,
        "LOG_LEVEL": "WARNING",
    }
    values.update(overrides)
    return Settings(**values)


async def register(client: httpx.AsyncClient, wallet: str, **extra) -> dict:
    """Register a wallet and return the response body."""
    response = await client.post(
        "/api/auth/register", json={"walletAddress": wallet, **extra}
    )
    assert response.status_code == 200, response.text
    return response.json()


async def post_json_text(
    client: httpx.AsyncClient, url: str, body: str
) -> httpx.Response:
    """POST a hand-written JSON document, e.g. one holding NaN or Infinity."""
    return await client.post(
        url, content=body, headers={"Content-Type": "application/json"}
    )


def auth_header(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}
