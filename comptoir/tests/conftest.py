"""
Test fixtures and configuration.
"""

from typing import AsyncGenerator

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI

from comptoir.config.settings import Settings, override_settings, reset_settings
from comptoir.di.container import reset_container
from comptoir.main import create_app
from helpers import ALICE_WALLET, make_settings, register


@pytest.fixture
def settings() -> Settings:
    """Install test settings globally for the duration of a test."""
    test_settings = make_settings()
    override_settings(test_settings)
    reset_container()
    yield test_settings
    reset_container()
    reset_settings()


@pytest_asyncio.fixture
async def app(settings: Settings) -> AsyncGenerator[FastAPI, None]:
    """
    Create app with a fresh in-memory database.

    Runs the lifespan so the container connects and creates tables.
    """
    application = create_app(settings)
    async with application.router.lifespan_context(application):
        yield application


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncGenerator[httpx.AsyncClient, None]:
    """HTTP client bound to the test app."""
    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=app), base_url="http://test"
    ) as test_client:
        yield test_client


@pytest_asyncio.fixture
async def alice(client: httpx.AsyncClient) -> dict:
    """Registered user 'alice'."""
    return await register(client, ALICE_WALLET, username="alice")
