"""
Dependency Injection Container for Comptoir.

Manages process-wide service instances. Repositories are session-scoped
and built per request through the getters below.
"""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from comptoir.config.settings import get_settings
from comptoir.domain.repositories.i_leaderboard_repository import (
    ILeaderboardRepository,
)
from comptoir.domain.repositories.i_lending_position_repository import (
    ILendingPositionRepository,
)
from comptoir.domain.repositories.i_proposal_repository import IProposalRepository
from comptoir.domain.repositories.i_staking_position_repository import (
    IStakingPositionRepository,
)
from comptoir.domain.repositories.i_transaction_repository import (
    ITransactionRepository,
)
from comptoir.domain.repositories.i_user_repository import IUserRepository
from comptoir.infrastructure.cache.i_cache_client import ICacheClient
from comptoir.infrastructure.cache.redis_cache_client import RedisCacheClient
from comptoir.infrastructure.leaderboard.in_memory_leaderboard_repository import (
    InMemoryLeaderboardRepository,
)
from comptoir.infrastructure.monitoring.logger import get_logger
from comptoir.infrastructure.persistence.database import Database
from comptoir.infrastructure.persistence.models import Base
from comptoir.infrastructure.persistence.repositories import (
    LendingPositionRepository,
    ProposalRepository,
    StakingPositionRepository,
    TransactionRepository,
    UserRepository,
)
from comptoir.infrastructure.rate_limiting.rate_limiter import RateLimiter

logger = get_logger(__name__)


class DIContainer:
    """
    Dependency Injection Container.

    Manages singleton instances of infrastructure services.
    Uses factory methods for session-scoped repositories.
    """

    def __init__(self):
        """Initialize container with None instances."""
        # Infrastructure
        self._database: Optional[Database] = None
        self._cache_client: Optional[ICacheClient] = None
        self._rate_limiter: Optional[RateLimiter] = None

        # Process-wide stores
        self._leaderboard_repository: Optional[ILeaderboardRepository] = None

    async def initialize(self) -> None:
        """Initialize all services and establish connections."""
        settings = get_settings()

        await self.database.connect()

        if settings.DATABASE_AUTO_CREATE:
            await self.database.create_schema(Base.metadata)

        if settings.REDIS_ENABLED:
            await self.cache_client.connect()
            logger.info(
                f"Redis enabled at {settings.REDIS_HOST}:{settings.REDIS_PORT}"
            )

    async def shutdown(self) -> None:
        """Cleanup resources and close connections."""
        if self._database:
            await self._database.disconnect()

        if self._cache_client:
            await self._cache_client.disconnect()

    # Infrastructure Getters

    @property
    def database(self) -> Database:
        """Get database instance."""
        if self._database is None:
            self._database = Database(
                database_url=get_settings().DATABASE_URL,
                echo=get_settings().DATABASE_ECHO,
            )
        return self._database

    @property
    def cache_client(self) -> ICacheClient:
        """Get Redis cache client instance."""
        if self._cache_client is None:
            settings = get_settings()
            self._cache_client = RedisCacheClient(
                host=settings.REDIS_HOST,
                port=settings.REDIS_PORT,
                db=settings.REDIS_DB,
                password=settings.REDIS_PASSWORD or None,
            )
        return self._cache_client

    @property
    def rate_limiter(self) -> RateLimiter:
        """Get rate limiter, backed by Redis when enabled."""
        if self._rate_limiter is None:
            settings = get_settings()
            self._rate_limiter = RateLimiter(
                max_requests=settings.RATE_LIMIT_REQUESTS,
                window_seconds=settings.RATE_LIMIT_WINDOW_SECONDS,
                cache_client=self.cache_client if settings.REDIS_ENABLED else None,
            )
        return self._rate_limiter

    @property
    def leaderboard_repository(self) -> ILeaderboardRepository:
        """Get the process-wide leaderboard store."""
        if self._leaderboard_repository is None:
            self._leaderboard_repository = InMemoryLeaderboardRepository()
        return self._leaderboard_repository

    # Repository Getters (Session-scoped)

    def get_user_repository(self, session: AsyncSession) -> IUserRepository:
        return UserRepository(session)

    def get_transaction_repository(
        self, session: AsyncSession
    ) -> ITransactionRepository:
        return TransactionRepository(session)

    def get_staking_repository(
        self, session: AsyncSession
    ) -> IStakingPositionRepository:
        return StakingPositionRepository(session)

    def get_lending_repository(
        self, session: AsyncSession
    ) -> ILendingPositionRepository:
        return LendingPositionRepository(session)

    def get_proposal_repository(self, session: AsyncSession) -> IProposalRepository:
        return ProposalRepository(session)


# Global container instance
_container: Optional[DIContainer] = None


def get_container() -> DIContainer:
    """Get global DI container instance."""
    global _container
    if _container is None:
        _container = DIContainer()
    return _container


async def initialize_container() -> DIContainer:
    """Initialize and return DI container."""
    container = get_container()
    await container.initialize()
    return container


async def shutdown_container() -> None:
    """Shutdown DI container."""
    container = get_container()
    await container.shutdown()


def reset_container() -> None:
    """Drop the global container (for testing)."""
    global _container
    _container = None
