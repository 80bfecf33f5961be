"""Redis cache client implementation."""

from typing import Optional

import redis.asyncio as aioredis
from redis.exceptions import RedisError

from comptoir.infrastructure.cache.i_cache_client import ICacheClient


class RedisCacheClient(ICacheClient):
    """
    Redis cache client using async redis library.

    Used as the shared counter store for rate limiting when several
    service instances run behind one proxy.
    """

    def __init__(
        self,
        host: str = "localhost",
        port: int = 6379,
        db: int = 0,
        password: Optional[str] = None,
    ):
        """
        Initialize Redis client configuration.

        Args:
            host: Redis server host
            port: Redis server port
            db: Redis database number (0-15)
            password: Redis password (None if no auth)
        """
        self.host = host
        self.port = port
        self.db = db
        self.password = password if password else None
        self._client: Optional[aioredis.Redis] = None

    async def connect(self) -> None:
        """Establish connection to Redis server."""
        if self._client is not None:
            return

        self._client = aioredis.from_url(
            f"redis://{self.host}:{self.port}/{self.db}",
            password=self.password,
            encoding="utf-8",
            decode_responses=True,
        )

    async def disconnect(self) -> None:
        """Close connection to Redis server."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def increment(self, key: str, expire_seconds: int) -> tuple[int, int]:
        """INCR then EXPIRE NX in one round trip."""
        if self._client is None:
            await self.connect()

        pipe = self._client.pipeline(transaction=True)
        pipe.incr(key)
        pipe.expire(key, expire_seconds, nx=True)
        pipe.ttl(key)
        count, _, ttl = await pipe.execute()

        return int(count), max(int(ttl), 0)

    async def ping(self) -> bool:
        """
        Check if Redis server is reachable.

        Returns:
            True if server responds
        """
        if self._client is None:
            await self.connect()

        try:
            await self._client.ping()
            return True
        except RedisError:
            return False
