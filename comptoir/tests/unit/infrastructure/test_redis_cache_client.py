"""
Unit tests for RedisCacheClient.

The Redis connection is replaced with mocks.
"""

from unittest.mock import AsyncMock, MagicMock

from redis.exceptions import ConnectionError as RedisConnectionError

from comptoir.infrastructure.cache.redis_cache_client import RedisCacheClient


class TestRedisCacheClient:
    """Unit tests for RedisCacheClient."""

    # ================================================================
    # Helper Methods
    # ================================================================

    def _client_with(self, redis_mock) -> RedisCacheClient:
        client = RedisCacheClient(host="localhost", port=6379)
        client._client = redis_mock
        return client

    def _setup_pipeline_mock(self, redis_mock, execute_result: list) -> MagicMock:
        """Pipeline object is sync; only execute() is awaited."""
        pipeline = MagicMock()
        pipeline.execute = AsyncMock(return_value=execute_result)
        redis_mock.pipeline = MagicMock(return_value=pipeline)
        return pipeline

    # ================================================================
    # Test Methods
    # ================================================================

    async def test_increment_returns_count_and_ttl(self):
        redis_mock = AsyncMock()
        pipeline = self._setup_pipeline_mock(redis_mock, [3, False, 42])
        client = self._client_with(redis_mock)

        count, ttl = await client.increment("ratelimit:ip:a:1", 60)

        assert (count, ttl) == (3, 42)
        pipeline.incr.assert_called_once_with("ratelimit:ip:a:1")
        pipeline.expire.assert_called_once_with("ratelimit:ip:a:1", 60, nx=True)

    async def test_increment_clamps_missing_ttl(self):
        redis_mock = AsyncMock()
        self._setup_pipeline_mock(redis_mock, [1, True, -1])

        _, ttl = await self._client_with(redis_mock).increment("k", 60)

        assert ttl == 0

    async def test_ping_failure_is_false(self):
        redis_mock = AsyncMock()
        redis_mock.ping.side_effect = RedisConnectionError("down")

        assert await self._client_with(redis_mock).ping() is False

    async def test_disconnect_closes_client(self):
        redis_mock = AsyncMock()
        client = self._client_with(redis_mock)

        await client.disconnect()

        redis_mock.aclose.assert_awaited_once()
        assert client._client is None
