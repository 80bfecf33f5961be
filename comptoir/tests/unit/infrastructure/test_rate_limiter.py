"""
Unit tests for RateLimiter.

Tests fixed window rate limiting with a controllable clock.
"""

from unittest.mock import AsyncMock

from comptoir.infrastructure.rate_limiting.rate_limiter import RateLimiter


class FakeClock:
    """Manually advanced UNIX time."""

    def __init__(self, now: float = 1_000_020.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


class TestRateLimiter:
    """Unit tests for RateLimiter."""

    # ================================================================
    # Helper Methods
    # ================================================================

    def _limiter(self, clock: FakeClock, max_requests: int = 3, **kwargs) -> RateLimiter:
        return RateLimiter(
            max_requests=max_requests,
            window_seconds=60,
            time_func=clock,
            **kwargs,
        )

    # ================================================================
    # In-process counters
    # ================================================================

    async def test_allows_up_to_limit(self):
        limiter = self._limiter(FakeClock())

        decisions = [await limiter.check("ip:1.2.3.4") for _ in range(3)]

        assert all(d.allowed for d in decisions)
        assert [d.remaining for d in decisions] == [2, 1, 0]

    async def test_blocks_over_limit_with_retry_after(self):
        clock = FakeClock(now=1_000_020.0)
        limiter = self._limiter(clock)
        for _ in range(3):
            await limiter.check("ip:1.2.3.4")

        decision = await limiter.check("ip:1.2.3.4")

        assert not decision.allowed
        assert decision.remaining == 0
        # Window [1000020, 1000080) just started
        assert decision.retry_after == 60
        assert decision.headers()["Retry-After"] == "60"

    async def test_clients_are_independent(self):
        limiter = self._limiter(FakeClock(), max_requests=1)

        assert (await limiter.check("ip:a")).allowed
        assert (await limiter.check("ip:b")).allowed
        assert not (await limiter.check("ip:a")).allowed

    async def test_new_window_resets_budget(self):
        clock = FakeClock()
        limiter = self._limiter(clock, max_requests=1)
        await limiter.check("ip:a")
        assert not (await limiter.check("ip:a")).allowed

        clock.now += 60

        assert (await limiter.check("ip:a")).allowed

    async def test_headers(self):
        clock = FakeClock(now=1_000_030.0)
        decision = await self._limiter(clock).check("ip:a")

        headers = decision.headers()

        assert headers["X-RateLimit-Limit"] == "3"
        assert headers["X-RateLimit-Remaining"] == "2"
        assert headers["X-RateLimit-Reset"] == "1000080"
        assert "Retry-After" not in headers

    # ================================================================
    # Shared counters
    # ================================================================

    async def test_uses_cache_client_counter(self):
        cache = AsyncMock()
        cache.increment.return_value = (4, 17)
        clock = FakeClock(now=1_000_030.0)
        limiter = self._limiter(clock, cache_client=cache)

        decision = await limiter.check("ip:a")

        assert not decision.allowed
        assert decision.retry_after == 17
        cache.increment.assert_called_once_with("ratelimit:ip:a:16667", 60)
