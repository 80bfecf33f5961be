"""
Rate Limiter implementation.

Fixed-window counter per client. Counters live in an in-process TTL cache,
or in Redis when a cache client is supplied so that every instance shares
one budget per client.
"""

import math
import time
from dataclasses import dataclass
from typing import Callable, Optional

from cachetools import TTLCache

from comptoir.infrastructure.cache.i_cache_client import ICacheClient


@dataclass(frozen=True)
class RateLimitDecision:
    """Outcome of one rate limit check."""

    allowed: bool
    limit: int
    remaining: int
    reset: int
    retry_after: Optional[int] = None

    def headers(self) -> dict[str, str]:
        """Standard X-RateLimit-* response headers."""
        headers = {
            "X-RateLimit-Limit": str(self.limit),
            "X-RateLimit-Remaining": str(self.remaining),
            "X-RateLimit-Reset": str(self.reset),
        }
        if self.retry_after is not None:
            headers["Retry-After"] = str(self.retry_after)
        return headers


class RateLimiter:
    """
    Fixed-window rate limiter.

    Each client gets ``max_requests`` per window of ``window_seconds``.
    The window is aligned to wall-clock multiples of its length, so the
    counter key changes when a new window starts and old keys expire.
    """

    def __init__(
        self,
        max_requests: int = 100,
        window_seconds: int = 60,
        cache_client: Optional[ICacheClient] = None,
        max_clients: int = 10_000,
        time_func: Callable[[], float] = time.time,
    ):
        """
        Initialize rate limiter.

        Args:
            max_requests: Requests allowed per client per window
            window_seconds: Window length in seconds
            cache_client: Shared counter store; in-process cache if None
            max_clients: Capacity of the in-process counter cache
            time_func: Source of the current UNIX time
        """
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self.cache = cache_client
        self._time = time_func
        self._counters: TTLCache = TTLCache(
            maxsize=max_clients,
            ttl=window_seconds,
            timer=time_func,
        )

    def _make_key(self, identifier: str, window_index: int) -> str:
        return f"ratelimit:{identifier}:{window_index}"

    async def check(self, identifier: str) -> RateLimitDecision:
        """
        Count one request for ``identifier`` and decide whether it may pass.

        Args:
            identifier: Client key (usually the client IP)

        Returns:
            RateLimitDecision with header values
        """
        now = self._time()
        window_index = int(now // self.window_seconds)
        window_end = (window_index + 1) * self.window_seconds
        key = self._make_key(identifier, window_index)

        if self.cache is not None:
            count, ttl = await self.cache.increment(key, self.window_seconds)
            seconds_left = ttl or math.ceil(window_end - now)
        else:
            # No await between read and write, so this is atomic per loop
            count = self._counters.get(key, 0) + 1
            self._counters[key] = count
            seconds_left = math.ceil(window_end - now)

        allowed = count <= self.max_requests
        return RateLimitDecision(
            allowed=allowed,
            limit=self.max_requests,
            remaining=max(0, self.max_requests - count),
            reset=int(window_end),
            retry_after=None if allowed else max(1, seconds_left),
        )
