"""Cache clients."""

from comptoir.infrastructure.cache.i_cache_client import ICacheClient
from comptoir.infrastructure.cache.redis_cache_client import RedisCacheClient

__all__ = ["ICacheClient", "RedisCacheClient"]
