"""Cache client interface for key-value storage."""

from abc import ABC, abstractmethod


class ICacheClient(ABC):
    """Abstract cache client interface."""

    @abstractmethod
    async def connect(self) -> None:
        """Establish connection to cache server."""

    @abstractmethod
    async def disconnect(self) -> None:
        """Close connection to cache server."""

    @abstractmethod
    async def increment(self, key: str, expire_seconds: int) -> tuple[int, int]:
        """
        Atomically increment a counter, starting its TTL on first use.

        Args:
            key: Counter key
            expire_seconds: TTL applied when the counter is created

        Returns:
            Tuple of (new value, seconds until the key expires)
        """

    @abstractmethod
    async def ping(self) -> bool:
        """True if the server responds."""
