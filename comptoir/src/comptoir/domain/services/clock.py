"""
Clock used by time-dependent use cases.

Timestamps are naive UTC so they round-trip unchanged through SQLite and
PostgreSQL ``TIMESTAMP WITHOUT TIME ZONE`` columns.
"""

from datetime import datetime, timezone
from typing import Callable

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Current time as naive UTC."""
    return datetime.now(timezone.utc).replace(tzinfo=None)
