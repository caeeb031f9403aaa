"""
Fixed-window request counter keyed by client address.

Entries are never evicted: the map grows with the number of distinct clients
seen over the process lifetime.
"""

import logging
import time
from dataclasses import dataclass
from typing import Callable, Dict, Optional

logger = logging.getLogger("macrorelay.rate_limiter")


@dataclass
class RateLimitEntry:
    """Request count of one client inside its current window"""

    count: int
    reset_time: float


class FixedWindowRateLimiter:
    """
    Admit at most ``max_requests`` per key in each window of ``window_seconds``.

    A window starts with the first request of a key and ends at
    ``reset_time``; the first request strictly after ``reset_time`` opens a new
    window. Mutation happens synchronously on the event loop, so no locking
    is required.

    Example:
        >>> limiter = FixedWindowRateLimiter(max_requests=2, window_seconds=60)
        >>> limiter.hit("10.0.0.1", now=0), limiter.hit("10.0.0.1", now=1)
        (True, True)
        >>> limiter.hit("10.0.0.1", now=2)
        False
    """

    def __init__(
        self,
        max_requests: int = 30,
        window_seconds: float = 60.0,
        clock: Callable[[], float] = time.time,
    ):
        if max_requests < 1:
            raise ValueError("max_requests must be at least 1")
        if window_seconds <= 0:
            raise ValueError("window_seconds must be positive")
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self._clock = clock
        self._entries: Dict[str, RateLimitEntry] = {}

    def hit(self, key: str, now: Optional[float] = None) -> bool:
        """Record a request from ``key`` and return whether it is admitted."""
        if now is None:
            now = self._clock()

        entry = self._entries.get(key)
        if entry is None or now > entry.reset_time:
            self._entries[key] = RateLimitEntry(
                count=1, reset_time=now + self.window_seconds
            )
            return True

        if entry.count < self.max_requests:
            entry.count += 1
            return True

        logger.info("Rate limit exceeded for %s (%d requests)", key, entry.count)
        return False

    def get(self, key: str) -> Optional[RateLimitEntry]:
        return self._entries.get(key)

    def __len__(self) -> int:
        return len(self._entries)
