# api/services/rate_limiter.py
"""Sliding-window rate limiting for correction requests."""

import logging
import threading
import time
from collections import OrderedDict, deque
from dataclasses import dataclass
from typing import Deque, Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Admission:
    """Outcome of one admission check; truthy when the request may proceed."""
    admitted: bool
    remaining: int
    retry_after_ms: int = 0

    def __bool__(self) -> bool:
        return self.admitted


class SlidingWindowRateLimiter:
    """
    Per-client sliding-window limiter.

    At most `limit` requests per client within any `window_ms` span. Client
    windows live in an LRU map capped at `max_keys`; the least recently seen
    client is evicted first. Prune, check and record happen under one lock.
    """

    def __init__(self, limit: int = 5, window_ms: int = 60_000, max_keys: int = 10_000):
        if limit < 1 or window_ms < 1 or max_keys < 1:
            raise ValueError("limit, window_ms and max_keys must be positive")
        self.limit = limit
        self.window_ms = window_ms
        self.max_keys = max_keys
        self._windows: "OrderedDict[str, Deque[int]]" = OrderedDict()
        self._lock = threading.Lock()

    @staticmethod
    def _now_ms() -> int:
        return int(time.monotonic() * 1000)

    def admit(self, client_id: str, now_ms: Optional[int] = None) -> Admission:
        """
        Record a request for `client_id` if it is within its limit.

        A rejected request is not recorded.

        Args:
            client_id: Caller identity (e.g. client IP)
            now_ms: Current time in milliseconds; defaults to a monotonic clock

        Returns:
            Admission with the remaining quota, or the wait before a retry
        """
        now = self._now_ms() if now_ms is None else now_ms
        with self._lock:
            window = self._windows.get(client_id)
            if window is None:
                window = deque()
                self._windows[client_id] = window
                self._evict()
            else:
                self._windows.move_to_end(client_id)

            while window and now - window[0] >= self.window_ms:
                window.popleft()

            if len(window) >= self.limit:
                retry_after = max(0, window[0] + self.window_ms - now)
                logger.info(f"Rate limit exceeded for {client_id}: retry in {retry_after}ms")
                return Admission(admitted=False, remaining=0, retry_after_ms=retry_after)

            window.append(now)
            return Admission(admitted=True, remaining=self.limit - len(window))

    def _evict(self) -> None:
        while len(self._windows) > self.max_keys:
            evicted, _ = self._windows.popitem(last=False)
            logger.debug(f"Evicted rate-limit window for {evicted}")

    def reset(self, client_id: Optional[str] = None) -> None:
        """Forget one client's window, or every window."""
        with self._lock:
            if client_id is None:
                self._windows.clear()
            else:
                self._windows.pop(client_id, None)

    def __len__(self) -> int:
        with self._lock:
            return len(self._windows)
