"""
Rate limiting for BigCommerce API calls
"""
import threading
import time
from collections import deque
from typing import Mapping, Optional
import logging

logger = logging.getLogger(__name__)

REQUESTS_LEFT_HEADER = "X-Rate-Limit-Requests-Left"
TIME_RESET_HEADER = "X-Rate-Limit-Time-Reset-Ms"


class RateLimiter:
    """
    Sliding-window limiter, plus the quota BigCommerce reports back.

    The local window caps requests per minute; with no per-minute limit only
    the store quota applies. The store quota comes from the rate-limit
    headers of the last response: once no requests are left, the next call
    waits for the reported reset time.

    One limiter may be shared by concurrent callers of the same client.
    """

    def __init__(self, requests_per_minute: Optional[int]):
        self.requests_per_minute = requests_per_minute
        self.request_times: deque = deque()
        self.blocked_until: Optional[float] = None
        self._lock = threading.Lock()

    def _cleanup_old_requests(self, current_time: float) -> None:
        while self.request_times and current_time - self.request_times[0] > 60.0:
            self.request_times.popleft()

    def wait_if_needed(self) -> None:
        """Block until a request may be sent. Call before each request."""
        with self._lock:
            current_time = time.time()

            if self.blocked_until is not None:
                wait_time = self.blocked_until - current_time
                self.blocked_until = None
                if wait_time > 0:
                    logger.info(f"Store API quota exhausted. Waiting {wait_time:.2f} seconds")
                    time.sleep(wait_time)
                    current_time = time.time()

            if not self.requests_per_minute:
                return

            self._cleanup_old_requests(current_time)
            if len(self.request_times) >= self.requests_per_minute:
                wait_time = 60.0 - (current_time - self.request_times[0]) + 0.1
                if wait_time > 0:
                    logger.debug(f"Rate limit reached. Waiting {wait_time:.2f} seconds")
                    time.sleep(wait_time)
                    current_time = time.time()
                    self._cleanup_old_requests(current_time)

            self.request_times.append(current_time)

    def update_from_headers(self, headers: Mapping[str, str]) -> None:
        """Record the quota BigCommerce returned with a response."""
        left = headers.get(REQUESTS_LEFT_HEADER)
        reset_ms = headers.get(TIME_RESET_HEADER)
        if left is None or reset_ms is None:
            return
        try:
            left_count = int(left)
            reset_seconds = int(reset_ms) / 1000.0
        except (TypeError, ValueError):
            logger.debug(f"Ignoring malformed rate limit headers: {left!r}, {reset_ms!r}")
            return
        if left_count <= 0:
            with self._lock:
                self.blocked_until = time.time() + reset_seconds

    def get_stats(self) -> dict:
        with self._lock:
            current_time = time.time()
            self._cleanup_old_requests(current_time)
            return {
                'requests_in_last_minute': len(self.request_times),
                'limit': self.requests_per_minute,
                'blocked_until': self.blocked_until,
            }
