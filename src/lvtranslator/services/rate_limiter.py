"""Rate Limiter - sliding time window admission per client identifier."""

import math
import time
from dataclasses import dataclass


def _now_ms() -> int:
    return int(time.time() * 1000)


@dataclass
class RateLimitStatus:
    """Outcome of a rate limit check."""

    allowed: bool
    remaining: int
    reset_time: int

    def retry_after_seconds(self) -> int:
        """Seconds until the window frees a slot, never negative."""
        return max(0, math.ceil((self.reset_time - _now_ms()) / 1000))


class RateLimiter:
    """
    Sliding-window rate limiter.

    Each identifier keeps the timestamps of its admitted requests; a new
    request is admitted only while fewer than max_requests fall inside
    the trailing window.
    """

    def __init__(self, window_ms: int = 60_000, max_requests: int = 10):
        if window_ms < 1 or max_requests < 1:
            raise ValueError("window_ms and max_requests must be positive")

        self.window_ms = window_ms
        self.max_requests = max_requests
        self._requests: dict[str, list[int]] = {}

    def check(self, identifier: str) -> RateLimitStatus:
        """Check and, if admitted, record a request for identifier."""
        now = _now_ms()
        window_start = now - self.window_ms

        requests = [t for t in self._requests.get(identifier, []) if t > window_start]

        allowed = len(requests) < self.max_requests
        if allowed:
            requests.append(now)

        if requests:
            self._requests[identifier] = requests
        else:
            self._requests.pop(identifier, None)

        reset_time = requests[0] + self.window_ms if requests else now + self.window_ms

        return RateLimitStatus(
            allowed=allowed,
            remaining=max(0, self.max_requests - len(requests) - 1),
            reset_time=reset_time,
        )

    def reset(self, identifier: str) -> None:
        self._requests.pop(identifier, None)
