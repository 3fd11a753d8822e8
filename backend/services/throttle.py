"""Throttle policies for sequential calls to the AI collaborator.

Batch scoring awaits ``throttle.wait()`` before each upstream call so that a
burst of per-candidate requests does not trip provider rate limits.
"""

import asyncio
import logging
import time

logger = logging.getLogger(__name__)


class NoThrottle:
    async def wait(self) -> None:
        return None


class FixedDelayThrottle:
    """Sleep a fixed delay between consecutive calls (the first call is free)."""

    def __init__(self, delay_seconds: float) -> None:
        self.delay_seconds = max(0.0, delay_seconds)
        self._calls = 0

    async def wait(self) -> None:
        if self._calls and self.delay_seconds:
            await asyncio.sleep(self.delay_seconds)
        self._calls += 1


class TokenBucketThrottle:
    """In-process token bucket.

    Args:
        rate: tokens added per second
        capacity: max tokens (burst size)
    """

    def __init__(self, rate: float, capacity: int = 1) -> None:
        if rate <= 0:
            raise ValueError("rate must be positive")
        self.rate = rate
        self.capacity = max(1, capacity)
        self._tokens = float(self.capacity)
        self._last = time.monotonic()

    def _refill(self) -> None:
        now = time.monotonic()
        self._tokens = min(self.capacity, self._tokens + (now - self._last) * self.rate)
        self._last = now

    async def wait(self) -> None:
        self._refill()
        while self._tokens < 1:
            await asyncio.sleep((1 - self._tokens) / self.rate)
            self._refill()
        self._tokens -= 1


Throttle = NoThrottle | FixedDelayThrottle | TokenBucketThrottle


def build_throttle(settings) -> Throttle:
    """Pick a policy from config: token bucket if a rate is set, else fixed delay."""
    if settings.ai_rate_limit_per_second > 0:
        return TokenBucketThrottle(settings.ai_rate_limit_per_second, settings.ai_rate_limit_burst)
    if settings.ai_call_delay_seconds > 0:
        return FixedDelayThrottle(settings.ai_call_delay_seconds)
    return NoThrottle()
