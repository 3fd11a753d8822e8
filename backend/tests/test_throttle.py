import time
from types import SimpleNamespace
from unittest.mock import AsyncMock, patch

import pytest

from services.throttle import (
    FixedDelayThrottle,
    NoThrottle,
    TokenBucketThrottle,
    build_throttle,
)


@pytest.mark.asyncio
async def test_fixed_delay_first_call_free():
    throttle = FixedDelayThrottle(0.25)
    with patch("services.throttle.asyncio.sleep", new_callable=AsyncMock) as sleep:
        await throttle.wait()
        sleep.assert_not_awaited()
        await throttle.wait()
        await throttle.wait()
        assert sleep.await_count == 2
        sleep.assert_awaited_with(0.25)


@pytest.mark.asyncio
async def test_fixed_delay_zero_never_sleeps():
    throttle = FixedDelayThrottle(0)
    with patch("services.throttle.asyncio.sleep", new_callable=AsyncMock) as sleep:
        for _ in range(3):
            await throttle.wait()
        sleep.assert_not_awaited()


@pytest.mark.asyncio
async def test_token_bucket_burst_then_waits():
    throttle = TokenBucketThrottle(rate=50, capacity=2)
    start = time.monotonic()
    await throttle.wait()
    await throttle.wait()
    burst = time.monotonic() - start
    await throttle.wait()
    total = time.monotonic() - start
    assert burst < 0.015
    assert total >= 0.015


def test_token_bucket_rejects_non_positive_rate():
    with pytest.raises(ValueError):
        TokenBucketThrottle(rate=0)


@pytest.mark.parametrize(
    "rate,delay,expected",
    [
        (5.0, 0.1, TokenBucketThrottle),
        (0.0, 0.1, FixedDelayThrottle),
        (0.0, 0.0, NoThrottle),
    ],
)
def test_build_throttle(rate, delay, expected):
    settings = SimpleNamespace(
        ai_rate_limit_per_second=rate, ai_rate_limit_burst=2, ai_call_delay_seconds=delay
    )
    assert isinstance(build_throttle(settings), expected)
