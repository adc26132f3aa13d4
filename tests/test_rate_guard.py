import asyncio

import pytest

from careerguide.security.rate_guard import (
    MAX_PROMPT_LENGTH,
    PromptTooLarge,
    RateGuard,
    RateLimitExceeded,
    check_prompt_size,
)


def test_prompt_size_limit():
    check_prompt_size("x" * MAX_PROMPT_LENGTH)
    with pytest.raises(PromptTooLarge):
        check_prompt_size("x" * (MAX_PROMPT_LENGTH + 1))


def test_limit_is_per_client():
    guard = RateGuard(max_requests=1, window_sec=60)

    async def go():
        await guard.check("10.0.0.1")
        await guard.check("10.0.0.2")
        with pytest.raises(RateLimitExceeded):
            await guard.check("10.0.0.1")

    asyncio.run(go())


def test_idle_clients_are_forgotten():
    now = [1000.0]
    guard = RateGuard(max_requests=2, window_sec=60, clock=lambda: now[0])

    async def go():
        await guard.check("10.0.0.1")
        await guard.check("10.0.0.2")
        now[0] += 61
        await guard.check("10.0.0.3")

    asyncio.run(go())

    assert list(guard._store) == ["10.0.0.3"]
