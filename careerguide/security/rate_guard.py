# -----------------------------------------------------------------------------
# careerguide/security/rate_guard.py — Max request size, per-IP rate limit
# -----------------------------------------------------------------------------

import asyncio
import time
from typing import Callable

MAX_PROMPT_LENGTH = 20_000

# Free-tier friendly: low limit to avoid provider 429
RATE_LIMIT_REQUESTS = 15
RATE_LIMIT_WINDOW_SEC = 60


class PromptTooLarge(ValueError):
    pass


class RateLimitExceeded(Exception):
    pass


def check_prompt_size(prompt: str) -> None:
    if len(prompt) > MAX_PROMPT_LENGTH:
        raise PromptTooLarge("prompt exceeds maximum length")


class RateGuard:
    """Sliding-window request counter keyed by client IP."""

    def __init__(
        self,
        max_requests: int = RATE_LIMIT_REQUESTS,
        window_sec: float = RATE_LIMIT_WINDOW_SEC,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.max_requests = max_requests
        self.window_sec = window_sec
        self._store: dict[str, list[float]] = {}
        self._clock = clock
        self._lock = asyncio.Lock()

    async def check(self, ip: str) -> None:
        async with self._lock:
            now = self._clock()
            self._prune(now)
            timestamps = self._store.setdefault(ip, [])
            if len(timestamps) >= self.max_requests:
                raise RateLimitExceeded(ip)
            timestamps.append(now)

    def _prune(self, now: float) -> None:
        # Forget clients whose window has emptied
        for key in list(self._store):
            live = [t for t in self._store[key] if now - t < self.window_sec]
            if live:
                self._store[key] = live
            else:
                del self._store[key]
