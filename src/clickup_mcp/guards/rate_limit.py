"""Client-side request budget, so agents stay under ClickUp's per-token limit.

ClickUp allows 100 requests per minute per token on most plans. Each tool
call is counted once against a sliding window sized by CLICKUP_RATE_LIMIT_CALLS
and CLICKUP_RATE_LIMIT_PERIOD.
"""

from __future__ import annotations

import asyncio
import functools
import math
import time
from collections import deque
from typing import Any, Callable

from clickup_mcp.clickup.errors import ClickUpRateLimitError


class RateLimiter:
    """Sliding-window limiter that refuses calls instead of queueing them."""

    def __init__(self, max_calls: int, period: int):
        self.max_calls = max_calls
        self.period = period
        self._calls: deque[float] = deque()
        self._lock = asyncio.Lock()

    async def acquire(self) -> None:
        async with self._lock:
            now = time.monotonic()
            while self._calls and now - self._calls[0] >= self.period:
                self._calls.popleft()
            if len(self._calls) >= self.max_calls:
                wait = math.ceil(self.period - (now - self._calls[0]))
                raise ClickUpRateLimitError(
                    f"Rate limit exceeded: {self.max_calls} calls per {self.period}s.",
                    detail=f"Local budget of {self.max_calls} calls per {self.period}s used up; "
                    f"retry in {wait}s.",
                )
            self._calls.append(now)


_limiter: RateLimiter | None = None


def _get_limiter() -> RateLimiter:
    global _limiter
    if _limiter is None:
        from clickup_mcp.lifespan import get_settings

        settings = get_settings()
        _limiter = RateLimiter(settings.rate_limit_calls, settings.rate_limit_period)
    return _limiter


def reset_limiter() -> None:
    """Forget the current window; the next call rebuilds it from settings."""
    global _limiter
    _limiter = None


def rate_limit(fn: Callable[..., Any]) -> Callable[..., Any]:
    """Count a tool call against the shared window before running it."""

    @functools.wraps(fn)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        await _get_limiter().acquire()
        return await fn(*args, **kwargs)

    return wrapper
