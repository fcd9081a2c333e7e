"""Timing decorator for long-running ClickUp operations such as full list scans."""

from __future__ import annotations

import functools
import logging
import time
from typing import Any, Callable

logger = logging.getLogger("clickup_mcp")

# Scans slower than this are reported at INFO instead of DEBUG.
SLOW_SECONDS = 5.0


def timed(fn: Callable[..., Any]) -> Callable[..., Any]:
    """Log how long an async call took, and how many items it returned when it returns a list."""

    @functools.wraps(fn)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        start = time.monotonic()
        result = await fn(*args, **kwargs)
        elapsed = time.monotonic() - start
        level = logging.INFO if elapsed >= SLOW_SECONDS else logging.DEBUG
        if isinstance(result, list):
            logger.log(level, "%s returned %d items in %.3fs", fn.__name__, len(result), elapsed)
        else:
            logger.log(level, "%s completed in %.3fs", fn.__name__, elapsed)
        return result

    return wrapper
