"""Retry helper with exponential backoff for transient errors."""

from __future__ import annotations

import asyncio
import functools
import logging
from typing import Any, Callable

from clickup_mcp.clickup.errors import (
    ClickUpAPIError,
    ClickUpConnectionError,
    ClickUpTimeoutError,
)

logger = logging.getLogger("clickup_mcp")

# Status codes that are safe to retry
_RETRYABLE_CODES = {429, 500, 502, 503, 504}


def is_retryable(error: ClickUpAPIError) -> bool:
    if isinstance(error, (ClickUpTimeoutError, ClickUpConnectionError)):
        return True
    return error.status_code in _RETRYABLE_CODES


def retry(max_attempts: int = 3, base_delay: float = 1.0) -> Callable:
    """Decorator that retries on transient ClickUp API errors with exponential backoff.

    Args:
        max_attempts: Maximum number of attempts. 1 disables retrying.
        base_delay: Initial delay in seconds, doubled on each retry.
    """

    def decorator(fn: Callable[..., Any]) -> Callable[..., Any]:
        @functools.wraps(fn)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            for attempt in range(max_attempts):
                try:
                    return await fn(*args, **kwargs)
                except ClickUpAPIError as e:
                    if not is_retryable(e) or attempt >= max_attempts - 1:
                        raise
                    delay = base_delay * (2**attempt)
                    logger.warning(
                        "Retrying %s (attempt %d/%d) after %ss: %s",
                        fn.__name__,
                        attempt + 1,
                        max_attempts,
                        delay,
                        e,
                    )
                    await asyncio.sleep(delay)
            raise ValueError(f"max_attempts must be at least 1, got {max_attempts}")

        return wrapper

    return decorator
