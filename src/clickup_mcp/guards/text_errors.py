"""Tool boundary: exceptions become the text payload returned to the agent."""

from __future__ import annotations

import functools
import logging
from typing import Any, Callable

from clickup_mcp.clickup.errors import ClickUpAPIError, ClickUpError, describe_error

logger = logging.getLogger("clickup_mcp")


def text_errors(fn: Callable[..., Any]) -> Callable[..., Any]:
    """Decorator that converts any exception raised by a tool into an error message."""

    @functools.wraps(fn)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await fn(*args, **kwargs)
        except ClickUpAPIError as e:
            logger.warning("%s failed: %s", fn.__name__, e)
            return describe_error(e)
        except ClickUpError as e:
            logger.info("%s rejected: %s", fn.__name__, e)
            return describe_error(e)
        except Exception as e:
            logger.exception("%s raised an unexpected error", fn.__name__)
            return describe_error(e)

    return wrapper
