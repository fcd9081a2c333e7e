from clickup_mcp.clickup.client import ClickUpClient
from clickup_mcp.clickup.errors import (
    ClickUpAPIError,
    ClickUpAuthenticationError,
    ClickUpBadRequestError,
    ClickUpConfigurationError,
    ClickUpConnectionError,
    ClickUpError,
    ClickUpNotFoundError,
    ClickUpPermissionError,
    ClickUpRateLimitError,
    ClickUpServerError,
    ClickUpTimeoutError,
    InvalidParameterError,
    describe_error,
)

__all__ = [
    "ClickUpClient",
    "ClickUpAPIError",
    "ClickUpAuthenticationError",
    "ClickUpBadRequestError",
    "ClickUpConfigurationError",
    "ClickUpConnectionError",
    "ClickUpError",
    "ClickUpNotFoundError",
    "ClickUpPermissionError",
    "ClickUpRateLimitError",
    "ClickUpServerError",
    "ClickUpTimeoutError",
    "InvalidParameterError",
    "describe_error",
]
