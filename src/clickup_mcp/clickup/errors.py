"""ClickUp exception hierarchy and the text rendering used at the tool boundary."""

from __future__ import annotations


class ClickUpError(Exception):
    """Base exception for everything raised by clickup_mcp."""


class ClickUpConfigurationError(ClickUpError):
    """Raised at startup when required settings are missing or invalid."""


class InvalidParameterError(ClickUpError):
    """Raised when tool input is rejected before any network call."""


class ClickUpAPIError(ClickUpError):
    """Base exception for ClickUp API errors."""

    def __init__(self, message: str, status_code: int | None = None, detail: str | None = None):
        self.status_code = status_code
        self.detail = detail
        super().__init__(message)


class ClickUpBadRequestError(ClickUpAPIError):
    """Raised when the request payload is invalid (400)."""

    def __init__(self, message: str = "Bad request.", detail: str | None = None):
        super().__init__(message, status_code=400, detail=detail)


class ClickUpAuthenticationError(ClickUpAPIError):
    """Raised when authentication fails (401)."""

    def __init__(self, message: str = "Authentication failed. Check CLICKUP_API_TOKEN.", detail: str | None = None):
        super().__init__(message, status_code=401, detail=detail)


class ClickUpPermissionError(ClickUpAPIError):
    """Raised when the token lacks access (403) or read-only mode blocks writes."""

    def __init__(self, message: str = "Permission denied.", detail: str | None = None):
        super().__init__(message, status_code=403, detail=detail)


class ClickUpNotFoundError(ClickUpAPIError):
    """Raised when a resource is not found (404)."""

    def __init__(self, message: str = "Resource not found.", detail: str | None = None):
        super().__init__(message, status_code=404, detail=detail)


class ClickUpRateLimitError(ClickUpAPIError):
    """Raised on 429 responses and by the local rate limiter."""

    def __init__(self, message: str = "Rate limit exceeded.", detail: str | None = None):
        super().__init__(message, status_code=429, detail=detail)


class ClickUpServerError(ClickUpAPIError):
    """Raised for 5xx responses."""


class ClickUpTimeoutError(ClickUpAPIError):
    """Raised when the transport timeout expires."""


class ClickUpConnectionError(ClickUpAPIError):
    """Raised when the API host cannot be reached."""


def describe_error(error: BaseException) -> str:
    """Render an exception as the text payload returned to the agent."""
    if isinstance(error, InvalidParameterError):
        return f"Error: {error}"
    if isinstance(error, ClickUpConfigurationError):
        return f"Error: Configuration problem. {error}"
    if isinstance(error, ClickUpTimeoutError):
        return "Error: Request timed out. Please try again."
    if isinstance(error, ClickUpConnectionError):
        return "Error: Cannot connect to ClickUp API. Please check your internet connection."
    if isinstance(error, ClickUpBadRequestError):
        return f"Error: Bad request. {error.detail or 'Check your parameters and try again.'}"
    if isinstance(error, ClickUpAuthenticationError):
        return "Error: Invalid or missing API token. Please check your CLICKUP_API_TOKEN environment variable."
    if isinstance(error, ClickUpPermissionError):
        return f"Error: Permission denied. {error.detail or 'You do not have access to this resource.'}"
    if isinstance(error, ClickUpNotFoundError):
        return f"Error: Resource not found. {error.detail or 'Please check the ID is correct.'}"
    if isinstance(error, ClickUpRateLimitError):
        message = (
            "Error: Rate limit exceeded. Please wait before making more requests. "
            "ClickUp allows 100 requests/minute (Business) or 1000/minute (Business Plus+)."
        )
        return f"{message} {error.detail}" if error.detail else message
    if isinstance(error, ClickUpServerError):
        return "Error: ClickUp server error. Please try again later or check https://status.clickup.com"
    if isinstance(error, ClickUpAPIError):
        return f"Error: API request failed with status {error.status_code}. {error.detail or ''}".rstrip()
    return f"Error: Unexpected error occurred: {error}"
