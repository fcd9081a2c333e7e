"""Configuration settings loaded from environment variables."""

from __future__ import annotations

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from clickup_mcp.clickup.errors import ClickUpConfigurationError
from clickup_mcp.constants import API_BASE_URL, CHARACTER_LIMIT, DEFAULT_TIMEOUT, MAX_LIMIT


class ClickUpSettings(BaseSettings):
    """ClickUp MCP server settings.

    All settings are loaded from environment variables prefixed with CLICKUP_,
    falling back to a local .env file when one exists.
    """

    model_config = SettingsConfigDict(env_prefix="CLICKUP_", env_file=".env", extra="ignore")

    # Required
    api_token: str

    # Optional
    base_url: str = API_BASE_URL
    timeout: int = DEFAULT_TIMEOUT
    read_only_mode: bool = False
    rate_limit_calls: int = 100
    rate_limit_period: int = 60
    log_level: str = "INFO"
    character_limit: int = CHARACTER_LIMIT
    # ClickUp pages hold at most 100 tasks; a larger size would end scans after one page.
    scan_page_size: int = Field(default=MAX_LIMIT, ge=1, le=MAX_LIMIT)
    # 1 means a failed page aborts the scan; higher values retry transient errors.
    scan_retry_attempts: int = Field(default=1, ge=1)


def load_settings(**overrides) -> ClickUpSettings:
    """Load settings, turning validation failures into a configuration error."""
    try:
        return ClickUpSettings(**overrides)
    except ValidationError as e:
        fields = [".".join(str(p) for p in err["loc"]) for err in e.errors()]
        message = f"Invalid or missing settings: {', '.join(fields)}."
        if "api_token" in fields:
            message += " CLICKUP_API_TOKEN environment variable is required."
        raise ClickUpConfigurationError(message) from e
