"""Guard that blocks write operations when read-only mode is enabled."""

from clickup_mcp.clickup.errors import ClickUpPermissionError
from clickup_mcp.guards.permissions import WRITE_TOOLS
from clickup_mcp.lifespan import get_settings


def check_read_only(tool_name: str) -> None:
    """Raise ClickUpPermissionError if a write tool runs under CLICKUP_READ_ONLY_MODE."""
    if tool_name not in WRITE_TOOLS:
        return
    settings = get_settings()
    if settings.read_only_mode:
        raise ClickUpPermissionError(
            f"Write operation {tool_name} blocked.",
            detail=f"Write operation {tool_name} blocked: CLICKUP_READ_ONLY_MODE is enabled.",
        )
