from clickup_mcp.guards.permissions import ALL_TOOLS, READ_TOOLS, WRITE_TOOLS
from clickup_mcp.guards.rate_limit import rate_limit, reset_limiter
from clickup_mcp.guards.read_only import check_read_only
from clickup_mcp.guards.text_errors import text_errors

__all__ = [
    "ALL_TOOLS",
    "READ_TOOLS",
    "WRITE_TOOLS",
    "check_read_only",
    "rate_limit",
    "reset_limiter",
    "text_errors",
]
