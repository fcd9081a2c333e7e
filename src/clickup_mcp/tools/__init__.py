"""Importing this package registers every tool with the server."""

from clickup_mcp.tools import (  # noqa: F401
    analytics,
    comments,
    custom_fields,
    hierarchy,
    tasks,
    time_tracking,
)
