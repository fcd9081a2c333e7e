"""ClickUp MCP server for language-model agents."""

from clickup_mcp.clickup.client import ClickUpClient
from clickup_mcp.server import mcp
from clickup_mcp.settings import ClickUpSettings

__all__ = ["mcp", "ClickUpSettings", "ClickUpClient"]
