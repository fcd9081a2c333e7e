"""FastMCP server instance."""

from fastmcp import FastMCP

from clickup_mcp.lifespan import lifespan

mcp = FastMCP("clickup-mcp", lifespan=lifespan)
