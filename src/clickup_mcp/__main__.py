"""Entry point for running the ClickUp MCP server: python -m clickup_mcp"""

import clickup_mcp.tools  # noqa: F401 - registers all tools with the server
from clickup_mcp.server import mcp


def main() -> None:
    mcp.run()


if __name__ == "__main__":
    main()
