#!/usr/bin/env python3
"""Validate ClickUp MCP configuration and test connectivity."""

import asyncio
import sys

from clickup_mcp.clickup.client import ClickUpClient
from clickup_mcp.clickup.errors import ClickUpError, describe_error
from clickup_mcp.settings import load_settings


async def main() -> int:
    print("Loading settings...")
    try:
        settings = load_settings()
    except ClickUpError as e:
        print(f"FAIL: {e}")
        return 1

    print(f"  CLICKUP_BASE_URL: {settings.base_url}")
    print(f"  CLICKUP_API_TOKEN: {'*' * 8}...{settings.api_token[-4:]}")
    print(f"  CLICKUP_READ_ONLY_MODE: {settings.read_only_mode}")

    print("\nTesting connectivity...")
    client = ClickUpClient(
        api_token=settings.api_token,
        base_url=settings.base_url,
        timeout=settings.timeout,
    )

    try:
        teams = (await client.get_teams()).get("teams") or []
        print(f"  OK: Found {len(teams)} accessible teams")
        for t in teams[:5]:
            print(f"    - {t.get('id')}: {t.get('name')}")
        if len(teams) > 5:
            print(f"    ... and {len(teams) - 5} more")
        return 0
    except ClickUpError as e:
        print(f"  FAIL: {describe_error(e)}")
        return 1
    finally:
        await client.close()


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
