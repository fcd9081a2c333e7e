"""Time tracking tools."""

from __future__ import annotations

from clickup_mcp.constants import ResponseFormat
from clickup_mcp.guards.read_only import check_read_only
from clickup_mcp.lifespan import get_clickup_client, get_settings
from clickup_mcp.shaping.formatting import format_time_entry_markdown, to_json
from clickup_mcp.tools._common import bounded, clickup_tool


@clickup_tool("clickup_get_time_entries")
async def get_time_entries(
    team_id: str,
    start_date: int | None = None,
    end_date: int | None = None,
    assignee: int | None = None,
    task_id: str | None = None,
    response_format: ResponseFormat = ResponseFormat.MARKDOWN,
) -> str:
    """Get time entries for a team within a date range (Unix ms timestamps).

    ClickUp defaults to the last 30 days for the authenticated user.
    """
    client = get_clickup_client()
    data = await client.get_time_entries(
        team_id, start_date=start_date, end_date=end_date, assignee=assignee, task_id=task_id
    )
    entries = data.get("data") or []

    if response_format == ResponseFormat.JSON:
        result = to_json({"data": entries})
    else:
        lines = [f"# Time Entries for Team {team_id}", "", f"Found {len(entries)} entries", ""]
        for entry in entries:
            lines.extend([format_time_entry_markdown(entry), ""])
        result = "\n".join(lines)
    return bounded(result, len(entries), "time entries", get_settings().character_limit)


@clickup_tool("clickup_start_time_entry", read_only=False, idempotent=False)
async def start_time_entry(
    team_id: str,
    task_id: str,
    description: str | None = None,
    billable: bool = False,
) -> str:
    """Start a timer on a task for the authenticated user."""
    check_read_only("clickup_start_time_entry")
    client = get_clickup_client()
    data = await client.start_time_entry(team_id, task_id, description=description, billable=billable)
    entry = data.get("data") or {}
    if entry.get("id"):
        return f"Timer {entry['id']} started on task {task_id}."
    return f"Timer started on task {task_id}."


@clickup_tool("clickup_stop_time_entry", read_only=False, idempotent=False)
async def stop_time_entry(team_id: str) -> str:
    """Stop the authenticated user's running timer."""
    check_read_only("clickup_stop_time_entry")
    client = get_clickup_client()
    data = await client.stop_time_entry(team_id)
    entry = data.get("data") or {}
    return "Timer stopped.\n\n" + format_time_entry_markdown(entry)
