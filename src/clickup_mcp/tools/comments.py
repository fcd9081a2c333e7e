"""Comment tools: add and retrieve comments on tasks."""

from __future__ import annotations

from clickup_mcp.constants import ResponseFormat
from clickup_mcp.guards.read_only import check_read_only
from clickup_mcp.lifespan import get_clickup_client, get_settings
from clickup_mcp.shaping.formatting import format_comment_markdown, to_json
from clickup_mcp.tools._common import bounded, clickup_tool


@clickup_tool("clickup_get_comments")
async def get_comments(
    task_id: str,
    response_format: ResponseFormat = ResponseFormat.MARKDOWN,
) -> str:
    """Get all comments on a task, newest first."""
    client = get_clickup_client()
    comments = (await client.get_comments(task_id)).get("comments") or []

    if response_format == ResponseFormat.JSON:
        result = to_json({"comments": comments})
    else:
        lines = [f"# Comments on Task {task_id}", ""]
        if not comments:
            lines.append("No comments.")
        for comment in comments:
            lines.extend([format_comment_markdown(comment), ""])
        result = "\n".join(lines)
    return bounded(result, len(comments), "comments", get_settings().character_limit)


@clickup_tool("clickup_add_comment", read_only=False, idempotent=False)
async def add_comment(task_id: str, comment_text: str, notify_all: bool = False) -> str:
    """Add a comment to a task.

    Args:
        task_id: The task ID.
        comment_text: Plain text comment body.
        notify_all: Notify everyone watching the task, including the author.
    """
    check_read_only("clickup_add_comment")
    client = get_clickup_client()
    result = await client.add_comment(task_id, comment_text, notify_all=notify_all)
    return f"Comment {result.get('id')} added to task {task_id}."
