"""Custom field tools."""

from __future__ import annotations

from typing import Any

from clickup_mcp.guards.read_only import check_read_only
from clickup_mcp.lifespan import get_clickup_client
from clickup_mcp.tools._common import clickup_tool


@clickup_tool("clickup_set_custom_field", read_only=False)
async def set_custom_field(task_id: str, field_id: str, value: Any) -> str:
    """Set a custom field value on a task.

    Value format depends on the field type: text/url/email/phone take a
    string, number/currency a number, date a Unix ms timestamp, dropdown the
    option UUID, checkbox true or false.
    """
    check_read_only("clickup_set_custom_field")
    client = get_clickup_client()
    await client.set_custom_field(task_id, field_id, value)
    return f"Custom field {field_id} updated successfully on task {task_id}."
