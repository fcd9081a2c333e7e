"""List-wide tools that scan every page: status counts and CSV export."""

from __future__ import annotations

from clickup_mcp.constants import ResponseFormat
from clickup_mcp.lifespan import get_clickup_client, get_settings
from clickup_mcp.shaping.csv_export import export_tasks_csv
from clickup_mcp.shaping.formatting import format_status_counts, to_json
from clickup_mcp.shaping.scan import count_tasks_by_status as count_list_tasks_by_status
from clickup_mcp.shaping.scan import scan_list_tasks
from clickup_mcp.tools._common import clickup_tool

NO_RESULTS_MESSAGE = "No tasks found matching the criteria. CSV is empty."


@clickup_tool("clickup_count_tasks_by_status")
async def count_tasks_by_status(
    list_id: str,
    statuses: list[str] | None = None,
    archived: bool = False,
    include_closed: bool = False,
    response_format: ResponseFormat = ResponseFormat.MARKDOWN,
) -> str:
    """Count tasks in a list by status, reading every page of the list.

    Args:
        list_id: The list ID to count tasks in.
        statuses: Only count these status names (case-insensitive). Omit for all.
        archived: Include archived tasks.
        include_closed: Include closed tasks.
        response_format: 'markdown' or 'json'.

    Returns:
        JSON: {"total": int, "by_status": {"status name": count, ...}}.
    """
    client = get_clickup_client()
    settings = get_settings()
    counts = await count_list_tasks_by_status(
        client,
        list_id,
        archived=archived,
        include_closed=include_closed,
        statuses=statuses,
        page_size=settings.scan_page_size,
        retry_attempts=settings.scan_retry_attempts,
    )
    if response_format == ResponseFormat.JSON:
        return to_json(counts.model_dump())
    return format_status_counts(list_id, counts, statuses)


@clickup_tool("clickup_export_tasks_to_csv")
async def export_tasks_to_csv(
    list_id: str,
    statuses: list[str] | None = None,
    archived: bool = False,
    include_closed: bool = False,
    custom_fields: list[str] | None = None,
    include_standard_fields: bool = True,
    add_phone_number_column: bool = False,
) -> str:
    """Export every task in a list as CSV, with custom field columns.

    Args:
        list_id: The list to export from.
        statuses: Only export these status names (case-insensitive). Omit for all.
        archived: Include archived tasks.
        include_closed: Include closed tasks.
        custom_fields: Custom field names to include, in this order. Omit for all found.
        include_standard_fields: Include Task ID, Name, Status, dates, URL, people,
            priority, description and tags before the custom fields.
        add_phone_number_column: Add a combined 'phone_number' column (E.164)
            built from the task's phone fields.

    Returns:
        CSV text with a header row, or a message when no task matches.
    """
    client = get_clickup_client()
    settings = get_settings()
    tasks = await scan_list_tasks(
        client,
        list_id,
        archived=archived,
        include_closed=include_closed,
        statuses=statuses,
        page_size=settings.scan_page_size,
        retry_attempts=settings.scan_retry_attempts,
    )
    csv_text = export_tasks_csv(
        tasks,
        custom_fields=custom_fields,
        include_standard_fields=include_standard_fields,
        add_phone_number_column=add_phone_number_column,
    )
    return csv_text or NO_RESULTS_MESSAGE
