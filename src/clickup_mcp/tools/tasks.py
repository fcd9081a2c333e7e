"""Task tools: paginated listing and search, lookup, create, update, delete."""

from __future__ import annotations

import logging
from typing import Any

from clickup_mcp.clickup.errors import ClickUpBadRequestError, InvalidParameterError
from clickup_mcp.clickup.models import ClickUpCustomField
from clickup_mcp.constants import DEFAULT_LIMIT, Priority, ResponseFormat, ResponseMode
from clickup_mcp.guards.read_only import check_read_only
from clickup_mcp.lifespan import get_clickup_client, get_settings
from clickup_mcp.shaping.custom_fields import extract_custom_field_value
from clickup_mcp.shaping.formatting import format_task_markdown, to_json
from clickup_mcp.shaping.pagination import fetch_window, get_pagination, page_index
from clickup_mcp.shaping.scan import collect_pages, filter_tasks_by_status, scan_list_tasks
from clickup_mcp.tools._common import bounded, clickup_tool, render_task_page

logger = logging.getLogger("clickup_mcp")


@clickup_tool("clickup_get_tasks")
async def get_tasks(
    list_id: str,
    archived: bool = False,
    include_closed: bool = False,
    statuses: list[str] | None = None,
    assignees: list[int] | None = None,
    limit: int = DEFAULT_LIMIT,
    offset: int = 0,
    response_format: ResponseFormat = ResponseFormat.MARKDOWN,
    response_mode: ResponseMode = ResponseMode.FULL,
) -> str:
    """Get tasks in a list with filtering and pagination.

    Args:
        list_id: The list ID.
        archived: Include archived tasks.
        include_closed: Include closed tasks.
        statuses: Filter by status names, e.g. ["to do", "in progress"].
        assignees: Filter by assignee user IDs, e.g. [123, 456].
        limit: Maximum results (1-100, default 20).
        offset: Pagination offset. MUST be a multiple of limit (0, 20, 40, ...).
        response_format: 'markdown' or 'json'.
        response_mode: 'full', 'compact' (essential fields) or 'summary' (counts only).

    Returns:
        The page of tasks with count, offset, has_more and next_offset. Pass
        next_offset back as offset to continue.
    """
    page_index(offset, limit)
    client = get_clickup_client()
    settings = get_settings()

    async def fetch_page(upstream_page: int) -> dict[str, Any]:
        return await client.get_list_tasks(
            list_id,
            page=upstream_page,
            archived=archived,
            include_closed=include_closed,
            statuses=statuses,
            assignees=assignees,
        )

    total: int | None = None
    has_more: bool | None = None
    scanned: list[dict[str, Any]] | None = None
    try:
        tasks, has_more = await fetch_window(fetch_page, offset, limit)
    except ClickUpBadRequestError:
        if not statuses:
            raise
        logger.info("Status filter rejected for list %s; filtering client-side", list_id)
        scanned = await scan_list_tasks(
            client,
            list_id,
            archived=archived,
            include_closed=include_closed,
            statuses=statuses,
            assignees=assignees,
            page_size=settings.scan_page_size,
            retry_attempts=settings.scan_retry_attempts,
        )
        total = len(scanned)
        has_more = None
        tasks = scanned[offset : offset + limit]

    pagination = get_pagination(total, len(tasks), offset, limit, has_more=has_more)
    return render_task_page(
        f"Tasks in List {list_id}",
        tasks,
        pagination,
        response_format=response_format,
        response_mode=response_mode,
        summary_tasks=scanned,
        limit=settings.character_limit,
    )


@clickup_tool("clickup_search_tasks")
async def search_tasks(
    team_id: str,
    query: str | None = None,
    statuses: list[str] | None = None,
    assignees: list[int] | None = None,
    tags: list[str] | None = None,
    date_created_gt: int | None = None,
    date_updated_gt: int | None = None,
    limit: int = DEFAULT_LIMIT,
    offset: int = 0,
    response_format: ResponseFormat = ResponseFormat.MARKDOWN,
    response_mode: ResponseMode = ResponseMode.FULL,
) -> str:
    """Search tasks across a team (workspace) with filters and pagination.

    Args:
        team_id: The team ID to search in.
        query: Optional search text.
        statuses: Filter by status names.
        assignees: Filter by assignee user IDs.
        tags: Filter by tag names.
        date_created_gt: Created after (Unix ms timestamp).
        date_updated_gt: Updated after (Unix ms timestamp).
        limit: Maximum results (1-100, default 20).
        offset: Pagination offset. MUST be a multiple of limit.
        response_format: 'markdown' or 'json'.
        response_mode: 'full', 'compact' or 'summary'.
    """
    page_index(offset, limit)
    client = get_clickup_client()
    settings = get_settings()
    filters: dict[str, Any] = {
        "query": query,
        "assignees": assignees,
        "tags": tags,
        "date_created_gt": date_created_gt,
        "date_updated_gt": date_updated_gt,
    }

    async def fetch_filtered_page(upstream_page: int) -> dict[str, Any]:
        return await client.search_team_tasks(
            team_id, page=upstream_page, statuses=statuses, **filters
        )

    total: int | None = None
    has_more: bool | None = None
    scanned: list[dict[str, Any]] | None = None
    try:
        tasks, has_more = await fetch_window(fetch_filtered_page, offset, limit)
    except ClickUpBadRequestError:
        if not statuses:
            raise
        logger.info("Status filter rejected for team %s search; filtering client-side", team_id)

        async def fetch_page(upstream_page: int) -> dict[str, Any]:
            return await client.search_team_tasks(team_id, page=upstream_page, **filters)

        scanned = filter_tasks_by_status(
            await collect_pages(
                fetch_page,
                page_size=settings.scan_page_size,
                retry_attempts=settings.scan_retry_attempts,
            ),
            statuses,
        )
        total = len(scanned)
        has_more = None
        tasks = scanned[offset : offset + limit]

    pagination = get_pagination(total, len(tasks), offset, limit, has_more=has_more)
    return render_task_page(
        "Task Search Results",
        tasks,
        pagination,
        response_format=response_format,
        response_mode=response_mode,
        summary_tasks=scanned,
        limit=settings.character_limit,
    )


@clickup_tool("clickup_get_task")
async def get_task(
    task_id: str,
    response_format: ResponseFormat = ResponseFormat.MARKDOWN,
) -> str:
    """Get one task by ID, including its custom field values.

    Phone-type custom fields are shown normalized to E.164.
    """
    client = get_clickup_client()
    task = await client.get_task(task_id)

    if response_format == ResponseFormat.JSON:
        result = to_json(task)
    else:
        lines = [format_task_markdown(task)]
        fields = [ClickUpCustomField.model_validate(f) for f in task.get("custom_fields") or []]
        populated = [(f.name, extract_custom_field_value(f)) for f in fields if f.has_value]
        if populated:
            lines.extend(["", "## Custom Fields"])
            lines.extend(f"- {name}: {value}" for name, value in populated)
        result = "\n".join(lines)
    return bounded(result, 1, "task", get_settings().character_limit)


@clickup_tool("clickup_create_task", read_only=False, idempotent=False)
async def create_task(
    list_id: str,
    name: str,
    description: str | None = None,
    status: str | None = None,
    priority: Priority | None = None,
    assignees: list[int] | None = None,
    tags: list[str] | None = None,
    due_date: int | None = None,
    response_format: ResponseFormat = ResponseFormat.MARKDOWN,
) -> str:
    """Create a task in a list.

    Args:
        list_id: The list to create the task in.
        name: Task name.
        description: Optional plain text description.
        status: Optional status name valid for the list.
        priority: 1=Urgent, 2=High, 3=Normal, 4=Low.
        assignees: User IDs to assign.
        tags: Tag names.
        due_date: Due date as Unix ms timestamp.
    """
    check_read_only("clickup_create_task")
    client = get_clickup_client()

    payload: dict[str, Any] = {"name": name}
    if description:
        payload["description"] = description
    if status:
        payload["status"] = status
    if priority is not None:
        payload["priority"] = int(priority)
    if assignees:
        payload["assignees"] = assignees
    if tags:
        payload["tags"] = tags
    if due_date is not None:
        payload["due_date"] = due_date

    task = await client.create_task(list_id, payload)
    if response_format == ResponseFormat.JSON:
        return to_json(task)
    return f"Task created successfully.\n\n{format_task_markdown(task)}"


@clickup_tool("clickup_update_task", read_only=False)
async def update_task(
    task_id: str,
    name: str | None = None,
    description: str | None = None,
    status: str | None = None,
    priority: Priority | None = None,
    due_date: int | None = None,
    add_assignees: list[int] | None = None,
    remove_assignees: list[int] | None = None,
    response_format: ResponseFormat = ResponseFormat.MARKDOWN,
) -> str:
    """Update fields on an existing task. Only the given fields change."""
    check_read_only("clickup_update_task")
    client = get_clickup_client()

    payload: dict[str, Any] = {}
    if name is not None:
        payload["name"] = name
    if description is not None:
        payload["description"] = description
    if status is not None:
        payload["status"] = status
    if priority is not None:
        payload["priority"] = int(priority)
    if due_date is not None:
        payload["due_date"] = due_date
    if add_assignees or remove_assignees:
        payload["assignees"] = {"add": add_assignees or [], "rem": remove_assignees or []}

    if not payload:
        raise InvalidParameterError(
            "No fields to update. Provide at least one of name, description, status, "
            "priority, due_date, add_assignees or remove_assignees."
        )

    task = await client.update_task(task_id, payload)
    if response_format == ResponseFormat.JSON:
        return to_json(task)
    return f"Task {task_id} updated successfully.\n\n{format_task_markdown(task)}"


@clickup_tool("clickup_delete_task", read_only=False, destructive=True)
async def delete_task(task_id: str) -> str:
    """Delete a task. This action is irreversible."""
    check_read_only("clickup_delete_task")
    client = get_clickup_client()
    await client.delete_task(task_id)
    return f"Task {task_id} deleted."
