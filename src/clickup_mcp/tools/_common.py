"""Shared tool registration and paginated task rendering."""

from __future__ import annotations

from typing import Any, Callable

from mcp.types import ToolAnnotations

from clickup_mcp.clickup.models import PaginationInfo
from clickup_mcp.constants import CHARACTER_LIMIT, ResponseFormat, ResponseMode
from clickup_mcp.guards.rate_limit import rate_limit
from clickup_mcp.guards.text_errors import text_errors
from clickup_mcp.server import mcp
from clickup_mcp.shaping.formatting import (
    format_task_compact,
    format_task_markdown,
    generate_task_summary,
    to_json,
)
from clickup_mcp.shaping.truncation import format_truncation_info, truncate_response


def clickup_tool(
    name: str,
    *,
    read_only: bool = True,
    destructive: bool = False,
    idempotent: bool = True,
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Register a coroutine as an MCP tool behind the error boundary and rate limit.

    Returns the wrapped coroutine so it stays directly callable.
    """

    def decorator(fn: Callable[..., Any]) -> Callable[..., Any]:
        wrapped = text_errors(rate_limit(fn))
        mcp.tool(
            name=name,
            annotations=ToolAnnotations(
                readOnlyHint=read_only,
                destructiveHint=destructive,
                idempotentHint=idempotent,
                openWorldHint=True,
            ),
        )(wrapped)
        return wrapped

    return decorator


def bounded(content: str, item_count: int, item_label: str, limit: int = CHARACTER_LIMIT) -> str:
    """Truncate to the character budget and append the warning when cut."""
    content, truncation = truncate_response(content, item_count, item_label, limit)
    return content + format_truncation_info(truncation)


def pagination_line(pagination: PaginationInfo) -> str:
    parts = [
        f"count={pagination.count}",
        f"offset={pagination.offset}",
        f"has_more={str(pagination.has_more).lower()}",
    ]
    if pagination.total is not None:
        parts.insert(0, f"total={pagination.total}")
    if pagination.next_offset is not None:
        parts.append(f"next_offset={pagination.next_offset}")
    return "**Pagination**: " + ", ".join(parts)


def render_task_page(
    title: str,
    tasks: list[dict[str, Any]],
    pagination: PaginationInfo,
    response_format: ResponseFormat = ResponseFormat.MARKDOWN,
    response_mode: ResponseMode = ResponseMode.FULL,
    summary_tasks: list[dict[str, Any]] | None = None,
    limit: int = CHARACTER_LIMIT,
) -> str:
    """Render one page of tasks in the requested format, bounded to ``limit``."""
    if response_format == ResponseFormat.JSON:
        result = to_json({"tasks": tasks, "pagination": pagination.model_dump(exclude_none=True)})
    elif response_mode == ResponseMode.SUMMARY:
        result = generate_task_summary(summary_tasks if summary_tasks is not None else tasks)
    else:
        found = pagination.total if pagination.total is not None else len(tasks)
        lines = [
            f"# {title}",
            "",
            f"Found {found} task(s) (offset: {pagination.offset})",
            pagination_line(pagination),
            "",
        ]
        for task in tasks:
            if response_mode == ResponseMode.COMPACT:
                lines.append(format_task_compact(task))
            else:
                lines.extend([format_task_markdown(task), "", "---", ""])
        if pagination.has_more:
            lines.append(
                f"More results available. Use offset={pagination.next_offset} to get next page."
            )
        result = "\n".join(lines)
    return bounded(result, len(tasks), "tasks", limit)
